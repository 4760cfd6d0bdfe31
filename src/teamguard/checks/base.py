"""
Shared helpers for checks.

Every check visits a sequence of items and records one message per
violation. `each` implements that visit: a callback reports a violation by
raising CheckFailed (or lets a TeamDataError escape), and the message is
recorded without stopping the iteration.
"""

from collections.abc import Callable, Iterable
from typing import TypeVar

from teamguard.domain.exceptions import CheckFailed, TeamDataError
from teamguard.domain.models import ErrorLog

T = TypeVar("T")


def each(
    items: Iterable[T],
    errors: ErrorLog,
    func: Callable[[T, ErrorLog], None],
) -> None:
    """
    Apply func to every item, converting raised violations into messages.

    Args:
        items: Items to visit, in order
        errors: Shared error log; also passed to func for nested visits
        func: Per-item callback, may raise CheckFailed or TeamDataError
    """
    for item in items:
        try:
            func(item, errors)
        except (CheckFailed, TeamDataError) as err:
            errors.push(str(err))

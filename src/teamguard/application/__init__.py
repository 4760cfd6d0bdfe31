"""
Application layer for team data validation.

Orchestrates the check tiers over a data model.
"""

from teamguard.application.validator import Validator, validate

__all__ = [
    "Validator",
    "validate",
]

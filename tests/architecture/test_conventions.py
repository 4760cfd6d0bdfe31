"""
Convention Enforcement Tests.

Permanent tests that catch anti-patterns which import-based layer rules
cannot detect: frozen dataclass conventions, immutable collections,
silent exception swallowing, and interface contracts.
"""

import ast
import inspect
from pathlib import Path

SRC_ROOT = Path(__file__).parent.parent.parent / "src" / "teamguard"

# Documented exceptions to the frozen dataclass rule
MUTABLE_DATACLASS_ALLOWLIST = {"ErrorLog"}


def _dataclass_info(filepath: Path) -> list[tuple[ast.ClassDef, bool]]:
    """Parse a file and return (class node, is_frozen) for each @dataclass."""
    tree = ast.parse(filepath.read_text())
    results = []

    for node in ast.walk(tree):
        if not isinstance(node, ast.ClassDef):
            continue
        for decorator in node.decorator_list:
            is_dataclass = False
            is_frozen = False

            if isinstance(decorator, ast.Name) and decorator.id == "dataclass":
                is_dataclass = True
            elif isinstance(decorator, ast.Call):
                func = decorator.func
                if isinstance(func, ast.Name) and func.id == "dataclass":
                    is_dataclass = True
                    for kw in decorator.keywords:
                        if kw.arg == "frozen" and isinstance(kw.value, ast.Constant):
                            is_frozen = kw.value.value

            if is_dataclass:
                results.append((node, is_frozen))
    return results


class TestFrozenDataclassConvention:
    """All domain dataclasses must be frozen (except allowlisted ones)."""

    def test_domain_models_are_frozen(self):
        """All domain dataclasses must be frozen (except ErrorLog)."""
        models_file = SRC_ROOT / "domain" / "models.py"

        violations = [
            node.name
            for node, is_frozen in _dataclass_info(models_file)
            if not is_frozen and node.name not in MUTABLE_DATACLASS_ALLOWLIST
        ]

        assert not violations, (
            f"Domain dataclasses must be frozen. Violations: {violations}. "
            f"If mutable is intentional, add to MUTABLE_DATACLASS_ALLOWLIST."
        )


class TestImmutableCollections:
    """Frozen domain model fields should use tuple, not list."""

    def test_domain_models_use_tuples_not_lists(self):
        """Frozen domain model fields should use tuple not list."""
        models_file = SRC_ROOT / "domain" / "models.py"
        source = models_file.read_text()

        violations = []
        for node, is_frozen in _dataclass_info(models_file):
            if not is_frozen:
                continue
            for item in node.body:
                if isinstance(item, ast.AnnAssign) and item.target:
                    target_name = getattr(item.target, "id", "?")
                    annotation = ast.get_source_segment(source, item.annotation)
                    if annotation and (
                        "list[" in annotation.lower() or "dict[" in annotation.lower()
                    ):
                        violations.append(f"{node.name}.{target_name}: {annotation}")

        assert not violations, (
            "Frozen dataclass fields should use tuple, not list or dict:\n"
            + "\n".join(f"  - {v}" for v in violations)
        )


class TestNoSilentExceptionSwallowing:
    """No bare 'except: pass' or 'except Exception: pass' in src/."""

    def test_no_bare_except_pass(self):
        """No silent exception swallowing in src/teamguard/."""
        violations = []

        for py_file in SRC_ROOT.rglob("*.py"):
            source = py_file.read_text()
            tree = ast.parse(source)

            for node in ast.walk(tree):
                if not isinstance(node, ast.ExceptHandler):
                    continue
                if node.type is None:
                    rel_path = py_file.relative_to(SRC_ROOT.parent.parent)
                    violations.append(f"{rel_path}:{node.lineno}: bare except")
                    continue
                if len(node.body) == 1:
                    stmt = node.body[0]
                    is_pass = isinstance(stmt, ast.Pass)
                    is_ellipsis = (
                        isinstance(stmt, ast.Expr)
                        and isinstance(stmt.value, ast.Constant)
                        and stmt.value.value is ...
                    )
                    if is_pass or is_ellipsis:
                        rel_path = py_file.relative_to(SRC_ROOT.parent.parent)
                        handler_type = ast.get_source_segment(source, node.type) or ""
                        violations.append(
                            f"{rel_path}:{node.lineno}: except {handler_type}: pass"
                        )

        assert not violations, "Silent exception swallowing found:\n" + "\n".join(
            f"  - {v}" for v in violations
        )


class TestInterfaceConventions:
    """Interface naming and contract conventions."""

    def test_all_ports_end_with_interface(self):
        """All ABCs in domain/interfaces.py must end with 'Interface'."""
        from teamguard.domain import interfaces

        abstract_classes = [
            name
            for name, obj in inspect.getmembers(interfaces, inspect.isclass)
            if inspect.isabstract(obj) and not name.startswith("_")
        ]

        violations = [
            name for name in abstract_classes if not name.endswith("Interface")
        ]

        assert abstract_classes
        assert not violations, (
            f"Abstract classes should end with 'Interface': {violations}"
        )

    def test_all_interface_methods_are_abstract(self):
        """Every public method on a port must be abstract."""
        from teamguard.domain import interfaces

        violations = []

        for name, cls in inspect.getmembers(interfaces, inspect.isclass):
            if not inspect.isabstract(cls) or not name.endswith("Interface"):
                continue

            for method_name, method in inspect.getmembers(
                cls, predicate=inspect.isfunction
            ):
                if method_name.startswith("_"):
                    continue
                if not getattr(method, "__isabstractmethod__", False):
                    violations.append(f"{name}.{method_name}")

        assert not violations, (
            f"Public interface methods must be abstract: {violations}"
        )

    def test_implementations_satisfy_interfaces(self):
        """Every directory adapter implements all abstract methods of its port."""
        from teamguard.domain.interfaces import (
            GitHubDirectoryInterface,
            ZulipDirectoryInterface,
        )
        from teamguard.infrastructure.directory import (
            GitHubDirectory,
            MockGitHubDirectory,
            MockZulipDirectory,
            ZulipDirectory,
        )

        pairs = [
            (GitHubDirectoryInterface, [GitHubDirectory, MockGitHubDirectory]),
            (ZulipDirectoryInterface, [ZulipDirectory, MockZulipDirectory]),
        ]
        for port, implementations in pairs:
            for impl_cls in implementations:
                assert issubclass(impl_cls, port)
                assert not inspect.isabstract(impl_cls), (
                    f"{impl_cls.__name__} is missing methods: "
                    f"{sorted(impl_cls.__abstractmethods__)}"
                )

"""
Module boundary verification.

The order and product packages are application modules that may depend on
the shared base package but never on each other. This module finds every
import in their source files (with `ast`, nothing is executed) and reports
the ones that cross a module boundary.

Usage:
    from modularity import verify, describe_modules

    verify()                 # raises ModuleBoundaryViolation on a bad import
    print(describe_modules())
"""

import ast
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

PROJECT_ROOT = Path(__file__).resolve().parent

# Neutral packages every module may import
BASE_PACKAGES = frozenset({"shared"})


class ModuleBoundaryViolation(Exception):
    """An application module imports another module it is not allowed to."""

    def __init__(self, violations: list[str]):
        self.violations = violations
        super().__init__("Module boundary violations:\n" + "\n".join(violations))


@dataclass(frozen=True)
class ApplicationModule:
    """
    An application module: a top-level package with declared dependencies.

    Attributes:
        name: Display name of the module
        package: Base package name
        allowed_dependencies: Other application modules it may import
    """
    name: str
    package: str
    allowed_dependencies: frozenset[str] = field(default_factory=frozenset)


MODULES: tuple[ApplicationModule, ...] = (
    ApplicationModule(name="Order", package="order"),
    ApplicationModule(name="Product", package="product"),
)


def _imports(path: Path) -> list[str]:
    tree = ast.parse(path.read_text(encoding="utf-8"), filename=str(path))
    result: list[str] = []
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                result.append(alias.name)
        elif isinstance(node, ast.ImportFrom) and node.level == 0 and node.module:
            # Relative imports stay inside the package by construction
            result.append(node.module)
    return result


def source_files(module: ApplicationModule, root: Optional[Path] = None) -> list[Path]:
    """All Python files of a module, sorted."""
    base = (root or PROJECT_ROOT) / module.package
    return sorted(base.rglob("*.py"))


def detect_modules(root: Optional[Path] = None) -> list[ApplicationModule]:
    """The declared modules whose base package exists under `root`."""
    root = root or PROJECT_ROOT
    return [m for m in MODULES if (root / m.package / "__init__.py").is_file()]


def module_dependencies(module: ApplicationModule, root: Optional[Path] = None) -> set[str]:
    """Packages of other application modules imported by `module`."""
    packages = {m.package for m in MODULES}
    found: set[str] = set()
    for path in source_files(module, root):
        for name in _imports(path):
            top = name.split(".")[0]
            if top in packages and top != module.package:
                found.add(top)
    return found


def find_violations(root: Optional[Path] = None) -> list[str]:
    """Every `file: import` pair that crosses a module boundary."""
    root = root or PROJECT_ROOT
    packages = {m.package for m in MODULES}
    violations: list[str] = []
    for module in detect_modules(root):
        allowed = BASE_PACKAGES | module.allowed_dependencies | {module.package}
        for path in source_files(module, root):
            for name in _imports(path):
                top = name.split(".")[0]
                if top in packages and top not in allowed:
                    violations.append(f"{path.relative_to(root)}: {name}")
    return violations


def verify(root: Optional[Path] = None) -> list[ApplicationModule]:
    """
    Check every module against its allowed dependencies.

    Returns:
        The verified modules

    Raises:
        ModuleBoundaryViolation: if any module imports a forbidden module
    """
    violations = find_violations(root)
    if violations:
        raise ModuleBoundaryViolation(violations)
    return detect_modules(root)


def describe_modules(root: Optional[Path] = None) -> str:
    """Human-readable summary of the module structure."""
    lines: list[str] = []
    for module in detect_modules(root):
        deps = sorted(module_dependencies(module, root))
        allowed = sorted(module.allowed_dependencies)
        lines.append(f"Module: {module.name}")
        lines.append(f"Base package: {module.package}")
        lines.append(f"Source files: {len(source_files(module, root))}")
        lines.append(f"Allowed dependencies: {', '.join(allowed) or '(none)'}")
        lines.append(f"Module dependencies: {', '.join(deps) or '(none)'}")
        lines.append("---")
    return "\n".join(lines)

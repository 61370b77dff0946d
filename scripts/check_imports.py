#!/usr/bin/env python3
"""Check import boundaries inside the exemption_bridge package.

Every module belongs to exactly one boundary, named by its dotted path
below the package (`application.ports`, `infrastructure.stubs`, ...).
A module may import from its own boundary and from the boundaries listed
for it in BOUNDARIES; anything else is a violation:

- domain: values and errors, imports nothing from the package
- application.ports / application.services: never see infrastructure
- infrastructure.adapters / infrastructure.stubs: implement ports only
- config: plain settings, imports nothing from the package
- bootstrap: wiring, may reach every inner boundary
- api / cli: outer surfaces, reach services through bootstrap

A module outside every boundary is reported too, so new top-level
modules must be placed explicitly.

Usage:
    python scripts/check_imports.py [package_directory]

Exit codes:
    0: No violations found
    1: Violations found
"""
import ast
import sys
from pathlib import Path
from typing import NamedTuple

PACKAGE_NAME = "exemption_bridge"

# Boundary -> boundaries it may import from (a prefix covers its children)
BOUNDARIES: dict[str, frozenset[str]] = {
    "domain": frozenset(),
    "application.observability": frozenset(),
    "application.ports": frozenset({"domain"}),
    "application.services": frozenset(
        {"domain", "application.ports", "application.observability"}
    ),
    "application": frozenset({"application"}),
    "infrastructure.observability": frozenset({"application.observability"}),
    "infrastructure.adapters": frozenset(
        {"domain", "application.ports", "infrastructure.observability"}
    ),
    "infrastructure.stubs": frozenset({"domain", "application.ports"}),
    "infrastructure": frozenset({"infrastructure"}),
    "config": frozenset(),
    "bootstrap": frozenset({"domain", "application", "infrastructure", "config"}),
    "api": frozenset({"domain", "application.services", "bootstrap", "config"}),
    "cli": frozenset({"domain", "bootstrap", "config"}),
    "__main__": frozenset({"cli"}),
}

# The package root only carries metadata (__version__); anyone may import it
ROOT = ""


class Violation(NamedTuple):
    path: str
    line: int
    message: str


def module_name(py_file: Path, package_dir: Path) -> str | None:
    """Dotted module path of a file below the package, "" for the root."""
    try:
        parts = list(py_file.relative_to(package_dir).with_suffix("").parts)
    except ValueError:
        return None
    if parts and parts[-1] == "__init__":
        parts.pop()
    return ".".join(parts)


def boundary_of(module: str) -> str | None:
    """Most specific boundary containing a module (relative to the package)."""
    if module == ROOT:
        return ROOT
    matches = [
        name
        for name in BOUNDARIES
        if module == name or module.startswith(f"{name}.")
    ]
    return max(matches, key=len) if matches else None


def _covers(allowed: frozenset[str], boundary: str) -> bool:
    return any(boundary == name or boundary.startswith(f"{name}.") for name in allowed)


def imported_modules(
    node: ast.Import | ast.ImportFrom, importer: str, is_package: bool
) -> list[str]:
    """Package-relative names of the package modules a statement imports.

    Relative imports are resolved against the importing module. Imports of
    other distributions are dropped.
    """
    if isinstance(node, ast.Import):
        names = [alias.name for alias in node.names]
    elif node.level:
        base = importer.split(".") if importer else []
        if not is_package:
            base = base[:-1]
        drop = node.level - 1
        if drop > len(base):
            return []
        base = base[: len(base) - drop]
        names = [".".join([PACKAGE_NAME, *base, *filter(None, [node.module])])]
    else:
        names = [node.module] if node.module else []

    modules = []
    for name in names:
        if name == PACKAGE_NAME:
            modules.append(ROOT)
        elif name.startswith(f"{PACKAGE_NAME}."):
            modules.append(name[len(PACKAGE_NAME) + 1 :])
    return modules


def check_file_imports(py_file: Path, package_dir: Path) -> list[Violation]:
    """Check one file against the boundary it belongs to."""
    importer = module_name(py_file, package_dir)
    if importer is None:
        return []

    own = boundary_of(importer)
    if own is None:
        return [Violation(str(py_file), 1, f"{importer} is not in any boundary")]

    try:
        tree = ast.parse(py_file.read_text(encoding="utf-8"), filename=str(py_file))
    except (SyntaxError, UnicodeDecodeError) as e:
        line = getattr(e, "lineno", None) or 1
        return [Violation(str(py_file), line, f"unparseable: {e}")]

    allowed = BOUNDARIES.get(own, frozenset()) | {own}
    is_package = py_file.name == "__init__.py"
    violations = []
    for node in ast.walk(tree):
        if not isinstance(node, (ast.Import, ast.ImportFrom)):
            continue
        for target in imported_modules(node, importer, is_package):
            target_boundary = boundary_of(target)
            if target_boundary == ROOT:
                continue
            if target_boundary is None or not _covers(allowed, target_boundary):
                violations.append(
                    Violation(
                        str(py_file),
                        node.lineno,
                        f"{own or PACKAGE_NAME} cannot import from "
                        f"{target_boundary or target}",
                    )
                )
    return violations


def check_import_boundaries(package_dir: Path) -> list[Violation]:
    """Check every module of the package."""
    if not package_dir.is_dir():
        print(f"Error: {package_dir} is not a directory", file=sys.stderr)
        return []

    violations: list[Violation] = []
    for py_file in sorted(package_dir.rglob("*.py")):
        violations.extend(check_file_imports(py_file, package_dir))
    return violations


def format_violations(violations: list[Violation]) -> str:
    """Format violations for human-readable output."""
    lines = [f"  {v.path}:{v.line}: {v.message}" for v in sorted(violations)]
    return "\n".join(
        ["Import boundary violations found:", "", *lines, "", f"Total: {len(lines)}"]
    )


def main() -> int:
    if len(sys.argv) > 1:
        package_dir = Path(sys.argv[1])
    else:
        package_dir = Path(__file__).resolve().parent.parent / PACKAGE_NAME

    violations = check_import_boundaries(package_dir)
    if violations:
        print(format_violations(violations))
        return 1
    print("No import boundary violations found.")
    return 0


if __name__ == "__main__":
    sys.exit(main())

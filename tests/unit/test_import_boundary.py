"""Unit tests for the import boundary checking script.

Boundaries are the dotted paths listed in BOUNDARIES:
- domain/ and config/ import nothing from the package
- application ports and services never import infrastructure
- adapters and stubs implement ports, they do not import each other
- bootstrap/ wires everything; api/ and cli reach services through it
"""

import ast
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent.parent / "scripts"))

from check_imports import (  # noqa: E402
    BOUNDARIES,
    boundary_of,
    check_file_imports,
    check_import_boundaries,
    format_violations,
    imported_modules,
    module_name,
)

PACKAGE_DIR = Path(__file__).parent.parent.parent / "exemption_bridge"
PORTS = "exemption_bridge.application.ports"


@pytest.fixture
def package_dir(tmp_path: Path) -> Path:
    return tmp_path / "exemption_bridge"


def _write(package_dir: Path, relative: str, source: str) -> Path:
    path = package_dir / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(source)
    return path


class TestBoundaries:
    def test_domain_imports_nothing(self) -> None:
        assert BOUNDARIES["domain"] == frozenset()

    def test_config_imports_nothing(self) -> None:
        assert BOUNDARIES["config"] == frozenset()

    @pytest.mark.parametrize("name", ["application.ports", "application.services"])
    def test_application_never_sees_infrastructure(self, name: str) -> None:
        assert not any(b.startswith("infrastructure") for b in BOUNDARIES[name])

    def test_most_specific_boundary_wins(self) -> None:
        assert boundary_of("application.ports.power_policy") == "application.ports"
        assert boundary_of("infrastructure.stubs") == "infrastructure.stubs"
        assert boundary_of("application") == "application"

    def test_root_and_unknown(self) -> None:
        assert boundary_of("") == ""
        assert boundary_of("plugins.extra") is None


class TestModuleNames:
    def test_package_init_is_the_package(self, package_dir: Path) -> None:
        path = package_dir / "domain" / "models" / "__init__.py"
        assert module_name(path, package_dir) == "domain.models"

    def test_root_init_is_empty(self, package_dir: Path) -> None:
        assert module_name(package_dir / "__init__.py", package_dir) == ""

    def test_outside_package(self, package_dir: Path) -> None:
        assert module_name(Path("/elsewhere/x.py"), package_dir) is None

    def test_absolute_import(self) -> None:
        node = ast.parse("from exemption_bridge.domain.models import X").body[0]
        assert isinstance(node, ast.ImportFrom)
        assert imported_modules(node, "cli", False) == ["domain.models"]

    def test_every_name_of_plain_import(self) -> None:
        node = ast.parse("import exemption_bridge.config, structlog").body[0]
        assert isinstance(node, ast.Import)
        assert imported_modules(node, "cli", False) == ["config"]

    def test_relative_import_resolved(self) -> None:
        node = ast.parse("from ..adapters import adb_shell").body[0]
        assert isinstance(node, ast.ImportFrom)
        assert imported_modules(node, "infrastructure.stubs.x", False) == [
            "infrastructure.adapters"
        ]


class TestCheckFileImports:
    @pytest.mark.parametrize(
        ("relative", "source"),
        [
            ("application/services/ok.py", f"from {PORTS} import P"),
            ("infrastructure/adapters/ok.py", f"from {PORTS} import P"),
            ("bootstrap/ok.py", "from exemption_bridge.infrastructure.stubs import S"),
            ("api/ok.py", "from exemption_bridge.bootstrap.exemption import build"),
            ("cli.py", "from exemption_bridge import __version__"),
            ("domain/ok.py", "import structlog\nfrom fastapi import APIRouter\n"),
        ],
    )
    def test_allowed(self, package_dir: Path, relative: str, source: str) -> None:
        module = _write(package_dir, relative, source)
        assert check_file_imports(module, package_dir) == []

    @pytest.mark.parametrize(
        ("relative", "source", "message"),
        [
            (
                "application/ports/bad.py",
                "from exemption_bridge.infrastructure.adapters import A",
                "application.ports cannot import from infrastructure.adapters",
            ),
            (
                "application/services/bad.py",
                "from exemption_bridge.infrastructure.stubs import S",
                "application.services cannot import from infrastructure.stubs",
            ),
            (
                "infrastructure/stubs/bad.py",
                "from ..adapters.adb_shell import AdbShell",
                "infrastructure.stubs cannot import from infrastructure.adapters",
            ),
            (
                "domain/bad.py",
                "from exemption_bridge.application.services import X",
                "domain cannot import from application.services",
            ),
            (
                "config/bad.py",
                "from exemption_bridge.domain.models import X",
                "config cannot import from domain",
            ),
            (
                "bootstrap/bad.py",
                "from exemption_bridge.api.main import app",
                "bootstrap cannot import from api",
            ),
            (
                "api/bad.py",
                "from exemption_bridge.infrastructure.stubs import S",
                "api cannot import from infrastructure.stubs",
            ),
        ],
    )
    def test_violation(
        self, package_dir: Path, relative: str, source: str, message: str
    ) -> None:
        module = _write(package_dir, relative, source)

        violations = check_file_imports(module, package_dir)

        assert [v.message for v in violations] == [message]
        assert violations[0].line == 1

    def test_module_outside_every_boundary(self, package_dir: Path) -> None:
        module = _write(package_dir, "plugins/extra.py", "")

        violations = check_file_imports(module, package_dir)

        assert [v.message for v in violations] == [
            "plugins.extra is not in any boundary"
        ]

    def test_import_of_unknown_module(self, package_dir: Path) -> None:
        module = _write(package_dir, "cli.py", "import exemption_bridge.plugins")

        violations = check_file_imports(module, package_dir)

        assert [v.message for v in violations] == ["cli cannot import from plugins"]


class TestPackageBoundaries:
    def test_package_has_no_violations(self) -> None:
        """The shipped package respects its own boundaries."""
        assert check_import_boundaries(PACKAGE_DIR) == []

    def test_nonexistent_directory(self) -> None:
        assert check_import_boundaries(Path("/nonexistent/path")) == []

    def test_format_violations(self, package_dir: Path) -> None:
        module = _write(
            package_dir, "domain/bad.py", "from exemption_bridge.config import C"
        )

        report = format_violations(check_import_boundaries(package_dir))

        assert f"{module}:1: domain cannot import from config" in report
        assert report.endswith("Total: 1")

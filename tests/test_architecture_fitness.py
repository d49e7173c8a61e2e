"""Architectural fitness functions to enforce clean architecture principles.

These tests ensure the codebase keeps its layering: core stays framework
agnostic, services depend only on core ports, and only entry points live at
the repository root.
"""

import re
from pathlib import Path

ROOT = Path(__file__).parent.parent
PACKAGE_DIR = ROOT / "duck_curiosities"


def _violations(directory: Path, patterns: list[str]) -> list[Path]:
    found = []
    for py_file in directory.rglob("*.py"):
        content = py_file.read_text(encoding="utf-8")
        if any(re.search(pattern, content, re.MULTILINE) for pattern in patterns):
            found.append(py_file.relative_to(directory))
    return found


def test_no_python_modules_at_root():
    """Only entry points and config files are allowed at the repository root."""
    allowed = {"setup.py", "conftest.py", "main.py", "__main__.py"}
    violations = [f.name for f in ROOT.glob("*.py") if f.name not in allowed]

    assert not violations, f"Unexpected Python modules at root: {violations}"


def test_root_files_are_not_imported():
    """Root-level entry points must be leaf nodes."""
    violations = []
    for py_file in ROOT.glob("*.py"):
        module_name = py_file.stem
        found = _violations(
            PACKAGE_DIR, [rf"^from {module_name} import", rf"^import {module_name}\b"]
        )
        violations.extend(f"{path} imports from {py_file.name}" for path in found)

    assert not violations, "Root-level files are being imported:\n" + "\n".join(violations)


def test_no_fastapi_in_core():
    """Core layer must not import FastAPI."""
    violations = _violations(PACKAGE_DIR / "core", [r"^\s*import fastapi", r"^\s*from fastapi"])

    assert not violations, f"Core layer imports FastAPI: {violations}"


def test_services_do_not_import_adapters_or_apps():
    """Services reach infrastructure only through core ports."""
    violations = _violations(
        PACKAGE_DIR / "services",
        [r"^\s*from duck_curiosities\.(adapters|apps)", r"^\s*import duck_curiosities\.(adapters|apps)"],
    )

    assert not violations, f"Services layer imports adapters/apps: {violations}"


def test_core_does_not_import_services():
    violations = _violations(PACKAGE_DIR / "core", [r"^\s*from duck_curiosities\.services"])

    assert not violations, f"Core layer imports services: {violations}"

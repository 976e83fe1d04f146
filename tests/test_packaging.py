import ast
from pathlib import Path

from setuptools import find_namespace_packages

ROOT = Path(__file__).resolve().parents[1]


def _imported_modules(path: Path):
    tree = ast.parse(path.read_text(encoding="utf-8"))
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            yield from (alias.name for alias in node.names)
        elif isinstance(node, ast.ImportFrom) and node.level == 0 and node.module:
            yield node.module


def test_core_package_does_not_import_service_layer():
    offenders = [
        f"{path.relative_to(ROOT)}: {module}"
        for path in (ROOT / "nen_report").rglob("*.py")
        for module in _imported_modules(path)
        if module == "backend" or module.startswith("backend.")
    ]
    assert offenders == []


def test_backend_without_init_files_is_still_packaged():
    packages = find_namespace_packages(where=str(ROOT), include=["nen_report*", "backend*"])
    assert "nen_report.renderers" in packages
    assert "backend.app" in packages
    assert "backend.app.routers" in packages

"""Architecture enforcement tests for the context package.

Budgeting is pure, synchronous and local: counters and the model table are
evaluated in-process with no network, database or subprocess access. These
static-file scans fail fast if such a dependency is introduced.

Rules validated here:
1) ``crux_context`` must not import network, storage or process modules.
2) ``crux_context.config.defaults`` must stay free of package imports so any
   module can depend on it without creating an import cycle.

These tests are intentionally static-file scans to avoid import-time side
effects, and they emit clear failure messages for quick remediation.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

import pytest

REPO_ROOT = Path(__file__).resolve().parent.parent
PACKAGE_ROOT = REPO_ROOT / "crux_context"


def _iter_python_files(root: Path) -> Iterable[Path]:
    """Yield all Python source files under ``root``, skipping caches and tests."""

    for path in root.rglob("*.py"):
        if "__pycache__" in path.parts or "tests" in path.relative_to(root).parts:
            continue
        yield path


def _read_text(path: Path) -> str:
    return path.read_text(encoding="utf-8", errors="replace")


def test_context_package_has_no_io_dependencies() -> None:
    """Ensure package modules never import network, storage or process modules.

    Forbidden imports (exact substrings in source):
      * ``import requests`` / ``import httpx`` / ``import socket``
      * ``import sqlite3`` / ``import subprocess`` / ``import urllib``
      * ``from`` forms of the same
    """

    if not PACKAGE_ROOT.is_dir():
        pytest.skip("crux_context package not found; skipping boundary check")

    forbidden = ["requests", "httpx", "socket", "sqlite3", "subprocess", "urllib"]
    forbidden_snippets: List[str] = [f"import {m}" for m in forbidden] + [f"from {m}" for m in forbidden]

    offenders: List[str] = []
    for py in _iter_python_files(PACKAGE_ROOT):
        src = _read_text(py)
        offenders.extend(f"{py}: contains '{s}'" for s in forbidden_snippets if s in src)

    if offenders:
        pytest.fail("Context modules must stay free of I/O dependencies.\n" + "\n".join(offenders))


def test_defaults_module_is_import_free() -> None:
    defaults = PACKAGE_ROOT / "config" / "defaults.py"
    src = _read_text(defaults)
    lines = [ln for ln in src.splitlines() if ln.startswith(("import ", "from "))]
    offenders = [ln for ln in lines if ln != "from __future__ import annotations"]
    if offenders:
        pytest.fail(f"config/defaults.py must only hold constants, found imports: {offenders}")

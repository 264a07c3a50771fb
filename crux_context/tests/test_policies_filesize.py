"""Policy test: enforce <=500 LOC per source file.

Keeps modules focused; split a module into a ``*_parts`` package before it
grows past the limit. Counting includes docstrings and comments, which is
acceptable for this coarse policy.
"""

from __future__ import annotations

from pathlib import Path

import pytest

MAX_LOC = 500


def test_source_files_line_count_budget() -> None:
    """Fail if any package source file exceeds MAX_LOC; tests and dunders are skipped."""
    pkg = Path(__file__).resolve().parents[1]
    offenders: list[tuple[str, int]] = []
    for p in pkg.rglob("*.py"):
        rel = p.relative_to(pkg).as_posix()
        if rel.startswith("tests/") or p.name == "__init__.py":
            continue
        with p.open("r", encoding="utf-8") as fh:
            loc = sum(1 for _ in fh)
        if loc > MAX_LOC:
            offenders.append((rel, loc))

    if offenders:
        pytest.fail(f"Files over {MAX_LOC} LOC: {offenders}")


def test_one_class_per_parts_module() -> None:
    """Each ``*_parts`` module defines at most one top-level class."""
    pkg = Path(__file__).resolve().parents[1]
    offenders = []
    for parts_dir in pkg.rglob("*_parts"):
        for p in parts_dir.glob("*.py"):
            if p.name == "__init__.py":
                continue
            classes = [ln for ln in p.read_text(encoding="utf-8").splitlines() if ln.startswith("class ")]
            if len(classes) > 1:
                offenders.append(p.name)
    if offenders:
        pytest.fail(f"Multiple classes in parts modules: {offenders}")

"""Shared fixtures for pii-scan tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from pii_scan.matcher import RuleMatcher


@pytest.fixture
def matcher() -> RuleMatcher:
    return RuleMatcher()


@pytest.fixture
def rules_file(tmp_path: Path) -> Callable[[str], Path]:
    """Write YAML text to a rules file and return its path."""

    def _write(text: str) -> Path:
        path = tmp_path / "rules.yaml"
        path.write_text(text)
        return path

    return _write

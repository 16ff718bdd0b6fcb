"""Shared test fixtures for sha1_digest test suite."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest
from click.testing import CliRunner


# ---------------------------------------------------------------------------
# Sample data
# ---------------------------------------------------------------------------


@pytest.fixture()
def make_file(tmp_path: Path) -> Callable[[bytes, str], Path]:
    """Write bytes to a file under tmp_path and return its path."""

    def _make(data: bytes, name: str = "data.bin") -> Path:
        path = tmp_path / name
        path.write_bytes(data)
        return path

    return _make


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer SHA1_* variables out of the tests."""
    monkeypatch.delenv("SHA1_CHUNK_SIZE", raising=False)
    monkeypatch.delenv("SHA1_LOG_LEVEL", raising=False)

"""Tests for sha1_digest.config — Settings construction and validation."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from sha1_digest.config import Settings, get_settings

pytestmark = pytest.mark.usefixtures("clean_env")


def test_default_values():
    s = Settings()
    assert s.chunk_size == 4096
    assert s.log_level == "INFO"


def test_constructor_with_overrides():
    s = Settings(chunk_size=8192, log_level="DEBUG")
    assert s.chunk_size == 8192
    assert s.log_level == "DEBUG"


def test_env_prefix(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("SHA1_CHUNK_SIZE", "1024")
    assert Settings().chunk_size == 1024


@pytest.mark.parametrize("value", [0, -64, 100, 4095])
def test_chunk_size_must_be_block_multiple(value: int):
    with pytest.raises(ValidationError):
        Settings(chunk_size=value)


def test_get_settings_factory():
    s = get_settings(chunk_size=128)
    assert isinstance(s, Settings)
    assert s.chunk_size == 128


def test_log_level_is_case_insensitive(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("SHA1_LOG_LEVEL", "debug")
    assert Settings().log_level == "DEBUG"


@pytest.mark.parametrize("value", ["bogus", "", "verbose"])
def test_unknown_log_level_rejected(value: str):
    with pytest.raises(ValidationError):
        Settings(log_level=value)

"""Tests for environment settings validation."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from src.config.settings import Settings, load_settings

_REQUIRED = {"TELEGRAM_BOT_TOKEN": "123:abc", "DATABASE_URL": "postgresql://localhost/shop"}


def test_defaults() -> None:
    settings = Settings(_env_file=None, **_REQUIRED)  # type: ignore[arg-type]

    assert settings.default_language == "en-US"
    assert settings.dispatch_timeout_s == 10.0
    assert settings.search_limit == 5


def test_default_language_must_be_registered() -> None:
    settings = Settings(
        _env_file=None, DEFAULT_LANGUAGE=" hi-IN ", **_REQUIRED  # type: ignore[arg-type]
    )
    assert settings.default_language == "hi-IN"

    with pytest.raises(ValidationError):
        Settings(_env_file=None, DEFAULT_LANGUAGE="fr-FR", **_REQUIRED)  # type: ignore[arg-type]


@pytest.mark.parametrize(
    ("name", "value"),
    [("SEARCH_LIMIT", "0"), ("SEARCH_LIMIT", "51"), ("DISPATCH_TIMEOUT_S", "0")],
)
def test_out_of_range_values_are_rejected(name: str, value: str) -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, **{name: value}, **_REQUIRED)  # type: ignore[arg-type]


def test_load_settings_wraps_validation_errors(
        monkeypatch: pytest.MonkeyPatch,
        tmp_path: Path,
) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("TELEGRAM_BOT_TOKEN", raising=False)
    monkeypatch.delenv("DATABASE_URL", raising=False)

    with pytest.raises(RuntimeError):
        load_settings()

"""Tests for command-line settings and logging bootstrap."""

from __future__ import annotations

import logging

import pytest

from cursorchess.app import settings_from_args
from cursorchess.core.notation import STARTING_FEN
from cursorchess.ui.settings import AppSettings


def test_defaults() -> None:
    settings = settings_from_args([])
    assert settings.start_fen == STARTING_FEN
    assert settings.use_unicode_symbols == AppSettings().use_unicode_symbols
    assert not settings.use_unicode_symbols
    assert settings.log_level == "WARNING"


def test_options() -> None:
    fen = "8/8/8/8/8/8/8/8 b - -"
    settings = settings_from_args(["--fen", fen, "--unicode", "--log-level", "debug"])
    assert settings.start_fen == fen
    assert settings.use_unicode_symbols
    assert settings.log_level == "DEBUG"


def test_bad_log_level_rejected() -> None:
    with pytest.raises(SystemExit):
        settings_from_args(["--log-level", "chatty"])


def test_settings_validation() -> None:
    with pytest.raises(ValueError, match="log level"):
        AppSettings(log_level="chatty")
    with pytest.raises(ValueError, match="Font size"):
        AppSettings(font_size=2)
    assert AppSettings(log_level="info").log_level == "INFO"


def test_configure_logging_sets_level(monkeypatch: pytest.MonkeyPatch) -> None:
    from cursorchess.ui.bootstrap import configure_logging

    calls: list[dict[str, object]] = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
    configure_logging(AppSettings(log_level="INFO"))
    assert calls and calls[0]["level"] == logging.INFO

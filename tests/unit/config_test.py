import logging

import pytest

from shapekit.config import normalize_text_style, resolve_log_level, resolve_text_style
from shapekit.core.text import TextStyle


def test_text_style_defaults_to_braces(clean_env: pytest.MonkeyPatch) -> None:
    assert resolve_text_style() is TextStyle.BRACES


def test_text_style_from_environment(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("SHAPEKIT_TEXT_STYLE", "Labeled")
    assert resolve_text_style() is TextStyle.LABELED


def test_explicit_text_style_beats_environment(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("SHAPEKIT_TEXT_STYLE", "labeled")
    assert resolve_text_style("braces") is TextStyle.BRACES


def test_unknown_text_style_lists_supported() -> None:
    with pytest.raises(ValueError, match="Supported: \\['braces', 'labeled'\\]"):
        normalize_text_style("xml")


def test_log_level_defaults_to_warning(clean_env: pytest.MonkeyPatch) -> None:
    assert resolve_log_level() == logging.WARNING


def test_log_level_from_environment(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("SHAPEKIT_LOG_LEVEL", "debug")
    assert resolve_log_level() == logging.DEBUG


def test_explicit_log_level_beats_environment(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("SHAPEKIT_LOG_LEVEL", "debug")
    assert resolve_log_level("error") == logging.ERROR


def test_unknown_log_level_raises(clean_env: pytest.MonkeyPatch) -> None:
    with pytest.raises(ValueError, match="Unsupported log level"):
        resolve_log_level("verbose")

import logging
import os

from shapekit.core.text import TextStyle

_DEFAULT_LOG_LEVEL = "WARNING"
_DEFAULT_TEXT_STYLE = TextStyle.BRACES

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


def normalize_text_style(style: str) -> TextStyle:
    normalized = style.strip().lower()
    try:
        return TextStyle(normalized)
    except ValueError:
        raise ValueError(f"Unsupported text style '{style}'. Supported: {sorted(s.value for s in TextStyle)}") from None


def normalize_log_level(level: str) -> int:
    normalized = level.strip().upper()
    if normalized not in _LOG_LEVELS:
        raise ValueError(f"Unsupported log level '{level}'. Supported: {sorted(_LOG_LEVELS)}")
    return logging.getLevelName(normalized)


def resolve_text_style(style: str | None = None) -> TextStyle:
    """Explicit value first, then ``SHAPEKIT_TEXT_STYLE``, then the default."""
    if style:
        return normalize_text_style(style)
    env_style = os.getenv("SHAPEKIT_TEXT_STYLE")
    if env_style:
        return normalize_text_style(env_style)
    return _DEFAULT_TEXT_STYLE


def resolve_log_level(level: str | None = None) -> int:
    """Explicit value first, then ``SHAPEKIT_LOG_LEVEL``, then the default."""
    if level:
        return normalize_log_level(level)
    return normalize_log_level(os.getenv("SHAPEKIT_LOG_LEVEL", _DEFAULT_LOG_LEVEL))

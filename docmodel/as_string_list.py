"""Utility for reading list-of-string configuration values."""

from typing import Any

from docmodel.errors import ConfigurationError


def as_string_list(value: Any, key: str) -> list[str]:
    """Return ``value`` as a list of strings; a single string becomes a list.

    Raises ``ConfigurationError`` naming ``key`` for any other shape.
    """
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        msg = f"Configuration key [{key}] must be a string or a list of strings"
        raise ConfigurationError(msg)
    return list(value)

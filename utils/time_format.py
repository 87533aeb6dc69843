"""
Date formatting helpers for templates.
"""

from datetime import datetime
from typing import Union

DISPLAY_FORMAT = "%B %d, %Y"


def time_format(value: Union[datetime, str, None]) -> str:
    """
    Format a timestamp for display, e.g. ``January 05, 2024``.

    Accepts datetimes or ISO 8601 strings (a trailing ``Z`` is allowed).
    Returns an empty string for empty input.
    """
    if not value:
        return ''
    if isinstance(value, str):
        value = datetime.fromisoformat(value.replace('Z', '+00:00'))
    return value.strftime(DISPLAY_FORMAT)


def iso_format(value: Union[datetime, str, None]) -> str:
    """Machine-readable value for ``<time datetime="...">``."""
    if not value:
        return ''
    if isinstance(value, str):
        return value
    return value.isoformat()

"""Date parsing and formatting for date-declared fields.

Hydration shows dates in the display format; payload construction sends them
in the payload format. Both directions accept either format back, so a value
can go through hydrate -> payload -> hydrate without drifting.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from loguru import logger

from hydrator.config import get_settings


def parse_date(value: Any) -> datetime | None:
    """Parse a wire or display value into a datetime.

    Accepts datetime/date objects, POSIX timestamps, ISO-8601 strings (a
    trailing ``Z`` is read as UTC), and strings in either configured format.

    Args:
        value: Value to parse.

    Returns:
        Parsed datetime, or None if the value is not recognisable as a date.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        # NaN, infinities and out-of-range values are not dates
        try:
            return datetime.fromtimestamp(value)
        except (OverflowError, ValueError, OSError):
            return None
    if not isinstance(value, str):
        return None

    text = value.strip()
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        pass

    settings = get_settings()
    for fmt in (settings.date_display_format, settings.date_payload_format):
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return None


def _reformat(value: Any, fmt: str) -> Any:
    parsed = parse_date(value)
    if parsed is None:
        logger.warning("Leaving unparseable date value {!r} unformatted", value)
        return value
    return parsed.strftime(fmt)


def format_for_display(value: Any) -> Any:
    """Render a date value in the display format, or return it unchanged."""
    return _reformat(value, get_settings().date_display_format)


def format_for_payload(value: Any) -> Any:
    """Render a date value in the payload format, or return it unchanged."""
    return _reformat(value, get_settings().date_payload_format)

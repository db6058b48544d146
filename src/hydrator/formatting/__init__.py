"""Value formatting applied by capability effects."""

from hydrator.formatting.dates import format_for_display, format_for_payload, parse_date

__all__ = [
    "parse_date",
    "format_for_display",
    "format_for_payload",
]

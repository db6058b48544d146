"""Capability effects on scalar fields.

Hydration coerces checkboxes to 0/1, shows dates in display form, and fills
in a missing primary key. Payload construction turns checkboxes into
booleans and dates into their transmission form.
"""

from __future__ import annotations

import uuid
from typing import Any

from hydrator.core.capability import Capabilities
from hydrator.core.resource import Resource, is_empty
from hydrator.formatting import format_for_display, format_for_payload

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def checkbox_int(value: Any) -> int:
    """Coerce a checkbox value to 0 or 1.

    Strings are read the way HTML forms and query strings send them; other
    values use their truthiness.
    """
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUTHY:
            return 1
        try:
            return 1 if float(text) else 0
        except ValueError:
            return 0
    return 1 if value else 0


def generate_key() -> str:
    """Fresh random identifier for a resource without one."""
    return str(uuid.uuid4())


def apply_hydration_effects(resource: Resource, capabilities: Capabilities) -> None:
    """Apply checkbox, date, and primary key effects after population."""
    for name in capabilities.checkbox_properties or ():
        value = getattr(resource, name, None)
        if value is not None:
            setattr(resource, name, checkbox_int(value))

    for name in capabilities.date_properties or ():
        value = getattr(resource, name, None)
        if not is_empty(value):
            setattr(resource, name, format_for_display(value))

    if capabilities.primary_key is not None:
        key = capabilities.primary_key
        if is_empty(getattr(resource, key, None)):
            setattr(resource, key, generate_key())


def apply_payload_effects(resource: Resource, capabilities: Capabilities) -> None:
    """Apply outbound checkbox and date effects to a resource about to be emitted."""
    for name in capabilities.checkbox_properties or ():
        value = getattr(resource, name, None)
        if value is not None:
            setattr(resource, name, bool(checkbox_int(value)))

    for name in capabilities.date_properties or ():
        value = getattr(resource, name, None)
        if not is_empty(value):
            setattr(resource, name, format_for_payload(value))

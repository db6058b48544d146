"""Field enumeration shared by every pipeline.

The engine never touches resource state except through these helpers,
`getattr`, and `setattr`. Public fields are the instance attributes whose
names do not start with an underscore, in definition then insertion order.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import fields, is_dataclass
from typing import Any


def public_fields(obj: object) -> Iterator[tuple[str, Any]]:
    """Yield (name, value) for every public attribute of an instance.

    Slotted dataclasses have no instance dict; their declared fields are used.
    """
    if hasattr(obj, "__dict__"):
        items = list(vars(obj).items())
    else:
        items = [(f.name, getattr(obj, f.name)) for f in fields(obj)]  # type: ignore[arg-type]
    for name, value in items:
        if not name.startswith("_"):
            yield name, value


def declared_field_names(cls: type) -> frozenset[str]:
    """Names of the dataclass fields declared on a resource type."""
    if not is_dataclass(cls):
        return frozenset()
    return frozenset(f.name for f in fields(cls))


def is_empty(value: Any) -> bool:
    """Check whether a value counts as absent.

    None, the empty string, and empty containers are empty. Zero, "0" and
    False are values like any other.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, Mapping | list | tuple | set | frozenset):
        return len(value) == 0
    return False

"""Dehydration: structural flattening of a resource graph.

No capability effects apply here. The output mirrors live state exactly,
which is what validators and state restoration want.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import is_dataclass
from typing import Any

from pydantic import BaseModel

from hydrator.core.resource import Resource, public_fields


def flatten(value: Any) -> Any:
    """Recursively convert a value into plain dicts, lists, and scalars.

    Resources and other dataclass instances become dicts of their public
    fields, Pydantic models become their dump, mappings become dicts, and
    lists and tuples become lists.
    """
    if isinstance(value, BaseModel):
        return flatten(value.model_dump())
    if isinstance(value, Resource) or (is_dataclass(value) and not isinstance(value, type)):
        return {name: flatten(field_value) for name, field_value in public_fields(value)}
    if isinstance(value, Mapping):
        return {key: flatten(item) for key, item in value.items()}
    if isinstance(value, list | tuple):
        return [flatten(item) for item in value]
    return value


def dehydrate(resource: Resource) -> dict[str, Any]:
    """Flatten a hydrated resource into a plain tree.

    Args:
        resource: Resource to flatten. Never modified.

    Returns:
        Every public field, transitively, with nested resources and
        collections expanded.
    """
    return {name: flatten(value) for name, value in public_fields(resource)}

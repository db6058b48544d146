"""Deep clone of resource graphs.

Payload construction mutates the resource it works on, so it always works
on a clone. Graphs produced by hydration are acyclic; cyclic graphs are not
supported.
"""

from __future__ import annotations

import copy
from typing import Any

from hydrator.core.capability import Cloneable
from hydrator.core.resource import Resource, public_fields
from hydrator.core.types import Copy


def _clone_value(value: Any) -> Any:
    if isinstance(value, Resource):
        return clone(value)
    if isinstance(value, list):
        return [_clone_value(item) for item in value]
    if isinstance(value, tuple):
        return tuple(_clone_value(item) for item in value)
    if isinstance(value, dict):
        return {key: _clone_value(item) for key, item in value.items()}
    return copy.deepcopy(value)


def clone[R: Resource](resource: R) -> Copy[R]:
    """Produce a copy of a resource that shares no mutable state with it.

    Nested resources and every element of a collection are cloned
    recursively. Resources implementing Cloneable supply their own copy.

    Args:
        resource: Resource to copy.

    Returns:
        Independent copy of the same type.
    """
    if isinstance(resource, Cloneable):
        return resource.__clone__()

    copied = copy.copy(resource)
    for name, value in public_fields(resource):
        setattr(copied, name, _clone_value(value))
    return copied

"""Payload construction: the transmission-ready form of a resource.

Works on a clone, so the caller's instance is never modified. The clone is
mutated freely and discarded once the output tree is built.

Output shape:
    - resources with nested data emit only the primary key at the top level
      and their declared composite fields under the nested data key
    - every other resource emits all of its public fields
"""

from __future__ import annotations

from typing import Any

from loguru import logger

from hydrator.config import get_settings
from hydrator.core.capability import Capabilities
from hydrator.core.resource import Resource, get_registry, public_fields
from hydrator.engine.clone import clone
from hydrator.engine.dehydrate import flatten
from hydrator.engine.effects import apply_payload_effects
from hydrator.engine.hydrate import SERVICE_INFO_FIELD


def _payload_value(value: Any) -> Any:
    if isinstance(value, Resource):
        return payload(value)
    return flatten(value)


def _build_composites(resource: Resource, capabilities: Capabilities) -> None:
    entries_key = get_settings().entries_key

    for name in capabilities.resource_collections or {}:
        built = [_payload_value(item) for item in getattr(resource, name, None) or ()]
        if capabilities.is_service_info_field(name):
            service_info = getattr(resource, SERVICE_INFO_FIELD, None) or {}
            wrapped = dict(service_info.get(name) or {})
            wrapped[entries_key] = built
            setattr(resource, name, wrapped)
        else:
            setattr(resource, name, built)

    for name in capabilities.resource_properties or {}:
        nested = getattr(resource, name, None)
        if isinstance(nested, Resource):
            setattr(resource, name, payload(nested))


def _emit(resource: Resource, capabilities: Capabilities) -> dict[str, Any]:
    if capabilities.nested_data_key is None:
        return {name: flatten(value) for name, value in public_fields(resource)}

    stub: dict[str, Any] = {}
    if capabilities.primary_key is not None:
        stub[capabilities.primary_key] = getattr(resource, capabilities.primary_key, None)

    nested: dict[str, Any] = {}
    for name in capabilities.combined_resource_map():
        value = getattr(resource, name, None)
        if value is not None:
            nested[name] = flatten(value)
    stub[capabilities.nested_data_key] = nested
    return stub


def payload(resource: Resource) -> dict[str, Any]:
    """Build the outbound tree for a resource.

    Args:
        resource: Resource to transmit. Never modified.

    Returns:
        Plain tree ready to be encoded for the wire.
    """
    working = clone(resource)
    capabilities = get_registry().meta_for(type(working)).capabilities
    logger.debug("Building payload for {}", type(working).__qualname__)

    apply_payload_effects(working, capabilities)
    _build_composites(working, capabilities)
    working.before_payload()

    return _emit(working, capabilities)

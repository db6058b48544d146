"""Hydration: building a resource from a decoded wire tree.

Steps run in a fixed order:
    1. reject data that is neither a map, a sequence, nor empty
    2. normalise the tree into plain dicts and lists
    3. initialise declared nested resources, collections, and service_info
    4. merge service metadata into service_info
    5. populate fields, unwrapping nested data and instantiating children
    6. apply checkbox, date, and primary key effects
    7. run the resource's after_hydration hook

Errors propagate to the caller with no rollback.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import is_dataclass
from typing import Any

from loguru import logger
from pydantic import BaseModel

from hydrator.config import get_settings
from hydrator.core.capability import Capabilities
from hydrator.core.errors import InvalidInputKind
from hydrator.core.resource import (
    ExtraFields,
    Resource,
    ResourceTypeMeta,
    declared_field_names,
    get_registry,
    is_empty,
)
from hydrator.core.types import TypeToken
from hydrator.engine.dehydrate import flatten
from hydrator.engine.effects import apply_hydration_effects

SERVICE_INFO_FIELD = "service_info"
# Keys that carry stored service metadata; the second is the wire spelling
SERVICE_INFO_KEYS = (SERVICE_INFO_FIELD, "serviceInfo")


def _is_hydratable(data: Any) -> bool:
    if is_empty(data):
        return True
    if isinstance(data, Mapping | list | tuple | Resource | BaseModel):
        return True
    return is_dataclass(data) and not isinstance(data, type)


def normalize(data: Any) -> dict[str, Any]:
    """Convert hydration input into a plain dict tree.

    Object and mapping representations end up identical. A top-level
    sequence is keyed by the string form of each index.
    """
    if is_empty(data):
        return {}
    if isinstance(data, list | tuple):
        return {str(index): flatten(item) for index, item in enumerate(data)}
    flat = flatten(data)
    return {str(key): value for key, value in flat.items()}


def _initialize(resource: Resource, capabilities: Capabilities) -> None:
    registry = get_registry()

    if capabilities.has_service_info and not isinstance(
        getattr(resource, SERVICE_INFO_FIELD, None), dict
    ):
        setattr(resource, SERVICE_INFO_FIELD, {})

    for name, token in (capabilities.resource_properties or {}).items():
        setattr(resource, name, hydrate(registry.resolve(token, name)(), None))

    for name in capabilities.resource_collections or {}:
        setattr(resource, name, [])


def _populate_service_info(
    resource: Resource, capabilities: Capabilities, data: dict[str, Any]
) -> None:
    """Keep service metadata wrapped around collection entries in service_info.

    Metadata arrives either from the service, as a map holding the entries
    next to the metadata, or from previously dehydrated state under the
    service_info (or wire-spelled serviceInfo) key.
    """
    if capabilities.service_info is None:
        return

    effective = data
    if capabilities.nested_data_key is not None:
        nested = data.get(capabilities.nested_data_key)
        if not is_empty(nested) and isinstance(nested, Mapping):
            effective = nested

    entries_key = get_settings().entries_key
    service_info: dict[str, Any] = getattr(resource, SERVICE_INFO_FIELD)
    stored = next(
        (data[key] for key in SERVICE_INFO_KEYS if isinstance(data.get(key), Mapping)), None
    )

    for name in capabilities.service_info:
        if name not in effective:
            continue
        value = effective[name]
        if isinstance(value, Mapping) and entries_key in value:
            merged = {**service_info.get(name, {}), **value}
            del merged[entries_key]
            service_info[name] = merged
        elif isinstance(stored, Mapping) and isinstance(stored.get(name), Mapping):
            if not is_empty(stored[name]):
                service_info[name] = dict(stored[name])


def _collection_source(value: Any, service_info_field: bool) -> list[Any]:
    entries_key = get_settings().entries_key
    if service_info_field and isinstance(value, Mapping) and entries_key in value:
        value = value[entries_key]
    if isinstance(value, Mapping):
        return list(value.values())
    if isinstance(value, list | tuple):
        return list(value)
    if value is not None:
        logger.warning("Ignoring non-sequence collection data of type {}", type(value).__name__)
    return []


def _is_reserved(cls: type, name: str) -> bool:
    """Private names and methods of the resource class are never populated from data."""
    if name.startswith("_"):
        return True
    return name not in declared_field_names(cls) and callable(getattr(cls, name, None))


def _populate_field(
    resource: Resource,
    meta: ResourceTypeMeta,
    combined: dict[str, TypeToken],
    name: str,
    value: Any,
) -> None:
    if _is_reserved(type(resource), name):
        logger.debug("Skipping reserved key {!r} for {}", name, meta.type_name)
        return

    capabilities = meta.capabilities

    if name in combined:
        cls = get_registry().resolve(combined[name], name)
        if capabilities.is_collection_field(name):
            source = _collection_source(value, capabilities.is_service_info_field(name))
            value = [hydrate(cls(), item) for item in source]
        else:
            value = hydrate(cls(), value)

    # stored service metadata is owned by _populate_service_info
    if name in SERVICE_INFO_KEYS or value is None:
        return

    if meta.extra is ExtraFields.IGNORE and name not in declared_field_names(type(resource)):
        if name not in vars(resource):
            logger.debug("Dropping unknown field {!r} for {}", name, meta.type_name)
            return

    setattr(resource, name, value)


def _populate_fields(resource: Resource, meta: ResourceTypeMeta, data: dict[str, Any]) -> None:
    """Assign every key of the data, unwrapping the nested-data key when it holds a map.

    Only a non-empty mapping under the nested-data key is unwrapped. A list there
    is assigned as an ordinary field.
    """
    if not data:
        return

    nested_key = meta.capabilities.nested_data_key
    combined = meta.capabilities.combined_resource_map()

    for name, value in data.items():
        if (
            nested_key is not None
            and name.lower() == nested_key.lower()
            and not is_empty(value)
            and isinstance(value, Mapping)
        ):
            for nested_name, nested_value in value.items():
                _populate_field(resource, meta, combined, nested_name, nested_value)
        else:
            _populate_field(resource, meta, combined, name, value)


def hydrate[R: Resource](resource: R, data: Any = None) -> R:
    """Populate a resource from a decoded wire tree.

    Args:
        resource: Freshly constructed resource to populate in place.
        data: Mapping, sequence, or empty value from a decoder.

    Returns:
        The same resource, hydrated.

    Raises:
        InvalidInputKind: If data is neither a map, a sequence, nor empty.
        UnknownResourceType: If a declared nested type cannot be resolved.
    """
    if not _is_hydratable(data):
        raise InvalidInputKind(type(data).__name__, type(resource).__qualname__)

    normalized = normalize(data)
    meta = get_registry().meta_for(type(resource))
    logger.debug("Hydrating {} with {} keys", meta.type_name, len(normalized))

    _initialize(resource, meta.capabilities)
    _populate_service_info(resource, meta.capabilities, normalized)
    _populate_fields(resource, meta, normalized)
    apply_hydration_effects(resource, meta.capabilities)

    resource.after_hydration(normalized)
    return resource

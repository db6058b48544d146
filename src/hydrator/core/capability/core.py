"""Capability resolution.

Declarations are static per type, so they are read once when a resource type
is registered and frozen into a `Capabilities` set. Dispatch in the engine
reads those flags instead of probing instances.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from hydrator.core.capability.models import (
    Capabilities,
    HasCheckboxProperties,
    HasDateProperties,
    HasNestedData,
    HasPrimaryKey,
    HasResourceCollections,
    HasResourceProperties,
    HasServiceInfo,
    HasSortableResources,
)


def _frozen[V](mapping: Mapping[str, V]) -> Mapping[str, V]:
    return MappingProxyType(dict(mapping))


def resolve_capabilities(cls: type) -> Capabilities:
    """Read every capability declaration of a resource type.

    Args:
        cls: Resource class to inspect.

    Returns:
        Frozen capability set; undeclared capabilities are None.
    """
    return Capabilities(
        resource_properties=(
            _frozen(cls.__resource_properties__())
            if issubclass(cls, HasResourceProperties)
            else None
        ),
        resource_collections=(
            _frozen(cls.__resource_collections__())
            if issubclass(cls, HasResourceCollections)
            else None
        ),
        service_info=(
            _frozen(cls.__service_info__()) if issubclass(cls, HasServiceInfo) else None
        ),
        nested_data_key=(cls.__nested_data_key__() if issubclass(cls, HasNestedData) else None),
        checkbox_properties=(
            tuple(cls.__checkbox_properties__())
            if issubclass(cls, HasCheckboxProperties)
            else None
        ),
        date_properties=(
            tuple(cls.__date_properties__()) if issubclass(cls, HasDateProperties) else None
        ),
        primary_key=(cls.__primary_key__() if issubclass(cls, HasPrimaryKey) else None),
        sortable_resources=(
            _frozen(cls.__sortable_resources__())
            if issubclass(cls, HasSortableResources)
            else None
        ),
    )

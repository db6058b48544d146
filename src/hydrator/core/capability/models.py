"""Capability models: protocols and the resolved capability set.

Capabilities are optional, independently declarable contracts. A resource type
opts into one by implementing the matching classmethod; the engine never asks
an instance, only its type, and only once (see `resolve_capabilities`).

Usage:
    @resource
    @dataclass
    class Order(Resource):
        id: str = ""
        lines: list[Line] = field(default_factory=list)

        @classmethod
        def __primary_key__(cls) -> str:
            return "id"

        @classmethod
        def __resource_collections__(cls) -> dict[str, TypeToken]:
            return {"lines": Line}
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Protocol, Self, runtime_checkable

from hydrator.core.types import TypeToken


@runtime_checkable
class HasResourceProperties(Protocol):
    """Fields hydrated as exactly one nested resource of the mapped type."""

    @classmethod
    def __resource_properties__(cls) -> Mapping[str, TypeToken]: ...


@runtime_checkable
class HasResourceCollections(Protocol):
    """Fields hydrated as an ordered list of resources of the mapped type."""

    @classmethod
    def __resource_collections__(cls) -> Mapping[str, TypeToken]: ...


@runtime_checkable
class HasServiceInfo(Protocol):
    """Collection fields whose wire value carries service metadata besides entries.

    The service may relay extra information alongside a collection, wrapping
    the elements in an ``entries`` key. Declared fields keep that metadata in
    the resource's ``service_info`` side-structure.
    """

    @classmethod
    def __service_info__(cls) -> Mapping[str, str]: ...


@runtime_checkable
class HasNestedData(Protocol):
    """Resources whose user-set data arrives wrapped under one key."""

    @classmethod
    def __nested_data_key__(cls) -> str: ...


@runtime_checkable
class HasCheckboxProperties(Protocol):
    """Fields shown as checkboxes: 0/1 once hydrated, booleans on the wire."""

    @classmethod
    def __checkbox_properties__(cls) -> Sequence[str]: ...


@runtime_checkable
class HasDateProperties(Protocol):
    """Fields holding dates that are formatted for display and for transmission."""

    @classmethod
    def __date_properties__(cls) -> Sequence[str]: ...


@runtime_checkable
class HasPrimaryKey(Protocol):
    """Resources identified by one field, generated when absent."""

    @classmethod
    def __primary_key__(cls) -> str: ...


@runtime_checkable
class HasSortableResources(Protocol):
    """Collection fields that contribute sort parameters to service queries."""

    @classmethod
    def __sortable_resources__(cls) -> Mapping[str, TypeToken]: ...


@runtime_checkable
class IsSortableResource(Protocol):
    """Element types that know how the service should sort them."""

    @classmethod
    def __sort_parameters__(cls) -> tuple[Any, ...]: ...


@runtime_checkable
class Cloneable(Protocol):
    """Resources that produce their own deep copy instead of the generic walk."""

    def __clone__(self) -> Self: ...


@dataclass(slots=True, frozen=True)
class Capabilities:
    """Capability declarations resolved once for a resource type.

    Each slot is None when the type does not declare that capability.
    """

    resource_properties: Mapping[str, TypeToken] | None = None
    resource_collections: Mapping[str, TypeToken] | None = None
    service_info: Mapping[str, str] | None = None
    nested_data_key: str | None = None
    checkbox_properties: tuple[str, ...] | None = None
    date_properties: tuple[str, ...] | None = None
    primary_key: str | None = None
    sortable_resources: Mapping[str, TypeToken] | None = None

    @property
    def has_resource_properties(self) -> bool:
        return self.resource_properties is not None

    @property
    def has_resource_collections(self) -> bool:
        return self.resource_collections is not None

    @property
    def has_service_info(self) -> bool:
        return self.service_info is not None

    @property
    def has_nested_data(self) -> bool:
        return self.nested_data_key is not None

    @property
    def has_checkbox_properties(self) -> bool:
        return self.checkbox_properties is not None

    @property
    def has_date_properties(self) -> bool:
        return self.date_properties is not None

    @property
    def has_primary_key(self) -> bool:
        return self.primary_key is not None

    @property
    def has_sortable_resources(self) -> bool:
        return self.sortable_resources is not None

    def combined_resource_map(self) -> dict[str, TypeToken]:
        """All fields holding a resource or a collection of resources.

        Property declarations win over collection declarations for the same name.
        """
        combined: dict[str, TypeToken] = {}
        if self.resource_collections:
            combined.update(self.resource_collections)
        if self.resource_properties:
            combined.update(self.resource_properties)
        return combined

    def is_collection_field(self, name: str) -> bool:
        return self.resource_collections is not None and name in self.resource_collections

    def is_service_info_field(self, name: str) -> bool:
        return self.service_info is not None and name in self.service_info

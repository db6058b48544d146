"""hydrator: marshalling between wire payloads and typed service resources.

Usage:
    from dataclasses import dataclass
    from hydrator import Resource, resource

    @resource
    @dataclass
    class Detail(Resource):
        x: int = 0

    @resource
    @dataclass
    class Order(Resource):
        id: str = ""
        detail: Detail | None = None

        @classmethod
        def __primary_key__(cls) -> str:
            return "id"

        @classmethod
        def __nested_data_key__(cls) -> str:
            return "data"

        @classmethod
        def __resource_properties__(cls) -> dict[str, type]:
            return {"detail": Detail}

    order = Order.from_data({"id": "", "data": {"detail": {"x": 5}}})
    order.to_payload()  # {"id": "<uuid>", "data": {"detail": {"x": 5}}}
"""

__version__ = "0.1.0"

# Core primitives
from hydrator.core import (
    Capabilities,
    Cloneable,
    Copy,
    ExtraFields,
    HasCheckboxProperties,
    HasDateProperties,
    HasNestedData,
    HasPrimaryKey,
    HasResourceCollections,
    HasResourceProperties,
    HasServiceInfo,
    HasSortableResources,
    HydratorError,
    InvalidInputKind,
    IsSortableResource,
    Resource,
    Tree,
    TypeToken,
    UnknownResourceType,
    get_registry,
    resource,
)

# Pipelines
from hydrator.engine import clone, dehydrate, hydrate, payload

__all__ = [
    # Version
    "__version__",
    # Core
    "Resource",
    "resource",
    "get_registry",
    "ExtraFields",
    "Capabilities",
    "Copy",
    "Tree",
    "TypeToken",
    # Capabilities
    "HasResourceProperties",
    "HasResourceCollections",
    "HasServiceInfo",
    "HasNestedData",
    "HasCheckboxProperties",
    "HasDateProperties",
    "HasPrimaryKey",
    "HasSortableResources",
    "IsSortableResource",
    "Cloneable",
    # Errors
    "HydratorError",
    "InvalidInputKind",
    "UnknownResourceType",
    # Pipelines
    "hydrate",
    "dehydrate",
    "payload",
    "clone",
]

"""Core functionalities: resource model, capability contracts, and errors.

Architecture Note:
    core/ holds declarations only: what a resource is, which optional
    contracts it may satisfy, and how types are looked up. The pipelines
    that act on those declarations live in engine/.
"""

from hydrator.core.capability import (
    Capabilities,
    Cloneable,
    HasCheckboxProperties,
    HasDateProperties,
    HasNestedData,
    HasPrimaryKey,
    HasResourceCollections,
    HasResourceProperties,
    HasServiceInfo,
    HasSortableResources,
    IsSortableResource,
    resolve_capabilities,
)
from hydrator.core.errors import HydratorError, InvalidInputKind, UnknownResourceType
from hydrator.core.resource import (
    ExtraFields,
    Resource,
    ResourceRegistry,
    ResourceTypeMeta,
    capabilities_of,
    declared_field_names,
    get_registry,
    is_empty,
    public_fields,
    resource,
)
from hydrator.core.types import Copy, Tree, TypeToken

__all__ = [
    # Types
    "Copy",
    "Tree",
    "TypeToken",
    # Errors
    "HydratorError",
    "InvalidInputKind",
    "UnknownResourceType",
    # Capability
    "Capabilities",
    "Cloneable",
    "HasCheckboxProperties",
    "HasDateProperties",
    "HasNestedData",
    "HasPrimaryKey",
    "HasResourceCollections",
    "HasResourceProperties",
    "HasServiceInfo",
    "HasSortableResources",
    "IsSortableResource",
    "resolve_capabilities",
    # Resource
    "resource",
    "Resource",
    "ResourceRegistry",
    "ResourceTypeMeta",
    "ExtraFields",
    "get_registry",
    "capabilities_of",
    "public_fields",
    "declared_field_names",
    "is_empty",
]

"""Capability functionality: optional contracts and their resolution."""

from hydrator.core.capability.core import resolve_capabilities
from hydrator.core.capability.models import (
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
)

__all__ = [
    # Models
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
    # Core
    "resolve_capabilities",
]

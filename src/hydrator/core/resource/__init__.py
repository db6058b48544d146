"""Resource functionality: base class, registry, decorator, and field access."""

from hydrator.core.resource.core import (
    ResourceRegistry,
    capabilities_of,
    get_registry,
    resource,
)
from hydrator.core.resource.fields import declared_field_names, is_empty, public_fields
from hydrator.core.resource.models import ExtraFields, Resource, ResourceTypeMeta

__all__ = [
    # Models
    "Resource",
    "ResourceTypeMeta",
    "ExtraFields",
    # Core
    "resource",
    "get_registry",
    "capabilities_of",
    "ResourceRegistry",
    # Fields
    "public_fields",
    "declared_field_names",
    "is_empty",
]

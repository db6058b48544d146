"""Resource models: the base class and registration metadata.

A resource mirrors data owned by an external service rather than by a local
data store, so everything an ORM would normally do at load/save time is done
by the engine instead.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Any, ClassVar, Self

from hydrator.core.capability.models import Capabilities

if TYPE_CHECKING:
    from hydrator.core.types import Copy


class ExtraFields(Enum):
    """How hydration treats keys that do not name a dataclass field."""

    ALLOW = auto()  # Assign as plain instance attributes
    IGNORE = auto()  # Drop them


@dataclass(slots=True, frozen=True)
class ResourceTypeMeta:
    """Metadata for registered resource types."""

    type_key: str
    type_name: str
    capabilities: Capabilities
    extra: ExtraFields


class Resource:
    """Base class for typed entities mirroring data owned by an external service.

    Concrete resources are dataclasses whose fields all have defaults, so the
    engine can construct an empty instance of any declared type before
    hydrating it.

    Usage:
        @resource
        @dataclass
        class Detail(Resource):
            x: int = 0

        detail = Detail.from_data({"x": 5})
        detail.to_dict()     # {"x": 5}
        detail.to_payload()  # {"x": 5}
    """

    __resource_meta__: ClassVar[ResourceTypeMeta]

    @classmethod
    def from_data(cls, data: Any = None) -> Self:
        """Construct an empty instance and hydrate it with decoded wire data.

        Args:
            data: Mapping, sequence, or empty value from a decoder.

        Returns:
            The hydrated resource.

        Raises:
            InvalidInputKind: If data is neither a map, a sequence, nor empty.
            UnknownResourceType: If a declared nested type cannot be resolved.
        """
        # Late import to avoid circular dependency
        from hydrator.engine import hydrate

        return hydrate(cls(), data)

    def to_dict(self) -> dict[str, Any]:
        """Flatten into a plain tree, e.g. to hand to a validator."""
        from hydrator.engine import dehydrate

        return dehydrate(self)

    def to_payload(self) -> dict[str, Any]:
        """Build the transmission-ready tree. Leaves this instance untouched."""
        from hydrator.engine import payload

        return payload(self)

    def clone(self) -> Copy[Self]:
        """Deep copy sharing no mutable state with this instance."""
        from hydrator.engine import clone

        return clone(self)

    def after_hydration(self, data: Mapping[str, Any]) -> None:
        """Customise the resource after hydration finishes.

        Args:
            data: The normalised data the resource was hydrated from.
        """
        return None

    def before_payload(self) -> None:
        """Customise the (cloned) resource right before its payload is emitted."""
        return None

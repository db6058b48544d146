"""Error kinds raised by the marshalling engine.

Both hydration errors are unrecoverable for the call that raised them. The
engine performs no rollback: a resource that fails mid-hydration keeps
whatever the completed steps wrote and should be discarded by the caller.
"""

from __future__ import annotations


class HydratorError(Exception):
    """Base class for all hydrator errors."""


class InvalidInputKind(HydratorError, TypeError):
    """Hydration was given data that is neither a map, a sequence, nor empty.

    Attributes:
        kind: Name of the offending value's type.
        resource_type: Name of the resource type being hydrated.
    """

    def __init__(self, kind: str, resource_type: str) -> None:
        self.kind = kind
        self.resource_type = resource_type
        super().__init__(f"data of {kind} for {resource_type} is unsupported for hydration")


class UnknownResourceType(HydratorError, LookupError):
    """A declared nested-resource field maps to a type that cannot be resolved.

    Attributes:
        field: Name of the field being hydrated (None outside of hydration).
        type_token: The unresolvable class or registry key.
    """

    def __init__(self, type_token: object, field: str | None = None) -> None:
        self.type_token = type_token
        self.field = field
        name = getattr(type_token, "__qualname__", None) or str(type_token)
        if field is None:
            message = f"{name} is not a registered resource type"
        else:
            message = (
                f"Error attempting to hydrate property: {field} as {name}. "
                "Resource type does not exist."
            )
        super().__init__(message)

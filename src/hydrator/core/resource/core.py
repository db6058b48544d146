"""Resource registry and decorator.

Usage:
    @resource
    @dataclass
    class Detail(Resource):
        x: int = 0

    # Registered under an explicit key, usable as a string type token:
    @resource(name="order.line", extra=ExtraFields.IGNORE)
    @dataclass
    class Line(Resource):
        sku: str = ""
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from dataclasses import is_dataclass
from typing import overload

from loguru import logger

from hydrator.core.capability import Capabilities, resolve_capabilities
from hydrator.core.errors import UnknownResourceType
from hydrator.core.resource.models import ExtraFields, Resource, ResourceTypeMeta
from hydrator.core.types import TypeToken


def _default_type_key(cls: type) -> str:
    """Fully qualified class name, stable across processes running the same code."""
    return f"{cls.__module__}.{cls.__qualname__}"


def _check_resource_class(cls: type) -> None:
    if not (isinstance(cls, type) and issubclass(cls, Resource)):
        raise TypeError(f"Resource {cls!r} must subclass hydrator.Resource.")
    if not is_dataclass(cls):
        raise TypeError(
            f"Resource {cls.__name__} must be a dataclass. Did you forget @dataclass decorator?"
        )
    if "__slots__" in cls.__dict__:
        raise TypeError(
            f"Resource {cls.__name__} must not use slots; the engine assigns fields by name."
        )


class ResourceRegistry:
    """Process-local registry mapping stable keys to resource types.

    Maintains bidirectional mapping between resource types and their keys, and
    caches each type's resolved capabilities. Registration, including lazy
    registration on first use, is serialised by a lock and lookups are
    read-only, so one registry is safe to share between concurrent pipelines.
    """

    def __init__(self) -> None:
        """Initialize empty resource registry."""
        self._by_type: dict[type, ResourceTypeMeta] = {}
        self._by_key: dict[str, type[Resource]] = {}
        self._lock = threading.Lock()

    def register(
        self,
        cls: type,
        name: str | None = None,
        extra: ExtraFields = ExtraFields.ALLOW,
    ) -> ResourceTypeMeta:
        """Register a resource type and return its metadata.

        Args:
            cls: Resource class to register.
            name: Stable key for string type tokens. Defaults to the qualified name.
            extra: How hydration treats keys that are not dataclass fields.

        Returns:
            Resource metadata including key and resolved capabilities.

        Raises:
            TypeError: If class is not a slot-free Resource dataclass.
            RuntimeError: If the key is already taken by another type.
        """
        if cls in self._by_type:
            return self._by_type[cls]

        _check_resource_class(cls)
        type_key = name or _default_type_key(cls)

        with self._lock:
            # Another thread may have registered it since the unlocked check
            if cls in self._by_type:
                return self._by_type[cls]

            existing = self._by_key.get(type_key)
            if existing is not None and existing is not cls:
                raise RuntimeError(
                    f"Resource key collision: {cls} and {existing} share {type_key!r}"
                )

            meta = ResourceTypeMeta(
                type_key=type_key,
                type_name=cls.__qualname__,
                capabilities=resolve_capabilities(cls),
                extra=extra,
            )
            self._by_type[cls] = meta
            self._by_key[type_key] = cls
            cls.__resource_meta__ = meta  # type: ignore[attr-defined]
            return meta

    def get_meta(self, cls: type) -> ResourceTypeMeta | None:
        """Get metadata for a registered resource type.

        Args:
            cls: Resource class to look up.

        Returns:
            Resource metadata if registered, None otherwise.
        """
        return self._by_type.get(cls)

    def meta_for(self, cls: type) -> ResourceTypeMeta:
        """Get metadata for a resource type, registering it on first use.

        Args:
            cls: Resource class to look up.

        Returns:
            Resource metadata.
        """
        meta = self._by_type.get(cls)
        if meta is None:
            logger.debug("Registering resource type {} on first use", cls.__qualname__)
            meta = self.register(cls)
        return meta

    def get_type(self, type_key: str) -> type[Resource] | None:
        """Get resource type by its key.

        Args:
            type_key: Registry key to look up.

        Returns:
            Resource class if found, None otherwise.
        """
        return self._by_key.get(type_key)

    def resolve(self, token: TypeToken, field: str | None = None) -> type[Resource]:
        """Turn a type token from a capability declaration into a resource class.

        Args:
            token: Resource class or registry key.
            field: Field being hydrated, for error reporting.

        Returns:
            The resource class, registered if it was not already.

        Raises:
            UnknownResourceType: If the key is unknown or the class is not a resource.
        """
        if isinstance(token, str):
            cls = self._by_key.get(token)
            if cls is None:
                raise UnknownResourceType(token, field)
            return cls
        if isinstance(token, type) and issubclass(token, Resource) and is_dataclass(token):
            self.meta_for(token)
            return token
        raise UnknownResourceType(token, field)

    def is_registered(self, cls: type) -> bool:
        """Check if a type is registered as a resource.

        Args:
            cls: Class to check.

        Returns:
            True if class is registered as resource, False otherwise.
        """
        return cls in self._by_type


# Module-level registry instance
_registry = ResourceRegistry()


def get_registry() -> ResourceRegistry:
    """Access the global resource registry.

    Returns:
        The process-local ResourceRegistry instance.
    """
    return _registry


def capabilities_of(cls: type) -> Capabilities:
    """Shortcut for the resolved capabilities of a resource type."""
    return _registry.meta_for(cls).capabilities


@overload
def resource[R: type](cls: R) -> R: ...


@overload
def resource[R: type](
    cls: None = None, *, name: str | None = None, extra: ExtraFields = ExtraFields.ALLOW
) -> Callable[[R], R]: ...


def resource[R: type](
    cls: R | None = None,
    *,
    name: str | None = None,
    extra: ExtraFields = ExtraFields.ALLOW,
) -> R | Callable[[R], R]:
    """Register a Resource dataclass with the engine.

    Supports three forms:
        @resource                          # bare decorator
        @resource()                        # parenthesized, no args
        @resource(name="line", extra=...)  # factory with args

    Args:
        cls: The class to register, or None if called with arguments.
        name: Stable registry key, usable as a string type token.
        extra: How hydration treats keys that are not dataclass fields.

    Returns:
        Decorated class or decorator function.

    Raises:
        TypeError: If class is not a slot-free Resource dataclass.

    Note:
        Apply @resource AFTER @dataclass:

        >>> @resource
        ... @dataclass
        ... class Detail(Resource):
        ...     x: int = 0
    """

    def decorator(c: R) -> R:
        _registry.register(c, name=name, extra=extra)
        return c

    if cls is None:
        # Called with args: @resource() or @resource(name=...)
        return decorator
    else:
        # Called bare: @resource
        return decorator(cls)

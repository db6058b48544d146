"""Service layer: fetching resources through a transporter.

Services own the endpoint identifiers for one resource type and orchestrate
query/find/create/update/submit calls. Transport and decoding failures are
logged and turned into neutral results, so one bad response never takes down
the caller's request.

Usage:
    class OrderService(ResourceService[Order]):
        resource_type = Order
        query_endpoint = "dom.orders.entry"
        create_endpoint = "app.orders.entry.create"
        update_endpoint = "app.orders.entry.update"
        submit_endpoint = "app.orders.entry.submit"

    service = OrderService(transporter)
    order = service.find("3d9385cc-d26b-4af6-9e9c-440a45d8eca1")
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any, ClassVar

from loguru import logger

from hydrator.core.capability import IsSortableResource
from hydrator.core.errors import HydratorError
from hydrator.core.resource import Resource, capabilities_of, get_registry
from hydrator.service.protocol import InvalidPayloadError, Transporter


def sort_criteria(resource_type: type[Resource]) -> dict[str, list[Any]]:
    """Sort parameters contributed by a resource type's sortable collections.

    Args:
        resource_type: Resource type declaring HasSortableResources.

    Returns:
        Collection field -> sort parameters of its element type. Empty when
        the type declares no sortable collections.
    """
    sortable = capabilities_of(resource_type).sortable_resources or {}
    criteria: dict[str, list[Any]] = {}
    for name, token in sortable.items():
        element_type = get_registry().resolve(token, name)
        if issubclass(element_type, IsSortableResource):
            criteria[name] = list(element_type.__sort_parameters__())
    return criteria


class BaseService:
    """Base functionality for all services."""

    def __init__(self, transporter: Transporter) -> None:
        self.transporter = transporter

    def decode_json(self, text: str | None) -> Any:
        """Decode response text into a tree the engine can hydrate from.

        Args:
            text: Raw response text. Empty text decodes to an empty map.

        Returns:
            Decoded tree.

        Raises:
            InvalidPayloadError: If the text is not valid JSON.
        """
        if not text:
            return {}
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            message = (
                f"Error attempting to set properties for {type(self).__name__}, "
                "invalid json provided."
            )
            logger.critical("{} json={!r}", message, text)
            raise InvalidPayloadError(message) from e


class ResourceService[R: Resource](BaseService):
    """Service for one resource type, with a per-instance find cache.

    Attributes:
        resource_type: Resource type hydrated from responses.
        query_endpoint: Endpoint for query and find calls.
        create_endpoint: Endpoint for creating new resources.
        update_endpoint: Endpoint for saving full resources.
        submit_endpoint: Endpoint for submitting resources for processing.
    """

    resource_type: ClassVar[type[Resource]]
    query_endpoint: ClassVar[str]
    create_endpoint: ClassVar[str]
    update_endpoint: ClassVar[str]
    submit_endpoint: ClassVar[str]

    def __init__(self, transporter: Transporter) -> None:
        super().__init__(transporter)
        self._store: dict[Any, R | None] = {}

    @property
    def key_name(self) -> str:
        """Primary key field of the resource type, ``id`` if none is declared."""
        return capabilities_of(self.resource_type).primary_key or "id"

    def _hydrate(self, data: Any) -> R:
        return self.resource_type.from_data(data)  # type: ignore[return-value]

    def query(self, criteria: Mapping[str, Any]) -> list[R]:
        """Search for resources matching the criteria.

        Args:
            criteria: Criteria parameters sent to the query endpoint.

        Returns:
            Matching resources in response order; empty on failure.
        """
        request = dict(criteria)
        sort = sort_criteria(self.resource_type)
        if sort:
            request.setdefault("sort", sort)

        try:
            decoded = self.decode_json(self.transporter.execute(self.query_endpoint, request))
            if isinstance(decoded, Mapping):
                records = list(decoded.values())
            elif isinstance(decoded, list):
                records = decoded
            else:
                kind = type(decoded).__name__
                raise InvalidPayloadError(f"expected a list of records, got {kind}")
            return [self._hydrate(record) for record in records]
        except HydratorError:
            logger.exception(
                "Unknown error occurred while attempting to parse the json of a {} query. "
                "criteria={}",
                self.resource_type.__qualname__,
                request,
            )
            return []

    def find(self, resource_id: Any) -> R | None:
        """Retrieve one resource by primary key, cached for this service instance.

        Args:
            resource_id: Primary key value to look up.

        Returns:
            The resource, or None if the service returned nothing.
        """
        if resource_id not in self._store:
            results = self.query({self.key_name: resource_id})
            self._store[resource_id] = results[0] if results else None
        return self._store[resource_id]

    def create(self, resource: R) -> str:
        """Create a new resource through the service.

        Args:
            resource: Resource to create.

        Returns:
            Primary key assigned by the service; empty string on failure.
        """
        body = resource.to_payload()
        try:
            decoded = self.decode_json(self.transporter.execute(self.create_endpoint, body))
            if not decoded:
                raise InvalidPayloadError("empty response to create")
            created = self._hydrate(decoded)
            return str(getattr(created, self.key_name))
        except HydratorError:
            logger.exception(
                "Unknown error occurred while attempting to parse the json after creating a {}. "
                "payload={}",
                self.resource_type.__qualname__,
                body,
            )
            return ""

    def update(self, resource: R) -> bool:
        """Save a full resource through the service.

        Args:
            resource: Resource to save.

        Returns:
            True on successful update.
        """
        body = resource.to_payload()
        try:
            self.decode_json(self.transporter.execute(self.update_endpoint, body))
        except HydratorError:
            logger.exception(
                "Unknown error occurred while saving the {}. payload={}",
                self.resource_type.__qualname__,
                body,
            )
            return False
        return True

    def submit(self, resource: R) -> dict[str, Any]:
        """Submit a resource to the service for processing. Submit only once.

        Args:
            resource: Resource to submit.

        Returns:
            Decoded service response, or an error status on failure.
        """
        criteria = {self.key_name: getattr(resource, self.key_name)}
        try:
            decoded = self.decode_json(self.transporter.execute(self.submit_endpoint, criteria))
        except HydratorError as e:
            logger.exception(
                "Unknown error occurred while attempting to submit the {}. criteria={}",
                self.resource_type.__qualname__,
                criteria,
            )
            return {"status": "error", "error": str(e)}
        if isinstance(decoded, Mapping):
            return dict(decoded)
        return {"status": "ok", "data": decoded}

"""Service layer: transporters and resource services built on the engine."""

from hydrator.service.base import BaseService, ResourceService, sort_criteria
from hydrator.service.mock import MockTransporter
from hydrator.service.protocol import InvalidPayloadError, Transporter, TransportError

__all__ = [
    # Protocol
    "Transporter",
    "TransportError",
    "InvalidPayloadError",
    # Implementations
    "MockTransporter",
    "BaseService",
    "ResourceService",
    "sort_criteria",
]

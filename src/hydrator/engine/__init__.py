"""Marshalling pipelines: hydrate, dehydrate, payload, and clone.

The engine is stateless across calls; all mutable state lives in the
resources it processes. Independent calls on distinct resource graphs need
no locking. Operations on one instance must not overlap.
"""

from hydrator.engine.clone import clone
from hydrator.engine.dehydrate import dehydrate, flatten
from hydrator.engine.effects import (
    apply_hydration_effects,
    apply_payload_effects,
    checkbox_int,
    generate_key,
)
from hydrator.engine.hydrate import SERVICE_INFO_FIELD, hydrate, normalize
from hydrator.engine.payload import payload

__all__ = [
    "SERVICE_INFO_FIELD",
    # Pipelines
    "hydrate",
    "dehydrate",
    "payload",
    "clone",
    # Helpers
    "normalize",
    "flatten",
    "checkbox_int",
    "generate_key",
    "apply_hydration_effects",
    "apply_payload_effects",
]

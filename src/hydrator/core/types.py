"""Core type definitions for hydrator."""

from collections.abc import Mapping, Sequence
from typing import Any

type Scalar = str | int | float | bool | None
"""Leaf value of a decoded wire tree."""

type Tree = Mapping[str, Any] | Sequence[Any] | Scalar
"""Decoded wire payload: nested maps, sequences, and scalars.

Hydration accepts whatever a JSON (or equivalent) decoder yields. Payload
construction produces the same shape back, ready to be encoded again.
"""

type TypeToken = type | str
"""Reference to a resource type in a capability declaration.

Either the class itself or the key it was registered under. String tokens
are resolved lazily at hydration time, so declarations may reference types
that are registered later.
"""

type Copy[T] = T
"""Type alias indicating a value is an independent deep copy.

When you see `Copy[T]` in a return type, mutating the returned value
never affects the instance it was copied from.
"""

"""Kernel – framework-agnostic building blocks."""

from scopelog.kernel.errors import (
    ApplicationError,
    BaseError,
    InfrastructureError,
    SerializationError,
)
from scopelog.kernel.time import Clock, FrozenClock, SystemClock
from scopelog.kernel.types import IdSource, uuid4_id

__all__ = [
    "ApplicationError",
    "BaseError",
    "Clock",
    "FrozenClock",
    "IdSource",
    "InfrastructureError",
    "SerializationError",
    "SystemClock",
    "uuid4_id",
]

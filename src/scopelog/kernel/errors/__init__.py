"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── ApplicationError     (application.py)
    │   └── ConfigError      (scopelog.config.validation)
    └── InfrastructureError  (infrastructure.py)
        └── SerializationError
"""

from scopelog.kernel.errors.application import ApplicationError
from scopelog.kernel.errors.base import BaseError
from scopelog.kernel.errors.infrastructure import InfrastructureError, SerializationError

__all__ = [
    "ApplicationError",
    "BaseError",
    "InfrastructureError",
    "SerializationError",
]

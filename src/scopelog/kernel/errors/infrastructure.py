"""Infrastructure errors — failures while rendering or delivering log output."""

from __future__ import annotations

from typing import Any

from scopelog.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Rendering / I/O failure that is not a caller mistake."""

    default_code = "infrastructure_error"


class SerializationError(InfrastructureError):
    """Failed to serialize a log event.

    Raised by the JSON backend when the payload (or context) cannot be
    rendered, e.g. because it holds a cyclic reference or an object the
    encoder does not understand.  Nothing reaches the sink in that case.
    """

    default_code = "serialization_error"

    def __init__(
        self,
        message: str,
        *,
        payload_type: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.payload_type = payload_type

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        if self.payload_type is not None:
            payload["payload_type"] = self.payload_type
        return payload


__all__ = ["InfrastructureError", "SerializationError"]

"""Application-layer errors raised while wiring loggers together."""

from __future__ import annotations

from scopelog.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Misuse or misconfiguration detected by the library itself."""

    default_code = "application_error"


__all__ = ["ApplicationError"]

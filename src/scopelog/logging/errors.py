"""scopelog.logging – turn raised values into plain, JSON-friendly data.

Use with any logger to attach a failure as the event payload::

    try:
        do_work()
    except Exception as exc:
        logger.error("worker", "job failed", create_error_object(exc))
"""
from __future__ import annotations

import json
import traceback
from typing import Any


class _Undefined:
    """Marker for "no value at all", distinct from ``None``."""

    _instance: "_Undefined | None" = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False


UNDEFINED: Any = _Undefined()


def create_error_object(e: object) -> dict[str, Any]:
    """Convert *e* into a plain dict.

    Exceptions keep ``name``, ``message``, ``cause`` and ``stack``; the
    cause is converted the same way, and a cause already seen higher up the
    chain becomes ``None``.  Any other value becomes
    ``{"detail": stringify_unknown(e)}``.
    """
    if isinstance(e, BaseException):
        return _exception_object(e, set())
    return {"detail": stringify_unknown(e)}


def _exception_object(e: BaseException, seen: set[int]) -> dict[str, Any]:
    seen.add(id(e))
    cause = e.__cause__
    return {
        "name": type(e).__name__,
        "message": str(e),
        "cause": _exception_object(cause, seen) if cause is not None and id(cause) not in seen else None,
        "stack": _format_stack(e),
    }


def _format_stack(e: BaseException) -> str | None:
    if e.__traceback__ is None:
        return None
    return "".join(traceback.format_exception(type(e), e, e.__traceback__, chain=False))


def stringify_unknown(o: object) -> str:
    """Best-effort string form of an arbitrary value."""
    if o is UNDEFINED:
        return "undefined"
    if o is None:
        return "null"
    if isinstance(o, bool):
        return "true" if o else "false"
    if isinstance(o, (str, int, float, bytes)):
        return str(o)
    if callable(o):
        return getattr(o, "__name__", None) or repr(o)
    try:
        return json.dumps(o)
    except (TypeError, ValueError):
        return repr(o)


__all__ = ["UNDEFINED", "create_error_object", "stringify_unknown"]

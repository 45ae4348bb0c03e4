"""Identifier sources used to name scopes."""

from __future__ import annotations

import uuid
from typing import Callable

IdSource = Callable[[], str]
"""Zero-argument callable returning a fresh, practically unique id."""


def uuid4_id() -> str:
    """Return a random UUID4 as its canonical 36-character string."""
    return str(uuid.uuid4())


__all__ = ["IdSource", "uuid4_id"]

"""Kernel types – identifier sources."""
from scopelog.kernel.types.ids import IdSource, uuid4_id

__all__ = ["IdSource", "uuid4_id"]

"""Kernel time – Clock port + implementations."""
from scopelog.kernel.time.clock import Clock, FrozenClock, SystemClock, to_epoch_millis

__all__ = ["Clock", "FrozenClock", "SystemClock", "to_epoch_millis"]

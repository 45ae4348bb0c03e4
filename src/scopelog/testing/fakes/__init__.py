"""Testing fakes – in-memory doubles for sinks, loggers and clocks."""
from scopelog.kernel.time import FrozenClock
from scopelog.testing.fakes.clock import FakeClock
from scopelog.testing.fakes.recording import LogCall, RecordingLogger, RecordingSink

__all__ = ["FakeClock", "FrozenClock", "LogCall", "RecordingLogger", "RecordingSink"]

"""Testing support – recording sinks/loggers, fake clock, deterministic ids.

Typical use::

    from scopelog.testing import FakeClock, RecordingSink, sequential_ids

    sink = RecordingSink()
    logger = JsonLogger(sink, clock=FakeClock(), id_source=sequential_ids("scope"))
"""

from scopelog.testing.fakes import FakeClock, LogCall, RecordingLogger, RecordingSink
from scopelog.testing.generators import sequential_ids

__all__ = ["FakeClock", "LogCall", "RecordingLogger", "RecordingSink", "sequential_ids"]

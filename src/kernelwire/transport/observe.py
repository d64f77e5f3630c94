"""Observability sinks for outbound traffic."""

from __future__ import annotations

import logging
from typing import Any, Optional

from .base import Sink


class LogSink(Sink):
    """Write a line per outbound message to a :mod:`logging` logger."""

    def __init__(self, logger: Optional[logging.Logger] = None, level: int = logging.DEBUG):
        if logger is None:
            logger = logging.getLogger("kernelwire.outbound")
        self.logger = logger
        self.level = level

    def record(self, msg_type: str, content: Any) -> None:
        if not self.logger.isEnabledFor(self.level):
            return
        self.logger.log(self.level, "<-- %s", msg_type)
        self.logger.log(self.level, "%r", content)


class NullSink(Sink):
    """Discard everything."""

    def record(self, msg_type: str, content: Any) -> None:
        pass


class MemorySink(Sink):
    """Keep every record in a list; handy for tests and debugging."""

    def __init__(self):
        self.records = []

    def record(self, msg_type: str, content: Any) -> None:
        self.records.append((msg_type, content))

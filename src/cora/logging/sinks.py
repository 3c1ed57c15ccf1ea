"""
sinks – Debug sinks injected into the walker and the concatenator.

A sink has a single operation, ``record(line)``. The core never talks to
a global logger for its decision trace; callers decide where lines go.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from cora.core.interfaces.logging import DebugSinkProtocol
from cora.logging.helpers import get_logger


class NullDebugSink(DebugSinkProtocol):
    """Discard every line."""

    def record(self, line: str) -> None:
        return None


class LoggerDebugSink(DebugSinkProtocol):
    """Forward lines to a logger at DEBUG level."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._log = logger or get_logger('debug')

    def record(self, line: str) -> None:
        self._log.debug('%s', line)


@dataclass
class ListDebugSink(DebugSinkProtocol):
    """Keep lines in memory (handy for programmatic callers and tests)."""

    lines: List[str] = field(default_factory=list)

    def record(self, line: str) -> None:
        self.lines.append(line)


def make_debug_sink(enabled: bool, *, logger: Optional[logging.Logger] = None) -> DebugSinkProtocol:
    """Return a logger-backed sink when *enabled*, else a no-op sink."""
    if enabled:
        return LoggerDebugSink(logger)
    return NullDebugSink()

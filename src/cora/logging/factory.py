from __future__ import annotations

import logging
from typing import Optional, TextIO

from cora.core.interfaces.logging import DebugSinkProtocol, LoggerFactoryProtocol
from cora.logging.helpers import get_logger, setup_base_logger
from cora.logging.sinks import LoggerDebugSink, NullDebugSink


class CoraLoggerFactory(LoggerFactoryProtocol):
    """Per-run logging setup: base logger format/level plus the debug sink.

    ``debug`` lowers the base level to DEBUG and routes walker/concatenator
    decisions to the ``cora.debug`` logger; otherwise decisions are dropped.
    The base logger is configured on first use only.
    """

    def __init__(self, *, json_logs: bool = False, debug: bool = False, stream: Optional[TextIO] = None) -> None:
        self.json_logs = bool(json_logs)
        self.debug = bool(debug)
        self._stream = stream
        self._base: Optional[logging.Logger] = None

    @property
    def level(self) -> int:
        return logging.DEBUG if self.debug else logging.INFO

    def _base_logger(self) -> logging.Logger:
        if self._base is None:
            self._base = setup_base_logger(json_logs=self.json_logs, level=self.level, stream=self._stream)
        return self._base

    def get_logger(self, name: str) -> logging.Logger:
        self._base_logger()
        return get_logger(name)

    def debug_sink(self) -> DebugSinkProtocol:
        if not self.debug:
            return NullDebugSink()
        return LoggerDebugSink(self.get_logger('debug'))

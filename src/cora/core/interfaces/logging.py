from __future__ import annotations
import logging
from typing import Protocol, runtime_checkable


@runtime_checkable
class DebugSinkProtocol(Protocol):
    """Receives one line of diagnostic text per walker/concatenator decision."""

    def record(self, line: str) -> None: ...


@runtime_checkable
class LoggerFactoryProtocol(Protocol):
    """Configures cora's loggers and hands out the matching debug sink."""

    def get_logger(self, name: str) -> logging.Logger:
        """Return the `cora.<name>` logger, configuring the base logger first."""
        ...

    def debug_sink(self) -> DebugSinkProtocol:
        """Return the sink decision lines should go to for this run."""
        ...

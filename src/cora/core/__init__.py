from __future__ import annotations

"""Public surface for cora.core.

Stable import location for the configuration model, entry decisions,
run reports and protocol types:

    from cora.core import CoraConfig, RunReport, WalkerProtocol, ...
"""

from cora.core.interfaces import (
    ConcatenatorProtocol,
    DebugSinkProtocol,
    LoggerFactoryProtocol,
    WalkerProtocol,
)
from cora.core.models import CoraConfig, EntryDecision
from cora.core.report import RunReport, StageTimer

__all__ = [
    # Protocols
    "ConcatenatorProtocol",
    "DebugSinkProtocol",
    "LoggerFactoryProtocol",
    "WalkerProtocol",
    # Models
    "CoraConfig",
    "EntryDecision",
    "RunReport",
    "StageTimer",
]

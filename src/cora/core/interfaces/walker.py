from __future__ import annotations
from typing import List, Protocol, runtime_checkable


@runtime_checkable
class WalkerProtocol(Protocol):
    """Abstract file walker."""

    def walk(self) -> List[str]:
        """Return the ordered list of files selected under the root."""
        ...

from __future__ import annotations
from typing import Protocol, Sequence, runtime_checkable


@runtime_checkable
class ConcatenatorProtocol(Protocol):
    """Abstract streaming concatenator."""

    def concatenate(self, paths: Sequence[str]) -> int:
        """Write *paths* into the output file and return the bytes written."""
        ...

"""
errors – Exception hierarchy for cora.

Every failure raised by the core derives from :class:`CoraError` so the CLI
can report it with a single handler. Concrete errors carry the path and the
operation that failed; the underlying ``OSError`` is kept as ``__cause__``.
"""
from __future__ import annotations

from typing import Optional


class CoraError(Exception):
    """Base class for all cora errors."""


class ConfigError(CoraError):
    """Invalid or incomplete configuration (raised before touching the FS)."""


class WalkError(CoraError):
    """Traversal failure while enumerating the source directory."""

    def __init__(self, message: str, *, path: Optional[str] = None, operation: str = 'walk') -> None:
        super().__init__(message)
        self.path = path
        self.operation = operation

    def __str__(self) -> str:
        msg = super().__str__()
        if self.path is None:
            return f'{self.operation}: {msg}'
        return f'{self.operation} {self.path}: {msg}'


class GlobPatternError(WalkError):
    """A glob pattern has invalid syntax."""

    def __init__(self, message: str, *, pattern: str) -> None:
        super().__init__(message, path=None, operation='compile pattern')
        self.pattern = pattern

    def __str__(self) -> str:
        return f'{self.operation} {self.pattern!r}: {Exception.__str__(self)}'


class ConcatError(CoraError):
    """Failure while assembling the output file.

    ``phase`` is one of ``setup``, ``open``, ``read`` or ``write``.
    """

    def __init__(self, message: str, *, path: str, phase: str) -> None:
        super().__init__(message)
        self.path = path
        self.phase = phase

    def __str__(self) -> str:
        return f'{self.phase} {self.path}: {super().__str__()}'

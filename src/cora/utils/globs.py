# src/cora/utils/globs.py
"""
globs – Shell-style glob matching over forward-slash relative paths.

Provides:
  • compile_pattern(str)           – validate and compile one pattern
  • compile_patterns(seq)          – compile an ordered pattern list
  • matches_any(rel_path, pats)    – base-name / full-path matching rule

Semantics
---------
``*`` matches any run of characters except ``/``, ``?`` matches a single
non-``/`` character and ``[...]`` matches a character class (``^`` or ``!``
negates, ``a-z`` ranges, ``\\`` escapes). A pattern containing ``/`` is
matched against the whole relative path; a pattern without one is matched
against the last path component only, so ``node_modules`` prunes that
directory at any depth.

Notes
-----
``**`` carries no recursive meaning: it is two adjacent ``*`` and therefore
still stops at ``/``. ``**/*.go`` matches ``pkg/main.go`` but not
``pkg/sub/main.go``.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple

from cora.errors import GlobPatternError


@dataclass(frozen=True)
class GlobPattern:
    """A compiled glob pattern."""

    raw: str
    regex: 're.Pattern[str]'
    full_path: bool

    def matches(self, rel_path: str) -> bool:
        target = rel_path if self.full_path else rel_path.rsplit('/', 1)[-1]
        return self.regex.fullmatch(target) is not None


def _class_char(pattern: str, i: int) -> Tuple[str, int]:
    if pattern[i] == '\\':
        if i + 1 >= len(pattern):
            raise GlobPatternError('trailing escape inside character class', pattern=pattern)
        return pattern[i + 1], i + 2
    return pattern[i], i + 1


def _translate_class(pattern: str, i: int) -> Tuple[str, int]:
    """Translate the class starting right after ``[``; return (regex, next index)."""
    n = len(pattern)
    negated = False
    if i < n and pattern[i] in '^!':
        negated = True
        i += 1

    items = []
    while True:
        if i >= n:
            raise GlobPatternError('unterminated character class', pattern=pattern)
        if pattern[i] == ']':
            if not items:
                raise GlobPatternError('empty character class', pattern=pattern)
            i += 1
            break
        lo, i = _class_char(pattern, i)
        hi = lo
        if i + 1 < n and pattern[i] == '-' and pattern[i + 1] != ']':
            hi, i = _class_char(pattern, i + 1)
            if hi < lo:
                raise GlobPatternError(f'invalid range {lo}-{hi}', pattern=pattern)
        if lo == hi:
            items.append(re.escape(lo))
        else:
            items.append(f'{re.escape(lo)}-{re.escape(hi)}')

    return '[' + ('^' if negated else '') + ''.join(items) + ']', i


def translate(pattern: str) -> str:
    """Return a regular expression source equivalent to *pattern*."""
    out = []
    i, n = 0, len(pattern)
    while i < n:
        c = pattern[i]
        i += 1
        if c == '*':
            out.append('[^/]*')
        elif c == '?':
            out.append('[^/]')
        elif c == '[':
            cls, i = _translate_class(pattern, i)
            out.append(cls)
        elif c == '\\':
            if i >= n:
                raise GlobPatternError('trailing escape', pattern=pattern)
            out.append(re.escape(pattern[i]))
            i += 1
        else:
            out.append(re.escape(c))
    return ''.join(out)


def normalize_pattern(pattern: str) -> str:
    """Convert host separators to ``/`` (no-op on POSIX)."""
    if os.sep != '/':
        pattern = pattern.replace(os.sep, '/')
    return pattern


def compile_pattern(pattern: str) -> GlobPattern:
    """Validate and compile *pattern*; raise GlobPatternError on bad syntax."""
    norm = normalize_pattern(pattern)
    regex = re.compile(translate(norm), re.DOTALL)
    return GlobPattern(raw=norm, regex=regex, full_path='/' in norm)


def compile_patterns(patterns: Iterable[str] | None) -> Tuple[GlobPattern, ...]:
    return tuple(compile_pattern(p) for p in (patterns or ()))


def matches_any(rel_path: str, patterns: Sequence[GlobPattern]) -> bool:
    """Return True if *rel_path* (forward slashes) matches any pattern."""
    return any(p.matches(rel_path) for p in patterns)

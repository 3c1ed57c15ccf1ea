from __future__ import annotations
import logging
import os
import stat
from typing import List, Optional, Sequence, Tuple

from cora.core.interfaces import DebugSinkProtocol, WalkerProtocol
from cora.core.models import EntryDecision
from cora.errors import WalkError
from cora.logging.helpers import get_logger
from cora.logging.sinks import NullDebugSink
from cora.utils.globs import GlobPattern, compile_patterns, matches_any


def classify_entry(
    rel_path: str,
    *,
    is_dir: bool,
    exclude: Sequence[GlobPattern],
    include: Sequence[GlobPattern],
) -> EntryDecision:
    """Classify one entry by its root-relative, forward-slash path.

    Exclusion wins over inclusion. Include patterns only apply to files;
    a directory that is not excluded is always INCLUDED (descended).
    """
    if matches_any(rel_path, exclude):
        return EntryDecision.EXCLUDED
    if is_dir or not include:
        return EntryDecision.INCLUDED
    if matches_any(rel_path, include):
        return EntryDecision.INCLUDED
    return EntryDecision.SKIPPED


class Walker(WalkerProtocol):
    """Pre-order, name-sorted traversal of a directory with glob filters.

    Returned paths are joined onto ``root`` exactly as it was given, so an
    absolute root yields absolute paths.
    """

    def __init__(
        self,
        root: str,
        *,
        exclude_patterns: Sequence[str] = (),
        include_patterns: Sequence[str] = (),
        debug_sink: Optional[DebugSinkProtocol] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._root = os.fspath(root)
        self._exclude_raw = tuple(exclude_patterns or ())
        self._include_raw = tuple(include_patterns or ())
        self._sink = debug_sink or NullDebugSink()
        self._log = logger or get_logger('io.walker')

    @property
    def root(self) -> str:
        return self._root

    def _compile(self) -> Tuple[Tuple[GlobPattern, ...], Tuple[GlobPattern, ...]]:
        # GlobPatternError is a WalkError: bad syntax aborts before any I/O.
        return compile_patterns(self._exclude_raw), compile_patterns(self._include_raw)

    def walk(self) -> List[str]:
        exclude, include = self._compile()
        if not os.path.isdir(self._root):
            if os.path.exists(self._root):
                raise WalkError('not a directory', path=self._root, operation='open root')
            raise WalkError('no such directory', path=self._root, operation='open root')

        files: List[str] = []
        stack: List[Tuple[str, str]] = []
        self._push_children(stack, self._root, '')
        while stack:
            path, rel = stack.pop()
            is_dir = self._is_dir(path)
            decision = classify_entry(rel, is_dir=is_dir, exclude=exclude, include=include)
            if decision is EntryDecision.EXCLUDED:
                self._sink.record(f'Excluding {path}')
            elif is_dir:
                self._push_children(stack, path, rel)
            elif decision is EntryDecision.INCLUDED:
                files.append(path)
                self._sink.record(f'Including {path}')
            else:
                self._sink.record(f'Skipping {path} (not in include patterns)')

        self._log.debug('walk of %s selected %d file(s)', self._root, len(files))
        return files

    def _push_children(self, stack: List[Tuple[str, str]], dirpath: str, rel_dir: str) -> None:
        """Push the sorted entries of *dirpath* so the smallest name pops first."""
        try:
            with os.scandir(dirpath) as it:
                names = sorted(entry.name for entry in it)
        except OSError as exc:
            raise WalkError(exc.strerror or str(exc), path=dirpath, operation='list directory') from exc
        for name in reversed(names):
            rel = f'{rel_dir}/{name}' if rel_dir else name
            stack.append((os.path.join(dirpath, name), rel))

    @staticmethod
    def _is_dir(path: str) -> bool:
        # lstat: a symlink to a directory is an entry of its own, never descended.
        try:
            return stat.S_ISDIR(os.lstat(path).st_mode)
        except OSError as exc:
            raise WalkError(exc.strerror or str(exc), path=path, operation='stat') from exc

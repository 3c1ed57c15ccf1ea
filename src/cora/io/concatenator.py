from __future__ import annotations
import logging
import os
from typing import BinaryIO, Optional, Sequence

from cora.constants import DEFAULT_BUFFER_SIZE, DEFAULT_PATH_PREFIX, DEFAULT_SEPARATOR
from cora.core.interfaces import ConcatenatorProtocol, DebugSinkProtocol
from cora.errors import ConcatError
from cora.logging.helpers import get_logger
from cora.logging.sinks import NullDebugSink

_NEWLINE = b'\n'


class Concatenator(ConcatenatorProtocol):
    """Stream an ordered list of files into one output file.

    Block layout per file::

        [separator if not first][prefix][path]\\n[raw bytes]\\n

    Input files are copied through a fixed-size buffer, never read whole.
    """

    def __init__(
        self,
        output_path: str,
        *,
        separator: str = DEFAULT_SEPARATOR,
        path_prefix: str = DEFAULT_PATH_PREFIX,
        buffer_size: int = DEFAULT_BUFFER_SIZE,
        debug_sink: Optional[DebugSinkProtocol] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._output = os.fspath(output_path)
        self._separator = separator.encode('utf-8')
        self._prefix = path_prefix.encode('utf-8')
        self._bufsize = max(1, int(buffer_size))
        self._sink = debug_sink or NullDebugSink()
        self._log = logger or get_logger('io.concat')

    @property
    def output_path(self) -> str:
        return self._output

    def _open_output(self) -> BinaryIO:
        parent = os.path.dirname(self._output)
        try:
            if parent:
                os.makedirs(parent, exist_ok=True)
        except OSError as exc:
            raise ConcatError(f'cannot create output directory: {exc.strerror or exc}',
                              path=parent, phase='setup') from exc
        try:
            return open(self._output, 'wb', buffering=self._bufsize)
        except OSError as exc:
            raise ConcatError(f'cannot create output file: {exc.strerror or exc}',
                              path=self._output, phase='setup') from exc

    def concatenate(self, paths: Sequence[str]) -> int:
        """Write every file of *paths* into the output; return bytes written."""
        written = 0
        with self._open_output() as out:
            for idx, path in enumerate(paths):
                if idx > 0:
                    written += self._write(out, self._separator)
                written += self._write(out, self._prefix + os.fsencode(path) + _NEWLINE)
                written += self._append_content(out, path)
                written += self._write(out, _NEWLINE)
                self._sink.record(f'Appended {path}')
            try:
                out.flush()
            except OSError as exc:
                raise ConcatError(exc.strerror or str(exc), path=self._output, phase='write') from exc

        self._log.debug('wrote %d byte(s) from %d file(s) to %s', written, len(paths), self._output)
        return written

    def _write(self, out: BinaryIO, data: bytes) -> int:
        try:
            out.write(data)
        except OSError as exc:
            raise ConcatError(exc.strerror or str(exc), path=self._output, phase='write') from exc
        return len(data)

    def _append_content(self, out: BinaryIO, path: str) -> int:
        try:
            src = open(path, 'rb')
        except OSError as exc:
            raise ConcatError(f'cannot open file: {exc.strerror or exc}', path=path, phase='open') from exc

        copied = 0
        with src:
            while True:
                try:
                    chunk = src.read(self._bufsize)
                except OSError as exc:
                    raise ConcatError(f'cannot read file: {exc.strerror or exc}', path=path, phase='read') from exc
                if not chunk:
                    break
                copied += self._write(out, chunk)
        return copied

from __future__ import annotations
import logging
import os
from typing import Callable, List, Optional

from cora.core.interfaces import ConcatenatorProtocol, DebugSinkProtocol, WalkerProtocol
from cora.core.models import CoraConfig
from cora.core.report import RunReport, StageTimer
from cora.io.concatenator import Concatenator
from cora.io.walker import Walker
from cora.logging.helpers import get_logger
from cora.logging.sinks import make_debug_sink

WalkerFactory = Callable[[CoraConfig, DebugSinkProtocol], WalkerProtocol]
ConcatenatorFactory = Callable[[CoraConfig, DebugSinkProtocol], ConcatenatorProtocol]


def default_walker_factory(cfg: CoraConfig, sink: DebugSinkProtocol) -> WalkerProtocol:
    return Walker(
        cfg.source_directory,
        exclude_patterns=cfg.exclude_patterns,
        include_patterns=cfg.include_patterns,
        debug_sink=sink,
    )


def default_concatenator_factory(cfg: CoraConfig, sink: DebugSinkProtocol) -> ConcatenatorProtocol:
    return Concatenator(
        cfg.output_file,
        separator=cfg.separator,
        path_prefix=cfg.path_prefix,
        debug_sink=sink,
    )


def _same_file(a: str, b: str) -> bool:
    return os.path.normcase(os.path.realpath(a)) == os.path.normcase(os.path.realpath(b))


class CoraRunner:
    """Validate → walk → concatenate, collecting a RunReport on the way."""

    def __init__(
        self,
        *,
        logger: Optional[logging.Logger] = None,
        debug_sink: Optional[DebugSinkProtocol] = None,
        walker_factory: WalkerFactory = default_walker_factory,
        concatenator_factory: ConcatenatorFactory = default_concatenator_factory,
    ) -> None:
        self._log = logger or get_logger("runner")
        self._sink = debug_sink
        self._walker_factory = walker_factory
        self._concat_factory = concatenator_factory

    def _drop_output(self, files: List[str], cfg: CoraConfig, sink: DebugSinkProtocol) -> List[str]:
        """Remove the output file from *files* so a rerun never reads its own output."""
        kept = [f for f in files if not _same_file(f, cfg.output_file)]
        if len(kept) != len(files):
            sink.record(f"Excluding {cfg.output_file} (output file)")
        return kept

    def run(self, cfg: CoraConfig) -> RunReport:
        cfg.validate()
        sink = self._sink or make_debug_sink(cfg.debug)
        report = RunReport(source_directory=cfg.source_directory, output_file=cfg.output_file)

        with StageTimer(report, "walk"):
            files = self._walker_factory(cfg, sink).walk()
        files = self._drop_output(files, cfg, sink)
        report.add_files(files)

        with StageTimer(report, "concat"):
            report.bytes_written = self._concat_factory(cfg, sink).concatenate(files)

        report.finish()
        self._log.info(
            "✔ %d file(s) concatenated into %s",
            report.files_total,
            cfg.output_file,
            extra={"context": {
                "source": cfg.source_directory,
                "output": cfg.output_file,
                "files": report.files_total,
                "bytes": report.bytes_written,
                "duration_s": round(report.duration_s or 0.0, 6),
            }},
        )
        return report

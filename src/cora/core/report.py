from __future__ import annotations

"""
Run report for a single walk + concatenate pipeline.

Counters are filled by the runner as stages complete; timing per stage is
collected through :class:`StageTimer`.
"""

import json
import time
from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass
class RunReport:
    started_at: float = field(default_factory=time.perf_counter)
    finished_at: Optional[float] = None
    duration_s: Optional[float] = None

    source_directory: str = ''
    output_file: str = ''

    files_total: int = 0
    bytes_written: int = 0
    files: List[str] = field(default_factory=list)

    time_by_stage: Dict[str, float] = field(
        default_factory=lambda: {"walk": 0.0, "concat": 0.0}
    )

    def add_files(self, paths: List[str]) -> None:
        self.files.extend(paths)
        self.files_total += len(paths)

    def add_time(self, stage: str, seconds: float) -> None:
        self.time_by_stage[stage] = self.time_by_stage.get(stage, 0.0) + seconds

    def finish(self) -> None:
        self.finished_at = time.perf_counter()
        self.duration_s = self.finished_at - self.started_at

    def to_json(self, *, indent: int = 2) -> str:
        return json.dumps(
            {
                "source_directory": self.source_directory,
                "output_file": self.output_file,
                "duration_s": self.duration_s,
                "files_total": self.files_total,
                "bytes_written": self.bytes_written,
                "time_by_stage": self.time_by_stage,
                "files": self.files,
            },
            indent=indent,
        )


class StageTimer:
    def __init__(self, report: RunReport, stage: str):
        self._report = report
        self._stage = stage
        self._t0: float | None = None

    def __enter__(self):
        self._t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        if self._t0 is not None:
            self._report.add_time(self._stage, time.perf_counter() - self._t0)
        return False

from __future__ import annotations

"""
Runtime execution report.

Counters are filled by the driver once the walk and the reader pool have
finished; stage timings are accumulated through :class:`StageTimer`.
"""

import json
import time
from dataclasses import dataclass, field
from typing import Dict, Optional


@dataclass
class RunReport:
    started_at: float = field(default_factory=time.perf_counter)
    finished_at: float | None = None
    duration_s: float | None = None

    root: str = ''
    jobs: int = 0

    entries_total: int = 0
    directories_total: int = 0
    files_submitted: int = 0
    sections_written: int = 0
    binary_files: int = 0
    files_dropped: int = 0
    peak_in_flight: int = 0
    output_bytes: int = 0

    time_by_stage: Dict[str, float] = field(
        default_factory=lambda: {
            "walk": 0.0,
            "read": 0.0,
        }
    )

    output: Optional[str] = None

    def add_time(self, stage: str, seconds: float) -> None:
        self.time_by_stage[stage] = self.time_by_stage.get(stage, 0.0) + seconds

    def finish(self) -> None:
        self.finished_at = time.perf_counter()
        self.duration_s = (
            self.finished_at - self.started_at if self.finished_at else None
        )

    def to_json(self, *, indent: int = 2) -> str:
        return json.dumps(
            {
                "duration_s": self.duration_s,
                "root": self.root,
                "output": self.output,
                "jobs": self.jobs,
                "entries_total": self.entries_total,
                "directories_total": self.directories_total,
                "files_submitted": self.files_submitted,
                "sections_written": self.sections_written,
                "binary_files": self.binary_files,
                "files_dropped": self.files_dropped,
                "peak_in_flight": self.peak_in_flight,
                "output_bytes": self.output_bytes,
                "time_by_stage": self.time_by_stage,
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

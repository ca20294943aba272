from __future__ import annotations

"""
Per-run inlining report.

Counts the references found by the scanner and the bytes embedded by the
substitutor, plus wall time per stage. Filled by ``InlinePipeline`` and
dumped with ``--report``.
"""

import json
import time
from dataclasses import dataclass, field
from typing import Dict, List


@dataclass
class InlineReport:
    started_at: float = field(default_factory=time.perf_counter)
    finished_at: float | None = None
    duration_s: float | None = None

    css_found: int = 0
    scripts_found: int = 0

    css_bytes: int = 0
    script_bytes: int = 0

    time_by_stage: Dict[str, float] = field(
        default_factory=lambda: {
            "load": 0.0,
            "scan": 0.0,
            "inline_css": 0.0,
            "inline_js": 0.0,
            "serialize": 0.0,
        }
    )

    inlined_paths: List[str] = field(default_factory=list)

    def add_css(self, path: str, size: int) -> None:
        self.css_bytes += size
        self.inlined_paths.append(path)

    def add_script(self, path: str, size: int) -> None:
        self.script_bytes += size
        self.inlined_paths.append(path)

    def add_time(self, stage: str, seconds: float) -> None:
        self.time_by_stage[stage] = self.time_by_stage.get(stage, 0.0) + seconds

    def finish(self) -> None:
        self.finished_at = time.perf_counter()
        self.duration_s = self.finished_at - self.started_at

    def to_json(self, *, indent: int = 2) -> str:
        return json.dumps(
            {
                "duration_s": self.duration_s,
                "css_found": self.css_found,
                "scripts_found": self.scripts_found,
                "css_bytes": self.css_bytes,
                "script_bytes": self.script_bytes,
                "time_by_stage": self.time_by_stage,
                "inlined_paths": self.inlined_paths,
            },
            indent=indent,
        )


class StageTimer:
    def __init__(self, report: InlineReport, stage: str):
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

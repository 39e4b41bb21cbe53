from __future__ import annotations

"""
Driver – walk → concurrent reads → document snapshot.

The walk is fully materialized before the first read starts; only paths are
held, so memory stays proportional to the number of entries rather than to
their contents. Writing the snapshot is left to the caller.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from owo.core.interfaces.document import DocumentProtocol
from owo.core.interfaces.walker import WalkerProtocol
from owo.core.models import Entry, FileTask, RunConfig
from owo.core.report import RunReport, StageTimer
from owo.filtering.path_filter import PathFilter
from owo.io.document import Document, OrderedDocument
from owo.io.walker import TreeWalker
from owo.logging.helpers import get_logger
from owo.runtime.reader_pool import ConcurrentReader


@dataclass
class RunResult:
    text: str
    report: RunReport


class Driver:
    def __init__(self, config: RunConfig, *, logger: Optional[logging.Logger] = None) -> None:
        self._cfg = config
        self._log = logger or get_logger('runtime.driver')

    def _make_walker(self) -> WalkerProtocol:
        # Pattern errors surface here, before anything is listed.
        path_filter = PathFilter(self._cfg.rules, self._cfg.root, logger=get_logger('filtering'))
        return TreeWalker(path_filter, logger=get_logger('io.walker'))

    def _make_document(self) -> DocumentProtocol:
        return OrderedDocument() if self._cfg.stable_order else Document()

    def to_tasks(self, entries: List[Entry]) -> List[FileTask]:
        """Keep files only, numbered in traversal order.

        The output file is left out so that a document written inside the
        root never ends up in the next run.
        """
        output = self._cfg.output.resolve()
        files = [e for e in entries if not e.is_dir and e.path.resolve() != output]
        return [FileTask(path=e.path, display=e.display, order=idx) for idx, e in enumerate(files)]

    def run(self) -> RunResult:
        cfg = self._cfg
        report = RunReport(root=str(cfg.root), jobs=cfg.jobs, output=str(cfg.output))
        walker = self._make_walker()
        document = self._make_document()

        with StageTimer(report, 'walk'):
            entries = list(walker.walk(cfg.root, display_root=cfg.display_root))
        tasks = self.to_tasks(entries)
        report.entries_total = len(entries)
        report.directories_total = len(entries) - len(tasks)
        self._log.info('discovered %d files under %s', len(tasks), cfg.root)

        pool = ConcurrentReader(document, limit=cfg.jobs, logger=get_logger('runtime.reader_pool'))
        with StageTimer(report, 'read'):
            stats = pool.read_all(tasks)

        report.files_submitted = stats.submitted
        report.sections_written = stats.appended
        report.binary_files = stats.binary
        report.files_dropped = stats.dropped
        report.peak_in_flight = stats.peak_in_flight

        text = document.snapshot()
        report.finish()
        return RunResult(text=text, report=report)

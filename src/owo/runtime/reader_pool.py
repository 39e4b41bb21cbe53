from __future__ import annotations
"""Bounded concurrent reading of file tasks into a shared document.

Every task runs on a ``ThreadPoolExecutor`` worker and passes through an
:class:`AdmissionGate` before touching the file system, so at most
``limit`` reads are in flight. Each successful read results in exactly one
``Document.append``; dropped tasks append nothing. The pool waits for every
task before returning and offers no cancellation.
"""

import logging
import os
import threading
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from typing import Iterable, Optional

from owo.core.interfaces.document import DocumentProtocol
from owo.core.interfaces.readers import ReaderProtocol
from owo.core.models import FileTask
from owo.io.readers import ContentReader
from owo.logging.helpers import get_logger
from owo.runtime.gate import AdmissionGate


def default_concurrency() -> int:
    """Two readers per available CPU."""
    return 2 * (os.cpu_count() or 1)


@dataclass
class ReadStats:
    submitted: int = 0
    appended: int = 0
    binary: int = 0
    dropped: int = 0
    peak_in_flight: int = 0


class ConcurrentReader:
    def __init__(
        self,
        document: DocumentProtocol,
        *,
        limit: Optional[int] = None,
        reader: Optional[ReaderProtocol] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._doc = document
        self._log = logger or get_logger('runtime.reader_pool')
        self._reader: ReaderProtocol = reader or ContentReader(logger=self._log)
        self._limit = limit if limit is not None else default_concurrency()
        self._gate = AdmissionGate(self._limit)
        self._stats_lock = threading.Lock()

    @property
    def gate(self) -> AdmissionGate:
        return self._gate

    def _read_one(self, task: FileTask, stats: ReadStats) -> bool:
        with self._gate.admit():
            section = self._reader.read_section(task)
        if section is None:
            with self._stats_lock:
                stats.dropped += 1
            return False
        self._doc.append(section)
        with self._stats_lock:
            stats.appended += 1
            if section.binary:
                stats.binary += 1
        return True

    def read_all(self, tasks: Iterable[FileTask]) -> ReadStats:
        stats = ReadStats()
        with ThreadPoolExecutor(max_workers=self._limit, thread_name_prefix='owo-reader') as executor:
            futures = [executor.submit(self._read_one, task, stats) for task in tasks]
            stats.submitted = len(futures)
            for future in as_completed(futures):
                future.result()
        stats.peak_in_flight = self._gate.peak
        self._log.debug(
            'read %d/%d files (%d binary, %d dropped, peak %d in flight)',
            stats.appended, stats.submitted, stats.binary, stats.dropped, stats.peak_in_flight,
        )
        return stats

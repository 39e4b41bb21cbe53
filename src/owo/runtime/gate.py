from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Iterator


class AdmissionGate:
    """Counting gate bounding how many reads are in flight at once.

    ``admit()`` is a context manager: the slot is released on every exit
    path, including exceptions raised by the guarded read.
    """

    def __init__(self, limit: int) -> None:
        if limit < 1:
            raise ValueError(f'admission limit must be >= 1, got {limit}')
        self._limit = limit
        self._sem = threading.BoundedSemaphore(limit)
        self._lock = threading.Lock()
        self._in_flight = 0
        self._peak = 0

    @property
    def limit(self) -> int:
        return self._limit

    @property
    def in_flight(self) -> int:
        with self._lock:
            return self._in_flight

    @property
    def peak(self) -> int:
        with self._lock:
            return self._peak

    @contextmanager
    def admit(self) -> Iterator[None]:
        self._sem.acquire()
        with self._lock:
            self._in_flight += 1
            self._peak = max(self._peak, self._in_flight)
        try:
            yield
        finally:
            with self._lock:
                self._in_flight -= 1
            self._sem.release()

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Admission gate, concurrent reader pool and shared documents."""
from __future__ import annotations

import re
import tempfile
import threading
import time
import unittest
from pathlib import Path
from typing import List, Optional

from owo import AdmissionGate, ConcurrentReader, Document, FileTask, OrderedDocument, Section

SECTION_RE = re.compile(r"\n## File: `([^`]*)`\n```([^\n]*)\n(.*?)\n```\n", re.S)


def _sections(doc: str) -> List[tuple]:
    found = SECTION_RE.findall(doc)
    # Every byte of the document belongs to exactly one well-formed section.
    assert "".join(f"\n## File: `{d}`\n```{l}\n{b}\n```\n" for d, l, b in found) == doc
    return found


class SlowReader:
    """Reader stub that sleeps and tracks its own concurrency."""

    def __init__(self, delay: float = 0.01, drop: frozenset = frozenset(), fail: frozenset = frozenset()) -> None:
        self.delay = delay
        self.drop = drop
        self.fail = fail
        self._lock = threading.Lock()
        self.active = 0
        self.max_active = 0
        self.seen: List[str] = []

    def read_section(self, task: FileTask) -> Optional[Section]:
        with self._lock:
            self.active += 1
            self.max_active = max(self.max_active, self.active)
            self.seen.append(task.display)
        try:
            time.sleep(self.delay)
            if task.display in self.fail:
                raise RuntimeError(f"boom {task.display}")
            if task.display in self.drop:
                return None
            return Section(display=task.display, body=f"body of {task.display}\n" * 3, order=task.order)
        finally:
            with self._lock:
                self.active -= 1


def _tasks(n: int) -> List[FileTask]:
    return [FileTask(path=Path(f"f{i}.txt"), display=f"f{i}.txt", order=i) for i in range(n)]


# --------------------------------------------------------------------------- #
#  Admission gate                                                             #
# --------------------------------------------------------------------------- #
class AdmissionGateTests(unittest.TestCase):
    def test_limit_must_be_positive(self) -> None:
        with self.assertRaises(ValueError):
            AdmissionGate(0)

    def test_slot_released_on_exception(self) -> None:
        gate = AdmissionGate(1)
        with self.assertRaises(RuntimeError):
            with gate.admit():
                self.assertEqual(gate.in_flight, 1)
                raise RuntimeError("fail inside")
        self.assertEqual(gate.in_flight, 0)
        # A leaked slot would block here forever.
        with gate.admit():
            pass
        self.assertEqual(gate.peak, 1)


# --------------------------------------------------------------------------- #
#  Reader pool                                                                #
# --------------------------------------------------------------------------- #
class ConcurrentReaderTests(unittest.TestCase):
    def test_in_flight_reads_never_exceed_limit(self) -> None:
        for limit in (1, 3, 8):
            reader = SlowReader()
            pool = ConcurrentReader(Document(), limit=limit, reader=reader)
            stats = pool.read_all(_tasks(40))
            self.assertLessEqual(reader.max_active, limit)
            self.assertLessEqual(stats.peak_in_flight, limit)
            self.assertGreaterEqual(stats.peak_in_flight, 1)
            self.assertEqual(pool.gate.in_flight, 0)

    def test_one_well_formed_section_per_task(self) -> None:
        doc = Document()
        stats = ConcurrentReader(doc, limit=6, reader=SlowReader(delay=0.001)).read_all(_tasks(200))
        found = _sections(doc.snapshot())
        self.assertEqual(len(found), 200)
        self.assertEqual(sorted(d for d, _, _ in found), sorted(f"f{i}.txt" for i in range(200)))
        self.assertEqual(stats.submitted, 200)
        self.assertEqual(stats.appended, 200)
        self.assertEqual(len(doc), 200)

    def test_dropped_tasks_append_nothing(self) -> None:
        doc = Document()
        reader = SlowReader(delay=0.0, drop=frozenset({"f1.txt", "f3.txt"}))
        stats = ConcurrentReader(doc, limit=2, reader=reader).read_all(_tasks(5))
        shown = {d for d, _, _ in _sections(doc.snapshot())}
        self.assertEqual(shown, {"f0.txt", "f2.txt", "f4.txt"})
        self.assertEqual(stats.dropped, 2)
        self.assertEqual(stats.appended, 3)

    def test_each_task_read_exactly_once(self) -> None:
        reader = SlowReader(delay=0.0)
        ConcurrentReader(Document(), limit=4, reader=reader).read_all(_tasks(50))
        self.assertEqual(sorted(reader.seen), sorted(f"f{i}.txt" for i in range(50)))

    def test_unexpected_errors_propagate_without_leaking_slots(self) -> None:
        reader = SlowReader(delay=0.0, fail=frozenset({"f2.txt"}))
        pool = ConcurrentReader(Document(), limit=2, reader=reader)
        with self.assertRaises(RuntimeError):
            pool.read_all(_tasks(6))
        self.assertEqual(pool.gate.in_flight, 0)

    def test_no_tasks(self) -> None:
        doc = Document()
        stats = ConcurrentReader(doc, limit=2).read_all([])
        self.assertEqual(doc.snapshot(), "")
        self.assertEqual(stats.submitted, 0)

    def test_real_files_with_binary_counts(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            root = Path(td)
            (root / "a.txt").write_bytes(b"hello\n")
            (root / "b.dat").write_bytes(b"\xff\xfe\x00")
            tasks = [
                FileTask(path=root / "a.txt", display="a.txt", order=0),
                FileTask(path=root / "b.dat", display="b.dat", order=1),
                FileTask(path=root / "missing.txt", display="missing.txt", order=2),
            ]
            doc = OrderedDocument()
            stats = ConcurrentReader(doc, limit=2).read_all(tasks)
        self.assertEqual(
            doc.snapshot(),
            "\n## File: `a.txt`\n```txt\nhello\n```\n"
            "\n## File: `b.dat`\n```dat\n[Binary file: 3 bytes]\n```\n",
        )
        self.assertEqual((stats.appended, stats.binary, stats.dropped), (2, 1, 1))


# --------------------------------------------------------------------------- #
#  Documents                                                                  #
# --------------------------------------------------------------------------- #
class DocumentTests(unittest.TestCase):
    def _hammer(self, doc, threads: int = 8, per_thread: int = 50) -> None:
        def worker(tid: int) -> None:
            for i in range(per_thread):
                order = tid * per_thread + i
                doc.append(Section(display=f"t{tid}/{i}", body="x" * 500, order=order))

        pool = [threading.Thread(target=worker, args=(t,)) for t in range(threads)]
        for th in pool:
            th.start()
        for th in pool:
            th.join()

    def test_concurrent_appends_never_interleave(self) -> None:
        doc = Document()
        self._hammer(doc)
        found = _sections(doc.snapshot())
        self.assertEqual(len(found), 400)
        self.assertTrue(all(b == "x" * 500 for _, _, b in found))

    def test_ordered_document_sorts_by_submission(self) -> None:
        doc = OrderedDocument()
        self._hammer(doc, threads=4, per_thread=10)
        shown = [d for d, _, _ in _sections(doc.snapshot())]
        self.assertEqual(shown, [f"t{t}/{i}" for t in range(4) for i in range(10)])

    def test_ordered_document_rejects_duplicates(self) -> None:
        doc = OrderedDocument()
        doc.append(Section(display="a", body="", order=1))
        with self.assertRaises(ValueError):
            doc.append(Section(display="b", body="", order=1))

    def test_empty_snapshot(self) -> None:
        self.assertEqual(Document().snapshot(), "")
        self.assertEqual(OrderedDocument().snapshot(), "")


if __name__ == "__main__":
    unittest.main()

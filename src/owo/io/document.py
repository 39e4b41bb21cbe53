"""
document – Shared output buffers for concurrently produced sections.

`Document` keeps sections in completion order: each `append` renders the
section and stores it while holding one lock, so two sections never
interleave. `OrderedDocument` instead files sections by submission order
and joins them once in `snapshot()`, which yields traversal order.
"""
from __future__ import annotations

import threading
from typing import Dict, List

from owo.core.interfaces.document import DocumentProtocol
from owo.core.models import Section


class Document(DocumentProtocol):
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._parts: List[str] = []

    def append(self, section: Section) -> None:
        with self._lock:
            self._parts.append(section.render())

    def snapshot(self) -> str:
        with self._lock:
            return ''.join(self._parts)

    def __len__(self) -> int:
        with self._lock:
            return len(self._parts)


class OrderedDocument(DocumentProtocol):
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._sections: Dict[int, Section] = {}

    def append(self, section: Section) -> None:
        with self._lock:
            if section.order in self._sections:
                raise ValueError(f'duplicate section order {section.order} ({section.display})')
            self._sections[section.order] = section

    def snapshot(self) -> str:
        with self._lock:
            ordered = [self._sections[k] for k in sorted(self._sections)]
        return ''.join(s.render() for s in ordered)

    def __len__(self) -> int:
        with self._lock:
            return len(self._sections)

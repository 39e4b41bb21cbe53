from __future__ import annotations
from typing import Protocol, runtime_checkable

from owo.core.models import Section


@runtime_checkable
class DocumentProtocol(Protocol):
    """Shared, append-only output buffer."""

    def append(self, section: Section) -> None:
        """Append one complete section atomically."""
        ...

    def snapshot(self) -> str:
        """Return the full document text."""
        ...

    def __len__(self) -> int:
        ...

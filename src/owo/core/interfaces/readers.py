from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from owo.core.models import FileTask, Section


@runtime_checkable
class ReaderProtocol(Protocol):
    def read_section(self, task: FileTask) -> Optional[Section]:
        ...

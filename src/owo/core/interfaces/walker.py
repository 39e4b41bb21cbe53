from __future__ import annotations
from pathlib import Path
from typing import Iterator, Protocol, runtime_checkable

from owo.core.models import Entry


@runtime_checkable
class WalkerProtocol(Protocol):
    """Abstract filtering tree walker."""

    def walk(self, root: Path, *, display_root: str | None = None) -> Iterator[Entry]:
        """Lazily yield accepted entries under *root*."""
        ...

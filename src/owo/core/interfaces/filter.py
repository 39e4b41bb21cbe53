from __future__ import annotations
from typing import Protocol, runtime_checkable


@runtime_checkable
class PathFilterProtocol(Protocol):
    """Inclusion decision for a single walker candidate."""

    def accepts(self, relpath: str, is_dir: bool) -> bool:
        """Return True when *relpath* (POSIX, relative to the root) is kept."""
        ...

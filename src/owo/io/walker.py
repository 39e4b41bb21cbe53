from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Iterator, List, Optional

from owo.core.interfaces.filter import PathFilterProtocol
from owo.core.interfaces.walker import WalkerProtocol
from owo.core.models import Entry
from owo.logging.helpers import get_logger, trace_io


class TreeWalker(WalkerProtocol):
    """Depth-first, filter-aware directory walker.

    Each directory level yields its accepted sub-directories and then its
    accepted regular files, in the order the platform lists them. Rejected
    directories are removed from ``os.walk``'s list in place, so their
    subtrees are never listed. Unreadable directories are skipped.
    """

    def __init__(self, path_filter: PathFilterProtocol, *, logger: Optional[logging.Logger] = None) -> None:
        self._filter = path_filter
        self._log = logger or get_logger('io.walker')

    def _on_error(self, exc: OSError) -> None:
        self._log.debug('cannot list %s (%s) – skipped', getattr(exc, 'filename', '?'), exc)

    def walk(self, root: Path, *, display_root: Optional[str] = None) -> Iterator[Entry]:
        root = Path(root)
        shown_root = display_root if display_root is not None else str(root)
        if not root.is_dir():
            self._log.warning('⚠  %s is not a directory – nothing to walk', root)
            return

        for dirpath, dirnames, filenames in os.walk(root, onerror=self._on_error):
            reldir = Path(dirpath).relative_to(root).as_posix()
            if reldir == '.':
                reldir = ''

            kept_dirs: List[str] = []
            for dn in dirnames:
                rel = f'{reldir}/{dn}' if reldir else dn
                if self._filter.accepts(rel, True):
                    kept_dirs.append(dn)
                    yield Entry(Path(dirpath, dn), rel, os.path.join(shown_root, *rel.split('/')), True)
            dirnames[:] = kept_dirs

            for fn in filenames:
                fp = Path(dirpath, fn)
                # FIFOs, sockets and devices would block or never end on read.
                if not fp.is_file():
                    self._log.debug('skip %s (not a regular file)', fp)
                    continue
                rel = f'{reldir}/{fn}' if reldir else fn
                if self._filter.accepts(rel, False):
                    yield Entry(fp, rel, os.path.join(shown_root, *rel.split('/')), False)

            trace_io(self._log, 'walked directory', directory=dirpath, dirs=len(kept_dirs), files=len(filenames))

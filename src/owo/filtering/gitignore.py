from __future__ import annotations
"""Source-control ignore rules.

`GitIgnoreIndex` answers whether a path relative to the walk root is
excluded by the `.gitignore` files found along its ancestry. Rule files are
parsed with :mod:`pathspec` (gitignore dialect) on first use and cached per
directory; a directory without a `.gitignore` simply contributes nothing.

The root additionally honors `.git/info/exclude` when present.

Semantics:
    • A rule file only applies to paths beneath the directory holding it,
      and its patterns are matched relative to that directory.
    • Directories are matched with a trailing '/', so `build/` style rules
      apply to directories only.
    • Rule files are consulted root first and the deepest file with a
      matching rule decides, so a nested `!pattern` re-includes a path that
      an ancestor file excludes (as git does). A path under an excluded
      directory stays excluded: the walker never enters that directory.
"""

import logging
import posixpath
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import pathspec

from owo.constants import GITIGNORE_FILENAME, VCS_DIR_NAME
from owo.logging.helpers import get_logger, trace_io


class GitIgnoreIndex:
    def __init__(self, root: Path, *, logger: Optional[logging.Logger] = None) -> None:
        self._root = Path(root)
        self._log = logger or get_logger('filtering.gitignore')
        self._specs: Dict[str, Optional[pathspec.PathSpec]] = {}

    @property
    def root(self) -> Path:
        return self._root

    # -------- Loading --------

    def _read_lines(self, path: Path) -> List[str]:
        try:
            return path.read_text(encoding='utf-8', errors='replace').splitlines()
        except FileNotFoundError:
            return []
        except OSError as exc:
            self._log.debug('could not read ignore file %s (%s)', path, exc)
            return []

    def _load(self, reldir: str) -> Optional[pathspec.PathSpec]:
        base = self._root / reldir if reldir else self._root
        lines = self._read_lines(base / GITIGNORE_FILENAME)
        if not reldir:
            lines = self._read_lines(self._root / VCS_DIR_NAME / 'info' / 'exclude') + lines
        lines = [ln for ln in lines if ln.strip() and not ln.lstrip().startswith('#')]
        if not lines:
            return None
        trace_io(self._log, 'loaded ignore rules', directory=str(base), rules=len(lines))
        return pathspec.GitIgnoreSpec.from_lines(lines)

    def spec_for(self, reldir: str) -> Optional[pathspec.PathSpec]:
        """Return the compiled rules declared in *reldir* ('' is the root)."""
        if reldir not in self._specs:
            self._specs[reldir] = self._load(reldir)
        return self._specs[reldir]

    # -------- Queries --------

    @staticmethod
    def _ancestors(relpath: str) -> List[Tuple[str, str]]:
        """Return (directory, path-relative-to-directory) pairs, root first."""
        parts = relpath.split('/')
        pairs: List[Tuple[str, str]] = []
        for idx in range(len(parts)):
            reldir = '/'.join(parts[:idx])
            pairs.append((reldir, posixpath.join(*parts[idx:])))
        return pairs

    def is_ignored(self, relpath: str, is_dir: bool) -> bool:
        """Return True if the deepest rule file with an opinion excludes *relpath*."""
        if not relpath or relpath == '.':
            return False
        ignored = False
        for reldir, tail in self._ancestors(relpath):
            spec = self.spec_for(reldir)
            if spec is None:
                continue
            candidate = tail + '/' if is_dir else tail
            # include is None when no rule in this file matched.
            verdict = spec.check_file(candidate).include
            if verdict is not None:
                ignored = verdict
        return ignored

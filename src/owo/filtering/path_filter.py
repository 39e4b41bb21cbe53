from __future__ import annotations
"""Per-entry inclusion policy for the tree walker.

Rules, first match wins:
    1. the base name matches an ignore pattern (regex search, base name only);
    2. a `.gitignore` rule excludes the path (when enabled);
    3. a path component is hidden (leading dot) and hidden entries are off;
    4. the entry is the version-control metadata directory, always excluded.

A rejected directory is pruned by the walker, so nothing below it is ever
offered to the filter.
"""

import logging
import re
from pathlib import Path
from typing import List, Optional, Pattern, Sequence

from owo.constants import HIDDEN_PREFIX, VCS_DIR_NAME
from owo.core.errors import IgnorePatternError
from owo.core.interfaces.filter import PathFilterProtocol
from owo.core.models import IgnoreRuleSet
from owo.filtering.gitignore import GitIgnoreIndex
from owo.logging.helpers import get_logger


def compile_patterns(patterns: Sequence[str]) -> List[Pattern[str]]:
    """Compile ignore tokens one by one so a bad token is reported by name.

    Empty tokens are skipped: an empty regex would match every name.
    """
    compiled: List[Pattern[str]] = []
    for token in patterns:
        if not token:
            continue
        try:
            compiled.append(re.compile(token))
        except re.error as exc:
            raise IgnorePatternError(token, str(exc)) from exc
    return compiled


def is_hidden_relpath(relpath: str) -> bool:
    """Return True if any component of a root-relative path starts with a dot."""
    return any(part.startswith(HIDDEN_PREFIX) for part in relpath.split('/') if part not in ('', '.', '..'))


class PathFilter(PathFilterProtocol):
    def __init__(
        self,
        rules: IgnoreRuleSet,
        root: Path,
        *,
        gitignore: Optional[GitIgnoreIndex] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._rules = rules
        self._log = logger or get_logger('filtering.path_filter')
        self._patterns = compile_patterns(rules.patterns)
        self._gitignore: Optional[GitIgnoreIndex] = None
        if rules.use_gitignore:
            self._gitignore = gitignore or GitIgnoreIndex(root, logger=self._log)

    @property
    def rules(self) -> IgnoreRuleSet:
        return self._rules

    def matches_pattern(self, name: str) -> bool:
        return any(p.search(name) for p in self._patterns)

    def accepts(self, relpath: str, is_dir: bool) -> bool:
        relpath = relpath.replace('\\', '/').strip('/')
        if not relpath or relpath == '.':
            return True
        name = relpath.rsplit('/', 1)[-1]

        if self.matches_pattern(name):
            self._log.debug('skip %s (ignore pattern)', relpath)
            return False
        if self._gitignore is not None and self._gitignore.is_ignored(relpath, is_dir):
            self._log.debug('skip %s (.gitignore)', relpath)
            return False
        if not self._rules.include_hidden and is_hidden_relpath(relpath):
            self._log.debug('skip %s (hidden)', relpath)
            return False
        if VCS_DIR_NAME in relpath.split('/'):
            return False
        return True

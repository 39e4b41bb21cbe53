from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Tuple

from owo.constants import DEFAULT_IGNORE_PATTERNS, FENCE, PATTERN_SEPARATOR


@dataclass(frozen=True)
class IgnoreRuleSet:
    """Immutable ignore configuration shared read-only by every filter decision."""
    patterns: Tuple[str, ...] = ()
    use_gitignore: bool = True
    include_hidden: bool = False

    @classmethod
    def from_string(
        cls,
        spec: str | None = DEFAULT_IGNORE_PATTERNS,
        *,
        use_gitignore: bool = True,
        include_hidden: bool = False,
    ) -> 'IgnoreRuleSet':
        """Split a pipe-delimited pattern string, dropping empty tokens."""
        tokens = tuple(tok for tok in (spec or '').split(PATTERN_SEPARATOR) if tok)
        return cls(patterns=tokens, use_gitignore=use_gitignore, include_hidden=include_hidden)


@dataclass(frozen=True)
class Entry:
    path: Path
    relpath: str
    display: str
    is_dir: bool

    @property
    def name(self) -> str:
        return self.path.name


@dataclass(frozen=True)
class FileTask:
    path: Path
    display: str
    order: int = 0


@dataclass(frozen=True)
class Section:
    """One rendered file block, ready to be appended to a document."""
    display: str
    body: str
    language: str = ''
    order: int = 0
    binary: bool = False

    def render(self) -> str:
        return f'\n## File: `{self.display}`\n{FENCE}{self.language}\n{self.body}\n{FENCE}\n'


@dataclass(frozen=True)
class RunConfig:
    """Everything a run needs, passed explicitly into the driver."""
    root: Path
    output: Path
    rules: IgnoreRuleSet = field(default_factory=IgnoreRuleSet.from_string)
    jobs: int = 1
    stable_order: bool = False
    display_root: str = '.'

from __future__ import annotations

"""Project-wide constants used across modules.

This module isolates public constants to reduce cross-module coupling.
"""

# Pipe-delimited default for -I/--ignore.
DEFAULT_IGNORE_PATTERNS: str = 'obj|bin|build|dist|.git|.env|.env.*'

PATTERN_SEPARATOR: str = '|'

# Version-control metadata directory, excluded regardless of --with-dotfiles.
VCS_DIR_NAME: str = '.git'

HIDDEN_PREFIX: str = '.'

GITIGNORE_FILENAME: str = '.gitignore'

BINARY_PLACEHOLDER: str = '[Binary file: {size} bytes]'

FENCE: str = '```'

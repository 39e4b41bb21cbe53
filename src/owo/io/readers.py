from __future__ import annotations

"""
File content reader.

`ContentReader.read_section` turns one :class:`FileTask` into a
:class:`Section`:

  * text that decodes as UTF-8 becomes the fenced body, trailing whitespace
    stripped;
  * content that fails to decode becomes ``[Binary file: N bytes]``;
  * any other I/O failure drops the task (``None``), nothing is emitted.
"""

import logging
from pathlib import Path
from typing import Optional

from owo.constants import BINARY_PLACEHOLDER
from owo.core.interfaces.readers import ReaderProtocol
from owo.core.models import FileTask, Section
from owo.logging.helpers import get_logger, trace_io


def language_tag(path: Path) -> str:
    """Fence language for *path*: its last extension without the dot, or ''."""
    return path.suffix[1:] if path.suffix else ''


def binary_placeholder(size: int) -> str:
    return BINARY_PLACEHOLDER.format(size=size)


class ContentReader(ReaderProtocol):
    def __init__(self, *, encoding: str = 'utf-8', logger: Optional[logging.Logger] = None) -> None:
        self._encoding = encoding
        self._log = logger or get_logger('io.readers')

    def read_section(self, task: FileTask) -> Optional[Section]:
        try:
            raw = task.path.read_bytes()
        except OSError as exc:
            self._log.debug('✘ %s: could not read (%s) – dropped', task.display, exc)
            return None

        try:
            body = raw.decode(self._encoding).rstrip()
            binary = False
        except UnicodeDecodeError:
            body = binary_placeholder(len(raw))
            binary = True

        trace_io(self._log, 'read file', path=task.display, size=len(raw), binary=binary)
        return Section(
            display=task.display,
            body=body,
            language=language_tag(task.path),
            order=task.order,
            binary=binary,
        )

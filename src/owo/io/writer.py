from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from owo.core.errors import OutputWriteError
from owo.logging.helpers import get_logger


def write_output(path: Path, text: str, *, logger: Optional[logging.Logger] = None) -> int:
    """Write the final document to *path* in one go and return its byte size."""
    log = logger or get_logger('io.writer')
    data = text.encode('utf-8')
    try:
        Path(path).write_bytes(data)
    except OSError as exc:
        raise OutputWriteError(path, exc) from exc
    log.debug('wrote %d bytes to %s', len(data), path)
    return len(data)

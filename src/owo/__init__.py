from __future__ import annotations

from owo.constants import BINARY_PLACEHOLDER, DEFAULT_IGNORE_PATTERNS
from owo.cli import Owo
from owo.core.errors import ConfigurationError, IgnorePatternError, OutputWriteError
from owo.core.models import Entry, FileTask, IgnoreRuleSet, RunConfig, Section
from owo.filtering.path_filter import PathFilter
from owo.io.document import Document, OrderedDocument
from owo.io.readers import ContentReader
from owo.io.walker import TreeWalker
from owo.parsing.parser import _build_parser
from owo.runtime.driver import Driver, RunResult
from owo.runtime.gate import AdmissionGate
from owo.runtime.reader_pool import ConcurrentReader, ReadStats

__version__ = '0.1.0'

__all__ = [
    'Owo',
    'BINARY_PLACEHOLDER',
    'DEFAULT_IGNORE_PATTERNS',
    'ConfigurationError',
    'IgnorePatternError',
    'OutputWriteError',
    'Entry',
    'FileTask',
    'IgnoreRuleSet',
    'RunConfig',
    'Section',
    'PathFilter',
    'TreeWalker',
    'ContentReader',
    'Document',
    'OrderedDocument',
    'AdmissionGate',
    'ConcurrentReader',
    'ReadStats',
    'Driver',
    'RunResult',
    '_build_parser',
]

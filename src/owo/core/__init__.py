from __future__ import annotations

"""Public surface for owo.core: data model, errors and protocol types."""

from owo.core.errors import ConfigurationError, IgnorePatternError, OutputWriteError
from owo.core.models import Entry, FileTask, IgnoreRuleSet, RunConfig, Section
from owo.core.report import RunReport, StageTimer

__all__ = [
    "ConfigurationError",
    "IgnorePatternError",
    "OutputWriteError",
    "Entry",
    "FileTask",
    "IgnoreRuleSet",
    "RunConfig",
    "Section",
    "RunReport",
    "StageTimer",
]

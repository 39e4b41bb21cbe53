from __future__ import annotations


class ConfigurationError(ValueError):
    """Invalid run configuration, detected before any traversal starts."""


class IgnorePatternError(ConfigurationError):
    """An ignore pattern token is not a valid regular expression."""

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f'invalid ignore pattern {pattern!r}: {reason}')
        self.pattern = pattern
        self.reason = reason


class OutputWriteError(RuntimeError):
    """The aggregated document could not be written to its destination."""

    def __init__(self, path: object, cause: BaseException) -> None:
        super().__init__(f'could not write {path}: {cause}')
        self.path = path
        self.cause = cause

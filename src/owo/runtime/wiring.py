from __future__ import annotations

import argparse
from pathlib import Path

from owo.core.errors import ConfigurationError
from owo.core.models import IgnoreRuleSet, RunConfig
from owo.filtering.path_filter import compile_patterns
from owo.runtime.reader_pool import default_concurrency


def build_run_config(ns: argparse.Namespace) -> RunConfig:
    """Validate a parsed namespace and turn it into an immutable RunConfig.

    Raises:
        ConfigurationError: missing output, bad --jobs, missing root.
        IgnorePatternError: an ignore token is not a valid regex.
    """
    if not ns.output:
        raise ConfigurationError("the following required argument was not provided: -o/--output <FILE>")

    jobs = ns.jobs if ns.jobs is not None else default_concurrency()
    if jobs < 1:
        raise ConfigurationError(f"--jobs must be a positive integer, got {jobs}")

    rules = IgnoreRuleSet.from_string(
        ns.ignore,
        use_gitignore=getattr(ns, "use_gitignore", True),
        include_hidden=bool(ns.with_dotfiles),
    )
    compile_patterns(rules.patterns)

    root = Path(ns.directory)
    if not root.is_dir():
        raise ConfigurationError(f"{ns.directory} is not a directory")

    return RunConfig(
        root=root,
        output=Path(ns.output),
        rules=rules,
        jobs=jobs,
        stable_order=bool(getattr(ns, "stable_order", False)),
        display_root=ns.directory,
    )

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import NoReturn, Optional, Sequence

from owo.core.errors import ConfigurationError, OutputWriteError
from owo.core.interfaces.logging import LoggerFactoryProtocol
from owo.core.report import RunReport
from owo.io.writer import write_output
from owo.logging.factory import DefaultLoggerFactory
from owo.logging.helpers import get_logger
from owo.parsing.parser import _build_parser
from owo.runtime.driver import Driver
from owo.runtime.wiring import build_run_config


logger = get_logger('owo')

HELP_FLAGS = ('-h', '--help')


def _configure_logging(enable_json: bool, verbosity: int = 0) -> None:
    """Configure process-wide logging, either JSON or plain text."""
    level = {0: logging.WARNING, 1: logging.INFO}.get(verbosity, logging.DEBUG)
    mode = (bool(enable_json), level)
    if getattr(_configure_logging, '_configured_mode', None) == mode:
        return
    factory: LoggerFactoryProtocol = DefaultLoggerFactory(json_logs=enable_json, level=level)
    lg = factory.get_logger('owo')
    global logger
    logger = lg
    setattr(_configure_logging, '_configured_mode', mode)


def _emit_report(report: RunReport, target: Optional[str]) -> None:
    if target in (None, '', 'none'):
        return
    if target == '-':
        print(report.to_json(), file=sys.stderr)
        return
    path = Path(target)
    # The document is already written; a failed report does not fail the run.
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(report.to_json() + '\n', encoding='utf-8')
    except OSError as exc:
        logger.warning('⚠  could not write report %s (%s)', path, exc)
        return
    logger.info('✔ Report written → %s', path)


def wants_help(argv: Sequence[str]) -> bool:
    """No arguments at all, or a help flag anywhere, means help only."""
    return not argv or any(tok in HELP_FLAGS for tok in argv)


class Owo:
    """Top-level façade for command-style execution."""

    @staticmethod
    def help_text() -> str:
        return _build_parser().format_help()

    @staticmethod
    def run(argv: Sequence[str]) -> str:
        """Run the tool with an argv-like sequence and return the written document.

        Help and version requests print to stdout and return an empty string
        without touching the file system.

        Raises:
            ConfigurationError: invalid options, detected before traversal.
            OutputWriteError: the output file could not be written.
        """
        argv = list(argv)
        json_logs = '--json-logs' in argv or os.getenv('OWO_JSON_LOGS') == '1'
        _configure_logging(json_logs)

        if wants_help(argv):
            print(Owo.help_text())
            return ''

        ns = _build_parser().parse_args(argv)
        _configure_logging(json_logs, ns.verbose)
        if ns.version:
            from owo import __version__
            print(f'owo {__version__}')
            return ''

        cfg = build_run_config(ns)
        result = Driver(cfg, logger=get_logger('runtime.driver')).run()
        result.report.output_bytes = write_output(cfg.output, result.text, logger=get_logger('io.writer'))

        _emit_report(result.report, ns.report_json)
        print(f'Successfully wrote output to {ns.output}')
        return result.text


def main() -> NoReturn:
    """Console entry point (`owo`)."""
    try:
        Owo.run(sys.argv[1:])
        raise SystemExit(0)
    except ConfigurationError as exc:
        logger.error('%s', exc)
        raise SystemExit(2)
    except OutputWriteError as exc:
        logger.error('Failed to write output file: %s', exc)
        raise SystemExit(1)
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(130)
    except BrokenPipeError:
        raise SystemExit(0)
    except Exception as exc:
        if os.getenv('DEBUG') == '1':
            raise
        logger.error('Unexpected error: %s', exc)
        raise SystemExit(1)


if __name__ == '__main__':
    main()

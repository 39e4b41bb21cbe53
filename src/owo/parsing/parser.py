# owo/parsing/parser.py
from __future__ import annotations

import argparse

from owo.constants import DEFAULT_IGNORE_PATTERNS

EXAMPLES = (
    "examples:\n"
    "  owo -o content.md\n"
    "  owo -I \"obj|bin|build|dist\" -o content.md -wdf\n"
    "  owo --help"
)


def _build_parser() -> argparse.ArgumentParser:
    """
    Build the CLI argument parser.

    Notes:
        - Help is handled by the caller before parsing (no arguments, -h or
          --help anywhere), so argparse's own help flag is disabled.
        - ``-wdf`` is registered as a literal option string; argparse matches
          it exactly before trying to split it into short flags.
    """
    p = argparse.ArgumentParser(
        prog="owo",
        formatter_class=argparse.RawTextHelpFormatter,
        usage="%(prog)s [OPTIONS] [PATH]",
        add_help=False,
        description="Like tree, but writes every file's contents into a single Markdown file.",
        epilog=EXAMPLES,
    )

    g_loc = p.add_argument_group("Discovery")
    g_out = p.add_argument_group("Output")
    g_misc = p.add_argument_group("Miscellaneous")

    # -----------------------
    # Discovery
    # -----------------------
    g_loc.add_argument(
        "directory",
        metavar="PATH",
        nargs="?",
        default=".",
        help="Directory to traverse [default: current directory].",
    )
    g_loc.add_argument(
        "-I",
        "--ignore",
        metavar="PATTERNS",
        dest="ignore",
        default=DEFAULT_IGNORE_PATTERNS,
        help=(
            "Ignore files/directories whose name matches these patterns "
            "(pipe-separated regular expressions, searched in the base name).\n"
            f"[default: {DEFAULT_IGNORE_PATTERNS}]"
        ),
    )
    g_loc.add_argument(
        "-w",
        "-wdf",
        "--with-dotfiles",
        action="store_true",
        dest="with_dotfiles",
        help="Include hidden files and directories (.git is always skipped).",
    )
    g_loc.add_argument(
        "--no-gitignore",
        action="store_false",
        dest="use_gitignore",
        help="Do not honor .gitignore / .git/info/exclude rules.",
    )

    # -----------------------
    # Output
    # -----------------------
    g_out.add_argument(
        "-o",
        "--output",
        metavar="FILE",
        dest="output",
        help="Output file (required).",
    )
    g_out.add_argument(
        "--stable-order",
        action="store_true",
        dest="stable_order",
        help=(
            "Emit sections in traversal order instead of read-completion order."
        ),
    )
    g_out.add_argument(
        "--report-json",
        metavar="FILE",
        dest="report_json",
        help="Write a JSON run report to FILE ('-' for stderr).",
    )

    # -----------------------
    # Misc
    # -----------------------
    g_misc.add_argument(
        "-j",
        "--jobs",
        metavar="N",
        type=int,
        dest="jobs",
        default=None,
        help="Maximum number of concurrent file reads [default: 2 x CPUs].",
    )
    g_misc.add_argument(
        "-v",
        "--verbose",
        action="count",
        dest="verbose",
        default=0,
        help="Log progress on stderr (-v info, -vv debug).",
    )
    g_misc.add_argument(
        "--json-logs",
        action="store_true",
        dest="json_logs",
        help="Emit logs in JSON format instead of plain text.",
    )
    g_misc.add_argument(
        "-V",
        "--version",
        action="store_true",
        dest="version",
        help="Print version information.",
    )
    g_misc.add_argument(
        "-h",
        "--help",
        action="store_true",
        dest="help",
        help="Print help information.",
    )
    return p

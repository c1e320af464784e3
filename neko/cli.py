"""
Command-line interface for neko.

This module is responsible for argument parsing and delegating to the
stream driver with a resolved Config.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Optional

from .config import Config
from .driver import run_cat
from .logging_utils import configure_logging

LOG = logging.getLogger(__name__)

EPILOG = """\
Examples:
  neko f - g  Output f's contents, then standard input, then g's contents.
  neko        Copy standard input to standard output.
"""


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer: {value!r}")
    return number


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="neko",
        usage="%(prog)s [OPTION]... [FILE]...",
        description=(
            "Concatenate FILE(s) to standard output.\n\n"
            "With no FILE, or when FILE is -, read standard input."
        ),
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "files",
        nargs="*",
        metavar="FILE",
        help="Files to print; - means standard input.",
    )
    parser.add_argument(
        "-b",
        "--number-nonblank",
        action="store_true",
        help="Number nonempty output lines, overrides -n.",
    )
    parser.add_argument(
        "-e",
        "-E",
        "--show-ends",
        action="store_true",
        help="Display $ at end of each line.",
    )
    parser.add_argument(
        "-n",
        "--number",
        action="store_true",
        help="Number all output lines.",
    )
    parser.add_argument(
        "-t",
        "--show-tabs",
        action="store_true",
        help="Display TAB characters as ^I.",
    )
    parser.add_argument(
        "-v",
        "--show-nonprinting",
        action="store_true",
        help="Use ^ and M- notation, except for LFD and TAB.",
    )
    parser.add_argument(
        "--max-line-length",
        type=_positive_int,
        default=None,
        metavar="N",
        help="Fail a source whose lines exceed N bytes (default: no limit).",
    )
    parser.add_argument(
        "--verbose",
        action="count",
        default=0,
        help="Increase log verbosity on stderr (can be specified multiple times).",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    config = Config.from_flags(
        number_nonblank=args.number_nonblank,
        number_all=args.number,
        show_ends=args.show_ends,
        show_nonprinting=args.show_nonprinting,
        show_tabs=args.show_tabs,
        verbosity=args.verbose,
        max_line_length=args.max_line_length,
    )

    configure_logging(verbosity=config.verbosity)
    LOG.debug("Starting neko with config: %s", config)

    try:
        return run_cat(
            args.files,
            config,
            stdin=sys.stdin.buffer if sys.stdin is not None else None,
            stdout=sys.stdout.buffer,
            stderr=sys.stderr,
        )
    except KeyboardInterrupt:
        return 130
    except BrokenPipeError:
        # The reader went away; point stdout at devnull so the interpreter's
        # final flush does not raise again.
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        return 1


if __name__ == "__main__":  # pragma: no cover - manual invocation
    raise SystemExit(main())

"""CLI entrypoint for gcgb."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterable
from typing import BinaryIO

from gcgb.config import PrecisionError, RunConfig, build_config
from gcgb.parse import NumberRangeError
from gcgb.render import iter_render
from gcgb.units import DEFAULT_PRECISION, MAX_PRECISION

logger = logging.getLogger(__name__)

PROG_VERSION = "gcgb 0.15"

LICENSE_TEXT = """\
The MIT License (MIT)
Copyright (c) 2021 David Ryack

Permission is hereby granted, free of charge, to any person obtaining a copy of
this software and associated documentation files (the "Software"), to deal in
the Software without restriction, including without limitation the rights to
use, copy, modify, merge, publish, distribute, sublicense, and/or sell copies of
the Software, and to permit persons to whom the Software is furnished to do so,
subject to the following conditions:

The above copyright notice and this permission notice shall be included in all
copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY, FITNESS
FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR
COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER
IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE SOFTWARE."""


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="gcgb",
        description="Convert byte counts to TiB, GiB, MiB and KiB.",
        add_help=False,
    )
    parser.add_argument(
        "numbers",
        nargs="*",
        help="Byte counts to convert (default: read lines from stdin).",
    )
    parser.add_argument(
        "-h",
        "-?",
        "--help",
        action="help",
        help="Show this help message and exit.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=PROG_VERSION,
        help="Show the program version and exit.",
    )
    parser.add_argument(
        "--license",
        action="store_true",
        help="Show the license text and exit.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose (DEBUG) logging.",
    )

    units = parser.add_argument_group("units")
    units.add_argument("-t", "--tib", action="store_true", help="display in TiB")
    units.add_argument("-g", "--gib", action="store_true", help="display in GiB")
    units.add_argument("-m", "--mib", action="store_true", help="display in MiB")
    units.add_argument("-k", "--kib", action="store_true", help="display in KiB")

    parser.add_argument(
        "-e",
        "--enum",
        action="store_true",
        help="enumerate results",
    )
    parser.add_argument(
        "-s",
        "--suppress",
        action="store_true",
        help="suppress SI postfix",
    )
    parser.add_argument(
        "-W",
        "--no-warnings",
        action="store_true",
        help=(
            "suppress warnings when invalid numbers are submitted; "
            "the processing will continue"
        ),
    )
    parser.add_argument(
        "-p",
        "--precision",
        type=int,
        default=DEFAULT_PRECISION,
        help=(
            "show results with a precision on N decimal places "
            f"(max: {MAX_PRECISION})"
        ),
    )

    return parser


def read_stdin(stream: BinaryIO | None = None) -> list[str]:
    """Read every line from *stream* (default ``sys.stdin.buffer``) until EOF.

    Lines are decoded as UTF-8 with undecodable bytes replaced, so a
    garbled line is reported as not a number instead of aborting the run.
    """
    source = stream if stream is not None else sys.stdin.buffer
    return [raw.decode("utf-8", errors="replace") for raw in source]


def _write_results(lines: Iterable[str], config: RunConfig) -> None:
    """Write converted lines to stdout and warnings to the log."""
    for rendered in iter_render(lines, config):
        if rendered.warning:
            logger.warning("%s", rendered.text)
        else:
            print(rendered.text)


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint.

    Args:
        argv: Command-line arguments.  Defaults to ``sys.argv[1:]``.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.license:
        print(LICENSE_TEXT)
        return

    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )

    try:
        config = build_config(
            tib=args.tib,
            gib=args.gib,
            mib=args.mib,
            kib=args.kib,
            precision=args.precision,
            suppress_suffix=args.suppress,
            enumerate_lines=args.enum,
            no_warn=args.no_warnings,
        )
        lines = args.numbers if args.numbers else read_stdin()
        _write_results(lines, config)
    except (PrecisionError, NumberRangeError) as exc:
        logger.error("%s", exc)
        sys.exit(1)

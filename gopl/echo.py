"""Print command-line arguments."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import TextIO


def echo_args(args: Sequence[str]) -> str:
    """Join the arguments with single spaces."""
    return " ".join(args)


def numbered_args(args: Sequence[str]) -> str:
    """Return one "index argument" line per argument, program name included."""
    return "\n".join(f"{i} {arg}" for i, arg in enumerate(args))


def echo(newline: bool, sep: str, args: Sequence[str], out: TextIO | None = None) -> None:
    """Write the arguments joined by sep, followed by a newline if asked."""
    stream = sys.stdout if out is None else out
    stream.write(sep.join(args))
    if newline:
        stream.write("\n")


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="echo")
    parser.add_argument("-n", action="store_true", help="omit trailing newline")
    parser.add_argument("-s", default=" ", metavar="sep", help="separator")
    parser.add_argument("args", nargs=argparse.REMAINDER)
    return parser


def main(argv: list[str] | None = None) -> int:
    options = _parser().parse_args(sys.argv[1:] if argv is None else argv)
    echo(not options.n, options.s, options.args)
    return 0
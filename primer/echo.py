"""Print command-line arguments joined by a separator."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from typing import TextIO


def echo(newline: bool, sep: str, args: Iterable[str], out: TextIO | None = None) -> None:
    """Write ``args`` joined by ``sep`` to ``out``, with a newline if asked."""
    if out is None:
        out = sys.stdout
    out.write(sep.join(args))
    if newline:
        out.write("\n")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="echo", description="Print arguments.")
    parser.add_argument("-n", action="store_true", help="omit trailing newline")
    parser.add_argument("-s", default=" ", metavar="SEP", help="separator")
    parser.add_argument("args", nargs="*")
    ns = parser.parse_args(argv)
    echo(not ns.n, ns.s, ns.args)
    return 0
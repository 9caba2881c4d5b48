"""Convert DIMACS edge files into the plain graph format."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator

from graphtint.graph import GraphFormatError


def _int_field(fields: list[str], index: int, line: str) -> int:
    try:
        return int(fields[index])
    except (IndexError, ValueError):
        raise GraphFormatError(f"malformed line: {line.rstrip()!r}") from None


def convert_dimacs(lines: Iterable[str]) -> Iterator[str]:
    """Yield the vertex count from the first problem line, then one "u v" per edge line.

    Comment lines and lines of any other kind are skipped.
    """
    header_seen = False
    for line in lines:
        fields = line.split()
        if not fields:
            continue
        kind = fields[0]
        if kind == "p":
            n = _int_field(fields, 2, line)
            if not header_seen:
                header_seen = True
                yield str(n)
        elif kind == "e":
            u = _int_field(fields, 1, line)
            v = _int_field(fields, 2, line)
            yield f"{u} {v}"


def main(argv: list[str] | None = None) -> int:
    """Read DIMACS from standard input and write the plain format to standard output."""
    parser = argparse.ArgumentParser(
        description="Convert a DIMACS graph on stdin to a vertex count and edge list."
    )
    parser.parse_args(argv)
    try:
        for out in convert_dimacs(sys.stdin):
            sys.stdout.write(out + "\n")
    except GraphFormatError as error:
        print(error, file=sys.stderr)
        return 1
    return 0
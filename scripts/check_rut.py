"""Validate RUTs from the command line or a file (one per line).

Usage:
    python scripts/check_rut.py 12.345.678-5 7654321-6
    python scripts/check_rut.py --file tutors.txt
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Iterable, TextIO

from clinivet.validators.rut import validate_rut


def check_ruts(ruts: Iterable[str], out: TextIO | None = None) -> int:
    """Print one line per RUT and return how many were invalid."""
    if out is None:
        out = sys.stdout
    invalid = 0
    for rut in ruts:
        result = validate_rut(rut)
        status = "OK" if result.is_valid else result.message
        print(f"{result.formatted}\t{status}", file=out)
        if not result.is_valid:
            invalid += 1
    return invalid


def _read_lines(path: Path) -> list[str]:
    return [line.strip() for line in path.read_text(encoding="utf-8").splitlines() if line.strip()]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Validate Chilean RUTs")
    parser.add_argument("ruts", nargs="*", help="RUTs to validate, any punctuation")
    parser.add_argument("--file", type=Path, default=None, help="File with one RUT per line")
    args = parser.parse_args(argv)

    ruts = list(args.ruts)
    if args.file is not None:
        ruts.extend(_read_lines(args.file))
    if not ruts:
        parser.error("no RUTs given")

    return 1 if check_ruts(ruts) else 0


if __name__ == "__main__":
    sys.exit(main())

# main.py
from __future__ import annotations

import argparse
import sys
from typing import List, TextIO

from debug import Debug
from errors import EnigmaError
from machine import Machine
from suites import SUITES, load_suite
from utilities import process, read_config_file, read_text


# ────────────────────────────────────────────────────────────────────────
#  1. CLI helpers
# ────────────────────────────────────────────────────────────────────────


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="enigma",
        description="Encrypt or decrypt messages with a rotor machine.",
    )
    p.add_argument("--verbose", action="store_true", help="Trace stepping and the signal path on stderr.")
    p.add_argument(
        "--suite",
        choices=sorted(SUITES),
        type=str.upper,
        help="Use a built-in wheel set instead of a CONFIG file.",
    )
    p.add_argument(
        "files",
        nargs="*",
        metavar="FILE",
        help="CONFIG [INPUT [OUTPUT]]; CONFIG is omitted when --suite is given. "
        "Input defaults to stdin, output to stdout.",
    )
    args = p.parse_args(argv)

    limit = 2 if args.suite else 3
    if (not args.suite and not args.files) or len(args.files) > limit:
        p.error("Usage: enigma [--verbose] [--suite NAME] [CONFIG] [INPUT [OUTPUT]]")
    return args


def build_machine(args: argparse.Namespace, debug: Debug) -> tuple[Machine, List[str]]:
    """Return the configured machine and the remaining INPUT/OUTPUT names."""
    if args.suite:
        return load_suite(args.suite, debug=debug), list(args.files)
    return read_config_file(args.files[0], debug=debug), list(args.files[1:])


def open_output(name: str | None) -> TextIO:
    if name is None:
        return sys.stdout
    try:
        return open(name, "w", encoding="utf-8")
    except OSError:
        raise EnigmaError(f"could not open {name}")


# ────────────────────────────────────────────────────────────────────────
#  2. Main entry point
# ────────────────────────────────────────────────────────────────────────


def run(args: argparse.Namespace) -> None:
    debug = Debug.verbose() if args.verbose else Debug()
    machine, rest = build_machine(args, debug)

    if rest:
        lines = read_text(rest[0]).splitlines()
    else:
        lines = sys.stdin.read().splitlines()

    out = open_output(rest[1] if len(rest) > 1 else None)
    try:
        for line in process(machine, lines):
            print(line, file=out)
    finally:
        if out is not sys.stdout:
            out.close()


def main(argv: List[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        run(args)
    except EnigmaError as excp:
        print(f"Error: {excp}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

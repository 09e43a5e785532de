# apps/cli/hack.py
"""
Interactive entry point for termhack.

This script:
  1) Collects the candidate passwords (arguments, --file, or stdin).
  2) Builds the candidate pool; an unusable list is fatal (exit status 2).
  3) Runs the command loop until the password is deduced or the player exits.

Examples:
  termhack TRIED TIRES TRIES TRIBE SPIES
  termhack --file dump.txt --strategy minimax
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List

from termhack.datasets import read_candidates, read_candidates_stream
from termhack.engine import HackError
from termhack.shell import App, TextConsole
from termhack.solvers import DEFAULT_STRATEGY, get_strategy_ids

EXIT_BAD_INPUT = 2


def _collect_candidates(args, console: TextConsole) -> List[str]:
    """
    Positional arguments win; then --file; otherwise read stdin until a blank line.
    """
    if args.passwords:
        return list(args.passwords)
    if args.file:
        return read_candidates(args.file)
    console.errput.write("Enter candidate passwords. End with blank line.\n")
    words = read_candidates_stream(console.input, console.prompt, console.errput)
    console.errput.write("Candidate passwords accepted.\n\n")
    return words


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="termhack",
        description="termhack: narrow down a terminal password from likeness feedback",
    )
    ap.add_argument("passwords", nargs="*", help="candidate passwords (all one length)")
    ap.add_argument("--file", help="read candidates from a file, one per line")
    ap.add_argument("--strategy", default=DEFAULT_STRATEGY, choices=get_strategy_ids(),
                    help="recommendation strategy")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")
    return ap


def main(argv: List[str] | None = None, console: TextConsole | None = None) -> int:
    """
    Parse CLI args, build the pool, run the session. Returns the exit status.
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )

    console = console or TextConsole.std()
    try:
        candidates = _collect_candidates(args, console)
        app = App(candidates, console, strategy=args.strategy)
    except (HackError, FileNotFoundError) as e:
        console.show_error(e)
        return EXIT_BAD_INPUT

    return app.run()


if __name__ == "__main__":
    sys.exit(main())

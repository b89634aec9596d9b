from typing import IO
import logging
import sys

import argparse

from forth.session import Session
from forth.interface import render_stack, SEPARATOR
from forth.errors import ForthError


# ---------------------------------------------------------------------------------------------------------------------
# CLI Implementation
#

def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="CLI for the tinyforth interpreter.")

    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "-e", "--eval",
        metavar="CODE",
        help="Evaluate CODE and print the resulting stack")
    group.add_argument(
        "-i", "--interactive",
        action="store_true",
        help="Start a REPL (the default when no code or file is given)")

    parser.add_argument("filename", nargs="?", help="The path to a source file")
    parser.add_argument(
        "--separator",
        default=SEPARATOR,
        help=f"Text placed between stack values in one-shot output (default: {SEPARATOR})")
    parser.add_argument(
        "--words",
        action="store_true",
        help="Also print the words that are defined after evaluation")
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log compilation and expansion details")

    args = parser.parse_args(argv)
    if args.interactive and args.filename:
        parser.error("a filename cannot be combined with --interactive")

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.eval is not None:
        return do_eval(args.eval, args.separator, args.words, sys.stdout)

    if args.filename:
        with open(args.filename, "r") as source_file:
            source = source_file.read()
        return do_eval(source, args.separator, args.words, sys.stdout)

    return do_repl(sys.stdin, sys.stdout)


def do_eval(source: str, separator: str, show_words: bool, out: IO) -> int:
    session = Session()
    try:
        session.evaluate(source)
    except ForthError as e:
        print(e.message, file=out)
        return 1

    print(render_stack(session.stack(), separator), file=out)
    if show_words:
        print(" ".join(session.words()), file=out)
    return 0


def do_repl(inp: IO, out: IO) -> int:
    session = Session()
    for line in inp:
        if line.strip().upper() == "BYE":
            break

        try:
            session.evaluate(line)
        except ForthError as e:
            print(e.message, file=out)
            continue

        print(format_stack(session.stack()) + " ok", file=out)
    return 0


# ---------------------------------------------------------------------------------------------------------------------
# Debug Helpers
#

def format_stack(stack: list[int]) -> str:
    # Bottom to top, the way Forth's `.S` shows it
    return " ".join(f"{value}" for value in stack)


# ---------------------------------------------------------------------------------------------------------------------
# Entry Point
#

if __name__ == "__main__":
    sys.exit(main())

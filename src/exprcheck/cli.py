"""Command-line entry point.

Usage:
    exprcheck PATH [--tokens] [--trace] [-v]

Prints ``accept`` or ``reject`` and exits 0. A lexical error is reported on
stderr with its position and exits 1 without a verdict; an unreadable file
exits 2; an expression nested too deeply to follow exits 3.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from exprcheck.config import RecognizerConfig, config_context
from exprcheck.errors import LexicalError, NestingError
from exprcheck.lexer import ArithmeticAutomaton, Scanner
from exprcheck.recognizer import Recognizer

EXIT_LEXICAL_ERROR = 1
EXIT_IO_ERROR = 2
EXIT_NESTING_ERROR = 3


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="exprcheck",
        description="Check whether a file holds a well-formed arithmetic expression.",
    )
    parser.add_argument("path", type=Path, help="File containing one expression")
    parser.add_argument(
        "--tokens",
        action="store_true",
        help="Print the token stream instead of a verdict",
    )
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Log every token and grammar rule (implies --verbose)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose or args.trace:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    config = RecognizerConfig(trace_tokens=args.trace, trace_rules=args.trace)
    source_file = str(args.path)

    try:
        with config_context(config), args.path.open("rb") as stream:
            scanner = Scanner(ArithmeticAutomaton(), stream, source_file=source_file)
            if args.tokens:
                for token in scanner.tokenize():
                    print(f"{token.lineno}:{token.col} {token.type.label} {token.value!r}")
                return 0
            accepted = Recognizer(scanner).recognize()
    except LexicalError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_LEXICAL_ERROR
    except NestingError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_NESTING_ERROR
    except OSError as e:
        print(f"error: cannot read {source_file}: {e.strerror or e}", file=sys.stderr)
        return EXIT_IO_ERROR

    print("accept" if accepted else "reject")
    return 0

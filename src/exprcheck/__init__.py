"""
exprcheck — Grammar checker for arithmetic expressions

Decides whether an input is a well-formed arithmetic expression made of
numbers, letter-only identifiers, ``+ - * / ^``, unary sign and
parentheses. The answer is accept or reject; nothing is evaluated.

Quick Start:
    >>> from exprcheck import recognize
    >>> recognize("1 + 2 * 3^2")
    True
    >>> recognize("(1+)")
    False

    >>> from exprcheck import tokenize
    >>> tokenize("3.14+x")
    [Token(FLOAT, '3.14', 1:1), Token(PLUS, '+', 1:5), Token(VARIABLE, 'x', 1:6)]

Invalid characters are not a verdict; they raise LexicalError:
    >>> recognize("1 & 2")
    Traceback (most recent call last):
    ...
    exprcheck.errors.LexicalError: 1:3 Invalid character '&'
"""

from __future__ import annotations

import os

from exprcheck.config import (
    RecognizerConfig,
    config_context,
    get_config,
    reset_config,
    set_config,
)
from exprcheck.errors import ExprcheckError, LexicalError, NestingError
from exprcheck.lexer import ArithmeticAutomaton, Scanner
from exprcheck.location import SourceLocation
from exprcheck.protocols import Automaton
from exprcheck.recognizer import Recognizer
from exprcheck.tokens import Token, TokenType

__version__ = "0.1.0"


def recognize(source: str | bytes, *, source_file: str | None = None) -> bool:
    """Check an in-memory expression.

    Args:
        source: Expression text
        source_file: Optional file name used in error messages

    Returns:
        True if the whole input is one well-formed expression

    Raises:
        LexicalError: The input contains a character no token can start with,
            or ends in the middle of a number such as ``3.``
        NestingError: Parentheses nest deeper than the recursion limit allows
    """
    return Recognizer(Scanner.from_source(source, source_file=source_file)).recognize()


def recognize_file(path: str | os.PathLike[str]) -> bool:
    """Check the expression stored in ``path``.

    The file is opened in binary mode and closed once the verdict is known,
    whether it accepts, rejects, or raises LexicalError.
    """
    source_file = os.fspath(path)
    with open(source_file, "rb") as stream:
        scanner = Scanner(ArithmeticAutomaton(), stream, source_file=source_file)
        return Recognizer(scanner).recognize()


def tokenize(source: str | bytes, *, source_file: str | None = None) -> list[Token]:
    """Scan ``source`` into its token list, whitespace dropped."""
    return list(Scanner.from_source(source, source_file=source_file).tokenize())


__all__ = [  # noqa: RUF022 — grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "recognize",
    "recognize_file",
    "tokenize",
    # Components
    "Automaton",
    "ArithmeticAutomaton",
    "Scanner",
    "Recognizer",
    # Tokens
    "Token",
    "TokenType",
    "SourceLocation",
    # Errors
    "ExprcheckError",
    "LexicalError",
    "NestingError",
    # Configuration (ContextVar-based)
    "RecognizerConfig",
    "get_config",
    "set_config",
    "reset_config",
    "config_context",
]

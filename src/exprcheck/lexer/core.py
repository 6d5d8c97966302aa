"""Table-driven maximal-munch scanner.

Drives an :class:`~exprcheck.protocols.Automaton` over a binary stream one
byte at a time. Each lexeme is the longest prefix the automaton accepts;
the byte that ends it is held back and starts the next lexeme.

Thread Safety:
Scanner instances are single-use. Create one per input stream.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

import io
from collections.abc import Iterator
from typing import BinaryIO

from exprcheck.config import get_config
from exprcheck.errors import LexicalError
from exprcheck.lexer.states import EOF_SYMBOL, ERROR_STATE, NEWLINE, SKIP_VALUE
from exprcheck.lexer.table import ArithmeticAutomaton
from exprcheck.protocols import Automaton
from exprcheck.tokens import Token, TokenType
from exprcheck.utils.logger import get_logger

logger = get_logger(__name__)


class Scanner:
    """Pull-based scanner producing one Token per call.

    Position tracking counts every byte exactly once, whitespace included,
    so token positions stay exact across multi-line gaps. ``_lineno`` and
    ``_col`` always describe the next byte not yet consumed into a lexeme.

    Usage:
            >>> scanner = Scanner.from_source("3.14+x")
            >>> list(scanner.tokenize())
        [Token(FLOAT, '3.14', 1:1), Token(PLUS, '+', 1:5), Token(VARIABLE, 'x', 1:6)]

    Thread Safety:
        Scanner instances are single-use. One recognizer pulls from one
        scanner; concurrent pulls are not supported.

    """

    __slots__ = (
        "_automaton",
        "_stream",
        "_source_file",
        "_pending",
        "_buffer",
        "_lineno",
        "_col",
        "_trace",
    )

    def __init__(
        self,
        automaton: Automaton,
        stream: BinaryIO,
        source_file: str | None = None,
    ) -> None:
        """Bind a scanner to an automaton and an input stream.

        The scanner does not close ``stream``; the caller owns it.

        Args:
            automaton: Lexicon to scan with
            stream: Binary stream, read one byte at a time
            source_file: Optional source file path for error messages
        """
        self._automaton = automaton
        self._stream = stream
        self._source_file = source_file

        # Byte read past the end of the previous lexeme, not yet consumed
        self._pending: int | None = None
        self._buffer = bytearray()
        self._lineno = 1
        self._col = 1
        self._trace = get_config().trace_tokens

    @classmethod
    def from_source(
        cls,
        source: str | bytes,
        automaton: Automaton | None = None,
        source_file: str | None = None,
    ) -> Scanner:
        """Create a scanner over in-memory source.

        Args:
            source: Expression text (``str`` is UTF-8 encoded)
            automaton: Lexicon to use (defaults to ArithmeticAutomaton)
            source_file: Optional source file path for error messages
        """
        if isinstance(source, str):
            source = source.encode("utf-8")
        return cls(automaton or ArithmeticAutomaton(), io.BytesIO(source), source_file)

    @property
    def source_file(self) -> str | None:
        """Source file path used in error messages."""
        return self._source_file

    def eof(self) -> bool:
        """True once end of stream has been consumed by a maximal-munch step."""
        return self._pending == EOF_SYMBOL

    def get_token(self) -> Token | None:
        """Return the next non-skip token, or None at end of input.

        Raises:
            LexicalError: The input holds a byte sequence no lexeme matches.
        """
        while not self.eof():
            lineno, col = self._lineno, self._col
            self._buffer.clear()

            kind = self._munch()
            if kind is None or kind == SKIP_VALUE:
                continue

            token = Token(
                type=TokenType(kind),
                value=self._buffer.decode("utf-8"),
                lineno=lineno,
                col=col,
                source_file=self._source_file,
            )
            if self._trace:
                logger.debug("token %r", token)
            return token
        return None

    def tokenize(self) -> Iterator[Token]:
        """Yield tokens until end of input."""
        while (token := self.get_token()) is not None:
            yield token

    def _munch(self) -> int | None:
        """Consume one maximal lexeme and return its tag.

        Returns None when the stream ends before a lexeme starts.
        """
        automaton = self._automaton
        state = automaton.start_state
        symbol = self._take()

        while True:
            next_state = automaton.next(state, symbol)
            if next_state == ERROR_STATE:
                if state in automaton.final_states:
                    self._pending = symbol
                    return automaton.value(state)
                if symbol == EOF_SYMBOL and state == automaton.start_state:
                    self._pending = EOF_SYMBOL
                    return None
                raise self._error(symbol)

            self._buffer.append(symbol)
            self._advance_position(symbol)
            state = next_state
            symbol = self._read()

    def _take(self) -> int:
        """Return the held-back byte if any, otherwise read a new one."""
        if self._pending is not None:
            symbol, self._pending = self._pending, None
            return symbol
        return self._read()

    def _read(self) -> int:
        data = self._stream.read(1)
        return data[0] if data else EOF_SYMBOL

    def _advance_position(self, symbol: int) -> None:
        if symbol == NEWLINE:
            self._lineno += 1
            self._col = 1
        else:
            self._col += 1

    def _error(self, symbol: int) -> LexicalError:
        if symbol == EOF_SYMBOL:
            message = f"Unexpected end of input after {self._buffer.decode('latin-1')!r}"
        elif 0x20 <= symbol < 0x7F:
            message = f"Invalid character {chr(symbol)!r}"
        else:
            message = f"Invalid byte 0x{symbol:02x}"
        return LexicalError(message, self._lineno, self._col, self._source_file)

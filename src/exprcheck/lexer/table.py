"""Transition table for the arithmetic lexicon.

Recognizes, with maximal munch:

    float       digit+ ('.' digit+)?
    variable    letter+
    operators   + - * / ^ ( )
    whitespace  [ \\t\\r\\n]+        (skipped)

Identifiers are letters only; ``x1`` scans as ``x`` followed by ``1``.

Thread Safety:
The table is built once in ``__init__`` and frozen into tuples. Instances
are immutable and can be shared by any number of scanners.

"""

from __future__ import annotations

from exprcheck.lexer.states import (
    DIGITS,
    DIVIDE,
    DOT,
    EOF_SYMBOL,
    ERROR_STATE,
    FRACTION,
    IDENTIFIER,
    INTEGER,
    LETTERS,
    LPAREN,
    MINUS,
    NO_VALUE,
    PLUS,
    POW,
    RPAREN,
    SKIP_VALUE,
    START,
    TIMES,
    WHITESPACE,
    WHITESPACE_CHARS,
)
from exprcheck.tokens import TokenType

# Single-character tokens: symbol -> (state, tag)
_PUNCTUATION: dict[str, tuple[int, TokenType]] = {
    "+": (PLUS, TokenType.PLUS),
    "-": (MINUS, TokenType.MINUS),
    "*": (TIMES, TokenType.TIMES),
    "/": (DIVIDE, TokenType.DIVIDE),
    "^": (POW, TokenType.POW),
    "(": (LPAREN, TokenType.LPAREN),
    ")": (RPAREN, TokenType.RPAREN),
}


class ArithmeticAutomaton:
    """Deterministic automaton for the arithmetic lexicon.

    Conforms to :class:`exprcheck.protocols.Automaton`.

    Usage:
            >>> automaton = ArithmeticAutomaton()
            >>> automaton.next(automaton.start_state, ord("7")) in automaton.final_states
            True
            >>> automaton.next(automaton.start_state, ord("&"))
            0

    """

    __slots__ = (
        "states",
        "alphabet",
        "start_state",
        "final_states",
        "_transitions",
        "_values",
    )

    def __init__(self) -> None:
        self.states: frozenset[int] = frozenset(range(START, WHITESPACE + 1))
        self.alphabet = range(0, 256)
        self.start_state = START
        self.final_states: frozenset[int] = self.states - {START, DOT}

        size = max(self.states) + 1
        transitions = [[ERROR_STATE] * len(self.alphabet) for _ in range(size)]
        values = [NO_VALUE] * size

        def connect(source: int, symbols: bytes, target: int) -> None:
            for symbol in symbols:
                transitions[source][symbol] = target

        # Numbers
        connect(START, DIGITS, INTEGER)
        connect(INTEGER, DIGITS, INTEGER)
        connect(INTEGER, b".", DOT)
        connect(DOT, DIGITS, FRACTION)
        connect(FRACTION, DIGITS, FRACTION)

        # Identifiers
        connect(START, LETTERS, IDENTIFIER)
        connect(IDENTIFIER, LETTERS, IDENTIFIER)

        for char, (state, kind) in _PUNCTUATION.items():
            connect(START, char.encode("ascii"), state)
            values[state] = kind

        connect(START, WHITESPACE_CHARS, WHITESPACE)
        connect(WHITESPACE, WHITESPACE_CHARS, WHITESPACE)

        values[INTEGER] = TokenType.FLOAT
        values[FRACTION] = TokenType.FLOAT
        values[IDENTIFIER] = TokenType.VARIABLE
        values[WHITESPACE] = SKIP_VALUE

        self._transitions: tuple[tuple[int, ...], ...] = tuple(
            tuple(row) for row in transitions
        )
        self._values: tuple[int, ...] = tuple(values)

    def next(self, state: int, symbol: int) -> int:
        if symbol == EOF_SYMBOL:
            return ERROR_STATE
        assert state in self.states, f"unknown state {state}"
        assert symbol in self.alphabet, f"symbol {symbol} outside alphabet"
        return self._transitions[state][symbol]

    def value(self, state: int) -> int:
        assert state in self.states, f"unknown state {state}"
        return self._values[state]

    def __repr__(self) -> str:
        return f"ArithmeticAutomaton(states={len(self.states)}, final={len(self.final_states)})"

"""Scanner constants and the state numbering of the arithmetic lexicon.

The sentinels are shared by every automaton; the numbered states belong to
``ArithmeticAutomaton`` only.
"""

from __future__ import annotations

# Sink state: "no valid transition". Never a member of an automaton's states.
ERROR_STATE = 0

# Symbol returned by the stream once it is exhausted (outside any alphabet)
EOF_SYMBOL = -1

# Tag of final states whose lexemes are dropped (whitespace)
SKIP_VALUE = 0

# Tag of non-final states; never read by the scanner
NO_VALUE = -1

NEWLINE = ord("\n")

# Arithmetic lexicon states
START = 1
INTEGER = 2  # digit+
DOT = 3  # digit+ '.'   (not final)
FRACTION = 4  # digit+ '.' digit+
IDENTIFIER = 5  # letter+
PLUS = 6
MINUS = 7
TIMES = 8
DIVIDE = 9
POW = 10
LPAREN = 11
RPAREN = 12
WHITESPACE = 13

DIGITS = b"0123456789"
LETTERS = b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
WHITESPACE_CHARS = b" \t\r\n"

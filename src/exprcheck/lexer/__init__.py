"""Table-driven lexical scanner for arithmetic expressions.

Architecture:
lexer/
├── __init__.py          # Re-exports Scanner, ArithmeticAutomaton
├── core.py              # Scanner (maximal munch + position tracking)
├── table.py             # ArithmeticAutomaton transition table
└── states.py            # Sentinels and state numbering

Usage:
    >>> from exprcheck.lexer import Scanner
    >>> for token in Scanner.from_source("(a + 1.5)").tokenize():
    ...     print(token)
Token(LPAREN, '(', 1:1)
Token(VARIABLE, 'a', 1:2)
Token(PLUS, '+', 1:4)
Token(FLOAT, '1.5', 1:6)
Token(RPAREN, ')', 1:9)

"""

from exprcheck.lexer.core import Scanner
from exprcheck.lexer.table import ArithmeticAutomaton

__all__ = ["ArithmeticAutomaton", "Scanner"]

"""Predictive recursive-descent recognizer for arithmetic expressions.

Grammar (one method per nonterminal):

    E  -> T EE
    EE -> '+' T EE | '-' T EE | ε
    T  -> X TT
    TT -> '*' X TT | '/' X TT | ε
    X  -> Y XX
    XX -> '^' X | ε
    Y  -> '+' F | '-' F | F
    F  -> '(' E ')' | float | variable

Precedence is carried by the grammar alone: additive < multiplicative <
exponentiation < unary sign < atom. ``^`` is right-associative because XX
recurses into X; ``+ - * /`` are left-associative and are matched by loops.

The recognizer only answers yes or no. Grammar failures are plain ``False``
results; a :class:`~exprcheck.errors.LexicalError` raised by the scanner
while a token is pulled propagates out of :meth:`Recognizer.recognize`.
Nesting that exhausts the interpreter's recursion limit is reported as
:class:`~exprcheck.errors.NestingError`.

Thread Safety:
Recognizer instances are single-use. Create one per scanner.

"""

from __future__ import annotations

from exprcheck.config import get_config
from exprcheck.errors import NestingError
from exprcheck.lexer import Scanner
from exprcheck.tokens import Token, TokenType
from exprcheck.utils.logger import get_logger

logger = get_logger(__name__)

_ADDITIVE = (TokenType.PLUS, TokenType.MINUS)
_MULTIPLICATIVE = (TokenType.TIMES, TokenType.DIVIDE)
_SIGNS = (TokenType.PLUS, TokenType.MINUS)


class Recognizer:
    """LL(1) validator over a scanner's token stream.

    Usage:
            >>> Recognizer(Scanner.from_source("-x^2")).recognize()
            True
            >>> Recognizer(Scanner.from_source("(1+)")).recognize()
            False

    """

    __slots__ = ("_scanner", "_last", "_trace")

    def __init__(self, scanner: Scanner) -> None:
        self._scanner = scanner
        # Lookahead token; None once the input is exhausted
        self._last: Token | None = None
        self._trace = get_config().trace_rules

    def recognize(self) -> bool:
        """Return True iff the whole input is one well-formed expression.

        Raises:
            LexicalError: The scanner hit an invalid character.
            NestingError: Parentheses nest deeper than the recursion limit.
        """
        self._last = self._scanner.get_token()
        try:
            status = self.recognize_e()
        except RecursionError:
            last = self._last
            raise NestingError(
                "Expression nested too deeply",
                last.lineno if last is not None else None,
                last.col if last is not None else None,
                self._scanner.source_file,
            ) from None
        if status and self._last is not None:
            logger.debug("trailing input at %s", self._last.location)
            status = False
        logger.debug("verdict: %s", "accept" if status else "reject")
        return status

    def recognize_e(self) -> bool:
        self._enter("E")
        return self.recognize_t() and self.recognize_ee()

    def recognize_ee(self) -> bool:
        self._enter("EE")
        while self._lookahead() in _ADDITIVE:
            if not (self.recognize_terminal(self._lookahead()) and self.recognize_t()):
                return False
        return True

    def recognize_t(self) -> bool:
        self._enter("T")
        return self.recognize_x() and self.recognize_tt()

    def recognize_tt(self) -> bool:
        self._enter("TT")
        while self._lookahead() in _MULTIPLICATIVE:
            if not (self.recognize_terminal(self._lookahead()) and self.recognize_x()):
                return False
        return True

    def recognize_x(self) -> bool:
        self._enter("X")
        return self.recognize_y() and self.recognize_xx()

    def recognize_xx(self) -> bool:
        self._enter("XX")
        if self._lookahead() == TokenType.POW:
            return self.recognize_terminal(TokenType.POW) and self.recognize_x()
        return True

    def recognize_y(self) -> bool:
        self._enter("Y")
        lookahead = self._lookahead()
        if lookahead in _SIGNS and not self.recognize_terminal(lookahead):
            return False
        return self.recognize_f()

    def recognize_f(self) -> bool:
        self._enter("F")
        lookahead = self._lookahead()
        if lookahead == TokenType.LPAREN:
            return (
                self.recognize_terminal(TokenType.LPAREN)
                and self.recognize_e()
                and self.recognize_terminal(TokenType.RPAREN)
            )
        if lookahead in (TokenType.FLOAT, TokenType.VARIABLE):
            return self.recognize_terminal(lookahead)
        return False

    def recognize_terminal(self, kind: TokenType) -> bool:
        """Match ``kind`` against the lookahead and advance on success."""
        if self._last is not None and self._last.type == kind:
            self._last = self._scanner.get_token()
            return True
        return False

    def _lookahead(self) -> TokenType | None:
        return self._last.type if self._last is not None else None

    def _enter(self, rule: str) -> None:
        if self._trace:
            logger.debug("%s at %r", rule, self._last)

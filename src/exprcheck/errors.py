"""Exception classes for exprcheck.

A token stream that does not satisfy the expression grammar is an ordinary
``False`` verdict, not an error. Exceptions are reserved for input the
package cannot judge: invalid characters, and nesting deeper than the
interpreter's recursion limit.
"""

from __future__ import annotations


class ExprcheckError(Exception):
    """Base exception for all exprcheck errors.

    Carries an optional position, rendered as a ``file:line:col`` prefix
    with absent parts left out.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize error with optional location.

        Args:
            message: Error description
            lineno: Line number (1-indexed)
            col_offset: Column (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        parts = [str(p) for p in (source_file, lineno, col_offset) if p is not None]
        prefix = ":".join(parts) + " " if parts else ""
        super().__init__(f"{prefix}{message}")


class LexicalError(ExprcheckError):
    """Error during scanning.

    Raised when the scanner sits in a non-final state and the next symbol
    (or end of input) has no transition. Scanning stops immediately; there
    is no resynchronization.
    """


class NestingError(ExprcheckError):
    """Expression nested deeper than the recursive descent can follow.

    Each parenthesis level costs several Python frames, so a few hundred
    levels exhaust the default recursion limit. The position is that of
    the lookahead token when recognition gave up.
    """

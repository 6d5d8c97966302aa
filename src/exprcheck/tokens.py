"""Token and TokenType definitions for the exprcheck scanner.

The scanner produces a stream of Token objects that the recognizer consumes.
Each Token has a kind, the exact lexeme, and the position of its first
character.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from exprcheck.location import SourceLocation


class TokenType(IntEnum):
    """Token kinds produced by the scanner.

    Values double as the tags stored on the automaton's final states, so
    they must stay disjoint from ``SKIP_VALUE`` (0) and ``NO_VALUE`` (-1).

    """

    FLOAT = 1  # 3, 3.14
    VARIABLE = 2  # x, Rate
    PLUS = 3  # +
    MINUS = 4  # -
    TIMES = 5  # *
    DIVIDE = 6  # /
    POW = 7  # ^
    LPAREN = 8  # (
    RPAREN = 9  # )

    @property
    def label(self) -> str:
        """Lowercase display name ("float", "lparen", ...)."""
        return self.name.lower()


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the scanner.

    Attributes:
        type: The token kind
        value: The exact lexeme consumed from the input
        lineno: Line of the first character (1-indexed)
        col: Column of the first character (1-indexed)
        source_file: Optional source file path

    Performance:
        SourceLocation is created lazily on first access to `.location`.

    """

    type: TokenType
    value: str
    lineno: int
    col: int
    source_file: str | None = None
    # Cache field - excluded from repr and comparison
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @property
    def location(self) -> SourceLocation:
        """Get source location (lazily created and cached)."""
        if self._location_cache is not None:
            return self._location_cache

        # Import here to avoid circular import at module load
        from exprcheck.location import SourceLocation

        loc = SourceLocation(
            lineno=self.lineno,
            col_offset=self.col,
            end_col_offset=self.col + len(self.value),
            source_file=self.source_file,
        )
        object.__setattr__(self, "_location_cache", loc)
        return loc

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        return f"Token({self.type.name}, {self.value!r}, {self.lineno}:{self.col})"

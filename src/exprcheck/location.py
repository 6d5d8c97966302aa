"""Source location tracking for tokens and error messages.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Position of a token in the input.
    
    All positions are 1-indexed. Tokens never span lines, so a single
    line number is enough; ``end_col_offset`` is the column just past the
    last character.
    
    Attributes:
        lineno: Line number (1-indexed)
        col_offset: Starting column (1-indexed)
        end_col_offset: Column after the last character (optional)
        source_file: Source file path (optional)
    
    Examples:
            >>> loc = SourceLocation(lineno=2, col_offset=5)
            >>> str(loc)
            '2:5'
    
            >>> str(SourceLocation(1, 3, 4, "expr.txt"))
            'expr.txt:1:3'
        
    """

    lineno: int
    col_offset: int
    end_col_offset: int | None = None
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "expr.txt:10:5" or "10:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

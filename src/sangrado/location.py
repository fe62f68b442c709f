"""Source location tracking for error messages and debugging.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Source location of a token.

    Tokens never span lines, so a location is a line plus a column range.
    All positions are 1-indexed.

    Attributes:
        lineno: Line number (1-indexed)
        col_offset: Starting column offset (1-indexed)
        end_col_offset: Column just past the lexeme (optional)
        source_file: Source file path (optional)

    Examples:
            >>> loc = SourceLocation(3, 5, source_file="prog.py")
            >>> str(loc)
            'prog.py:3:5'

    """

    lineno: int
    col_offset: int
    end_col_offset: int | None = None
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "prog.py:10:5" or "10:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

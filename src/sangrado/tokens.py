"""Token and TokenType definitions for the Sangrado lexer.

The lexer produces a flat stream of Token objects for a downstream parser.
Block structure is already explicit: INDENT, DEDENT and NEWLINE tokens are
synthesized from layout.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

Performance Note:
Token stores raw coordinates and lazily creates SourceLocation on demand.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sangrado.location import SourceLocation


class TokenType(Enum):
    """Token types produced by the lexer.

    Organized by category:
    - Structure (INDENT, DEDENT, NEWLINE, EOF)
    - Keywords and boolean literals
    - Identifiers and numeric literals
    - Operators and punctuation

    """

    # Structure (synthesized from layout)
    INDENT = auto()
    DEDENT = auto()
    NEWLINE = auto()
    EOF = auto()  # Only with LexConfig.emit_eof

    # Keywords
    AND = auto()
    BREAK = auto()
    DEF = auto()
    ELIF = auto()
    ELSE = auto()
    FOR = auto()
    IF = auto()
    NOT = auto()
    OR = auto()
    RETURN = auto()
    WHILE = auto()

    # Literals and names
    BOOLEAN = auto()  # True / False
    IDENTIFIER = auto()
    FLOAT = auto()  # 1.5, -0.25, .5
    INTEGER = auto()  # 42, -3

    # Arithmetic and assignment
    ASSIGN = auto()  # =
    PLUS = auto()  # +
    MINUS = auto()  # -
    TIMES = auto()  # *
    DIVIDEDBY = auto()  # /

    # Comparison
    EQ = auto()  # ==
    NEQ = auto()  # !=
    GT = auto()  # >
    GTE = auto()  # >=
    LT = auto()  # <
    LTE = auto()  # <=

    # Punctuation
    LPAREN = auto()  # (
    RPAREN = auto()  # )
    COMMA = auto()  # ,
    COLON = auto()  # :

    @property
    def is_structural(self) -> bool:
        """True for tokens synthesized from layout rather than lexemes."""
        return self in STRUCTURAL_TYPES


STRUCTURAL_TYPES: frozenset[TokenType] = frozenset(
    {TokenType.INDENT, TokenType.DEDENT, TokenType.NEWLINE, TokenType.EOF}
)


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        type: The token type (from TokenType enum)
        value: The lexeme text from source; empty for structural tokens
        _lineno: Line number (1-indexed)
        _col: Column offset (1-indexed)
        literal: Parsed payload: int for INTEGER, float for FLOAT,
            bool for BOOLEAN, None for everything else
        _source_file: Optional source file path

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.
        The lazy cache uses idempotent write (safe for concurrent access).

    """

    type: TokenType
    value: str
    _lineno: int
    _col: int
    literal: int | float | bool | None = None
    _source_file: str | None = None
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
        from sangrado.location import SourceLocation

        loc = SourceLocation(
            lineno=self._lineno,
            col_offset=self._col,
            end_col_offset=self._col + len(self.value),
            source_file=self._source_file,
        )
        object.__setattr__(self, "_location_cache", loc)
        return loc

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        if self.type in STRUCTURAL_TYPES:
            return f"Token({self.type.name}, {self._lineno}:{self._col})"
        return f"Token({self.type.name}, {self.value!r}, {self._lineno}:{self._col})"

    @property
    def lineno(self) -> int:
        """Line number (convenience accessor)."""
        return self._lineno

    @property
    def col(self) -> int:
        """Column offset (convenience accessor)."""
        return self._col

"""Exception classes for Sangrado.

Both lexical failures are fatal: the token iterator raises and yields
nothing further.
"""

from __future__ import annotations


class SangradoError(Exception):
    """Base exception for all Sangrado errors.

    Subclass this for specific error categories.
    """

    pass


class LexError(SangradoError):
    """Error during tokenization.

    Carries the 1-indexed source position of the offending input.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize lex error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column offset where error occurred (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class IndentError(LexError):
    """Leading whitespace matches no open indentation level.

    Raised when a line dedents to a width that is not on the
    indentation stack.
    """

    def __init__(
        self,
        width: int,
        lineno: int,
        *,
        levels: tuple[int, ...] = (),
        message: str | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize indentation error.

        Args:
            width: Indentation width of the offending line
            lineno: Offending line number (1-indexed)
            levels: Open indentation levels at the time of the error
            message: Override for the default message
            source_file: Path to source file (optional)
        """
        self.width = width
        self.levels = levels
        if message is None:
            message = f"unindent to width {width} does not match any outer indentation level"
            if levels:
                message += f" (open levels: {', '.join(map(str, levels))})"
        super().__init__(message, lineno, source_file=source_file)


class MixedIndentError(IndentError):
    """Inconsistent use of tabs and spaces in indentation.

    Only raised when LexConfig.strict_indentation is enabled.
    """

    def __init__(
        self,
        width: int,
        lineno: int,
        *,
        levels: tuple[int, ...] = (),
        source_file: str | None = None,
    ) -> None:
        super().__init__(
            width,
            lineno,
            levels=levels,
            message="inconsistent use of tabs and spaces in indentation",
            source_file=source_file,
        )


class UnrecognizedTokenError(LexError):
    """Input character matches no lexical pattern.

    Attributes:
        char: The offending character
    """

    def __init__(
        self,
        char: str,
        lineno: int,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize unrecognized token error.

        Args:
            char: The character that could not be classified
            lineno: Line number (1-indexed)
            col_offset: Column of the character (1-indexed)
            source_file: Path to source file (optional)
        """
        self.char = char
        super().__init__(f"unrecognized character {char!r}", lineno, col_offset, source_file)

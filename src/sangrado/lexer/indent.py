"""Indentation stack for block structure.

The tracker owns the stack of open indentation widths. It is created fresh
for every Lexer, so no indentation state outlives a single scan.

Widths are raw character counts: a tab and a space each count as one.
"""

from __future__ import annotations

from sangrado.errors import IndentError, MixedIndentError


class IndentTracker:
    """Stack of open indentation levels.

    The bottom level is always 0 and levels strictly increase toward the
    top. Every transition is validated before the stack is mutated, so a
    failed transition leaves the stack untouched.

    Usage:
            >>> tracker = IndentTracker()
            >>> tracker.resolve("    ", lineno=2)
            1
            >>> tracker.resolve("", lineno=3)
            -1

    """

    __slots__ = ("_widths", "_prefixes", "_strict", "_source_file")

    def __init__(self, *, strict: bool = False, source_file: str | None = None) -> None:
        """Initialize tracker with the single zero level.

        Args:
            strict: Also check that tabs and spaces are used consistently
            source_file: Optional source file path for error messages
        """
        self._widths: list[int] = [0]
        # Literal whitespace of each open level, used only in strict mode
        self._prefixes: list[str] = [""]
        self._strict = strict
        self._source_file = source_file

    @property
    def levels(self) -> tuple[int, ...]:
        """Snapshot of the open widths, bottom first."""
        return tuple(self._widths)

    @property
    def depth(self) -> int:
        """Number of open non-zero levels."""
        return len(self._widths) - 1

    @property
    def top(self) -> int:
        return self._widths[-1]

    def resolve(self, indent: str, lineno: int) -> int:
        """Apply the leading whitespace of a logical line.

        Args:
            indent: Leading whitespace of the line (spaces and tabs only)
            lineno: Line number, for error reporting

        Returns:
            1 if a level was opened, 0 if unchanged, or -n when n levels
            were closed.

        Raises:
            IndentError: The width matches no open level.
            MixedIndentError: Strict mode and the whitespace disagrees with
                the enclosing levels.
        """
        width = len(indent)
        top = self._widths[-1]

        if width > top:
            if self._strict and not indent.startswith(self._prefixes[-1]):
                raise self._mixed(width, lineno)
            self._widths.append(width)
            self._prefixes.append(indent)
            return 1

        if width == top:
            if self._strict and indent != self._prefixes[-1]:
                raise self._mixed(width, lineno)
            return 0

        try:
            target = self._widths.index(width)
        except ValueError:
            raise IndentError(
                width, lineno, levels=self.levels, source_file=self._source_file
            ) from None

        if self._strict and indent != self._prefixes[target]:
            raise self._mixed(width, lineno)

        closed = len(self._widths) - 1 - target
        del self._widths[target + 1 :]
        del self._prefixes[target + 1 :]
        return -closed

    def close(self) -> int:
        """Close every non-zero level at end of input.

        Returns:
            Number of levels closed.
        """
        closed = len(self._widths) - 1
        del self._widths[1:]
        del self._prefixes[1:]
        return closed

    def _mixed(self, width: int, lineno: int) -> MixedIndentError:
        return MixedIndentError(
            width, lineno, levels=self.levels, source_file=self._source_file
        )

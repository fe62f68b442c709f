"""Indentation scanner mixin.

Turns indentation transitions into INDENT and DEDENT tokens.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from sangrado.tokens import Token, TokenType
from sangrado.utils.logger import get_logger

if TYPE_CHECKING:
    from sangrado.lexer.indent import IndentTracker

logger = get_logger(__name__)


class IndentScannerMixin:
    """Mixin providing structural token emission.

    The transition is fully resolved by the tracker before the first
    token is yielded, so a line with bad indentation produces no tokens.

    """

    _indents: IndentTracker
    _lineno: int

    def _make_token(
        self,
        token_type: TokenType,
        value: str,
        col: int,
        *,
        literal: int | float | bool | None = None,
    ) -> Token:
        """Create token on the current line. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_indent(self, indent: str) -> Iterator[Token]:
        """Emit structural tokens for the leading whitespace of a line.

        Args:
            indent: Leading whitespace of a non-blank line

        Yields:
            One INDENT, zero or more DEDENTs, or nothing.
        """
        change = self._indents.resolve(indent, self._lineno)
        if change == 0:
            return

        if change > 0:
            logger.debug(
                "line %d: indent to width %d (depth %d)",
                self._lineno,
                len(indent),
                self._indents.depth,
            )
            yield self._make_token(TokenType.INDENT, "", 1)
            return

        logger.debug(
            "line %d: dedent %d level(s) to width %d",
            self._lineno,
            -change,
            len(indent),
        )
        for _ in range(-change):
            yield self._make_token(TokenType.DEDENT, "", 1)

    def _scan_closing_dedents(self) -> Iterator[Token]:
        """Close every open level at end of input.

        Yields:
            One DEDENT per open non-zero level.
        """
        closed = self._indents.close()
        if closed:
            logger.debug("end of input: closing %d level(s)", closed)
        for _ in range(closed):
            yield self._make_token(TokenType.DEDENT, "", 1)

"""Numeric literal classifier mixin."""

from decimal import Decimal

from sangrado.lexer.charsets import DIGITS
from sangrado.tokens import Token, TokenType


class NumberClassifierMixin:
    """Mixin providing INTEGER and FLOAT classification."""

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

    def _try_classify_number(self, line: str, pos: int) -> Token | None:
        """Try to classify a numeric literal starting at pos.

        Integers are ``-?[0-9]+``. Floats are ``-?[0-9]*.[0-9]+``: the
        fractional digits are required, the integral ones are not. A sign
        directly followed by digits belongs to the literal, which makes
        ``-1`` a single INTEGER token.

        Integers go through Decimal, which has no digit limit, so any
        matched digit run converts.

        Args:
            line: Current line content
            pos: Index of the first character of the candidate

        Returns:
            Token if a literal starts at pos, None otherwise.
        """
        line_len = len(line)
        end = pos
        if end < line_len and line[end] == "-":
            end += 1

        digits_start = end
        while end < line_len and line[end] in DIGITS:
            end += 1

        # Fractional part needs at least one digit after the dot
        if end + 1 < line_len and line[end] == "." and line[end + 1] in DIGITS:
            end += 2
            while end < line_len and line[end] in DIGITS:
                end += 1
            text = line[pos:end]
            return self._make_token(TokenType.FLOAT, text, pos + 1, literal=float(text))

        if end == digits_start:
            return None

        text = line[pos:end]
        return self._make_token(TokenType.INTEGER, text, pos + 1, literal=int(Decimal(text)))

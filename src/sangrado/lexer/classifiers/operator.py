"""Operator and punctuation classifier mixin."""

from sangrado.lexer.charsets import (
    ONE_CHAR_OPERATORS,
    TWO_CHAR_OPERATOR_STARTS,
    TWO_CHAR_OPERATORS,
)
from sangrado.tokens import Token, TokenType


class OperatorClassifierMixin:
    """Mixin providing operator and punctuation classification."""

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

    def _try_classify_operator(self, line: str, pos: int) -> Token | None:
        """Try to classify an operator or punctuation mark at pos.

        Two-character comparisons win over their one-character prefixes.

        Returns:
            Token if an operator starts at pos, None otherwise.
        """
        char = line[pos]
        if char in TWO_CHAR_OPERATOR_STARTS:
            pair = line[pos : pos + 2]
            token_type = TWO_CHAR_OPERATORS.get(pair)
            if token_type is not None:
                return self._make_token(token_type, pair, pos + 1)

        token_type = ONE_CHAR_OPERATORS.get(char)
        if token_type is None:
            return None
        return self._make_token(token_type, char, pos + 1)

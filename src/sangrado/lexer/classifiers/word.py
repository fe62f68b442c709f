"""Keyword, boolean and identifier classifier mixin."""

from sangrado.lexer.charsets import (
    BOOLEANS,
    IDENTIFIER_CHARS,
    IDENTIFIER_START,
    KEYWORDS,
)
from sangrado.tokens import Token, TokenType


class WordClassifierMixin:
    """Mixin providing keyword, BOOLEAN and IDENTIFIER classification."""

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

    def _try_classify_word(self, line: str, pos: int) -> Token | None:
        """Try to classify an identifier-shaped word starting at pos.

        The whole word is consumed first, then looked up. ``iffy`` is an
        identifier; only an exact match of ``if`` is the keyword.

        Args:
            line: Current line content
            pos: Index of the first character of the candidate

        Returns:
            Token if a word starts at pos, None otherwise.
        """
        if line[pos] not in IDENTIFIER_START:
            return None

        end = pos + 1
        line_len = len(line)
        while end < line_len and line[end] in IDENTIFIER_CHARS:
            end += 1
        word = line[pos:end]

        keyword = KEYWORDS.get(word)
        if keyword is not None:
            return self._make_token(keyword, word, pos + 1)

        if word in BOOLEANS:
            return self._make_token(TokenType.BOOLEAN, word, pos + 1, literal=BOOLEANS[word])

        return self._make_token(TokenType.IDENTIFIER, word, pos + 1)

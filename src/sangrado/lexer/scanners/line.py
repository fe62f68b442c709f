"""Line content scanner mixin."""

from __future__ import annotations

from collections.abc import Iterator

from sangrado.errors import UnrecognizedTokenError
from sangrado.lexer.charsets import COMMENT_CHAR, WHITESPACE_CHARS
from sangrado.tokens import Token, TokenType


class LineScannerMixin:
    """Mixin providing content tokenization for one logical line.

    Runs after indentation has been resolved for the line:
    1. Skip whitespace, stop at a comment
    2. Ask each classifier in priority order for a token
    3. Advance past the lexeme (always makes progress)
    4. Emit NEWLINE at end of line

    """

    _lineno: int
    _source_file: str | None

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

    # Classifier methods (provided by classifier mixins)
    def _try_classify_word(self, line: str, pos: int) -> Token | None:
        raise NotImplementedError

    def _try_classify_number(self, line: str, pos: int) -> Token | None:
        raise NotImplementedError

    def _try_classify_operator(self, line: str, pos: int) -> Token | None:
        raise NotImplementedError

    def _scan_line_content(self, line: str, start: int) -> Iterator[Token]:
        """Tokenize a line from start to its end.

        Args:
            line: Line content without its line terminator
            start: Index where content begins (after indentation)

        Yields:
            Content tokens left to right, then NEWLINE.

        Raises:
            UnrecognizedTokenError: A character matches no lexeme.
        """
        pos = start
        line_len = len(line)
        while pos < line_len:
            char = line[pos]

            if char in WHITESPACE_CHARS:
                pos += 1
                continue

            if char == COMMENT_CHAR:
                break

            # Numbers before operators so "-1" beats "-"
            token = (
                self._try_classify_word(line, pos)
                or self._try_classify_number(line, pos)
                or self._try_classify_operator(line, pos)
            )
            if token is None:
                raise UnrecognizedTokenError(
                    char, self._lineno, pos + 1, source_file=self._source_file
                )

            yield token
            pos += len(token.value)

        yield self._make_token(TokenType.NEWLINE, "", line_len + 1)

"""Line-oriented lexer with explicit block structure.

Scans the source one physical line at a time. Each non-blank line goes
through two sequential steps over the same span: indentation resolution,
then content tokenization. There is no rewind.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from sangrado.config import LexConfig, get_lex_config
from sangrado.lexer.charsets import COMMENT_CHAR, WHITESPACE_CHARS
from sangrado.lexer.classifiers import (
    NumberClassifierMixin,
    OperatorClassifierMixin,
    WordClassifierMixin,
)
from sangrado.lexer.indent import IndentTracker
from sangrado.lexer.scanners import IndentScannerMixin, LineScannerMixin
from sangrado.tokens import Token, TokenType
from sangrado.utils.logger import get_logger

logger = get_logger(__name__)


class Lexer(
    # Classifiers (pure logic, no position mutation)
    WordClassifierMixin,
    NumberClassifierMixin,
    OperatorClassifierMixin,
    # Scanners (per-line phases)
    IndentScannerMixin,
    LineScannerMixin,
):
    """Indentation-aware lexer.

    For every physical line:
    1. Find the line window and drop a trailing carriage return
    2. Skip blank and comment-only lines entirely
    3. Resolve indentation (INDENT / DEDENT)
    4. Tokenize the content and emit NEWLINE

    At end of input every open block is closed with a DEDENT.

    Usage:
            >>> lexer = Lexer("if x:\\n  y = 1\\n")
            >>> [t.type.name for t in lexer.tokenize()]
            ['IF', 'IDENTIFIER', 'COLON', 'NEWLINE', 'INDENT', 'IDENTIFIER', 'ASSIGN', 'INTEGER', 'NEWLINE', 'DEDENT']

    Thread Safety:
        Lexer instances are single-use. Create one per source string.
        All state is instance-local; no shared mutable state.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source)
        "_pos",
        "_lineno",
        "_source_file",
        "_config",
        "_indents",  # Indentation stack owner, fresh per lexer
    )

    def __init__(
        self,
        source: str,
        source_file: str | None = None,
        config: LexConfig | None = None,
    ) -> None:
        """Initialize lexer with source text.

        Args:
            source: Program source text
            source_file: Optional source file path for error messages
            config: Lexer options; defaults to the active context config
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._lineno = 1
        self._source_file = source_file
        self._config = config if config is not None else get_lex_config()
        self._indents = IndentTracker(
            strict=self._config.strict_indentation, source_file=source_file
        )

    @property
    def config(self) -> LexConfig:
        return self._config

    def tokenize(self) -> Iterator[Token]:
        """Tokenize source into token stream.

        Yields:
            Token objects one at a time

        Raises:
            IndentError: A line dedents to an unknown width.
            UnrecognizedTokenError: A character matches no lexeme.
        """
        source_len = self._source_len
        while self._pos < source_len:
            line_end = self._find_line_end()
            line = self._source[self._pos : line_end]
            if line.endswith("\r"):
                line = line[:-1]
            yield from self._scan_logical_line(line)
            self._commit_to(line_end)

        yield from self._scan_closing_dedents()

        if self._config.emit_eof:
            yield self._make_token(TokenType.EOF, "", 1)

        logger.debug(
            "tokenized %d line(s) from %s", self._lineno - 1, self._source_file or "<string>"
        )

    def _scan_logical_line(self, line: str) -> Iterator[Token]:
        """Tokenize one physical line, or nothing if it is blank.

        Args:
            line: Line content without its terminator

        Yields:
            Structural tokens for the indentation, then content tokens.
        """
        content_start = self._calc_indent(line)
        if content_start == len(line) or line[content_start] == COMMENT_CHAR:
            return

        yield from self._scan_indent(line[:content_start])
        yield from self._scan_line_content(line, content_start)

    # =========================================================================
    # Window navigation helpers
    # =========================================================================

    def _find_line_end(self) -> int:
        """Find the end of the current line (position of \\n or EOF)."""
        idx = self._source.find("\n", self._pos)
        return idx if idx != -1 else self._source_len

    def _calc_indent(self, line: str) -> int:
        """Count leading whitespace characters.

        Spaces and tabs both count as one.

        Returns:
            Indentation width, which is also the index where content starts.
        """
        pos = 0
        line_len = len(line)
        while pos < line_len and line[pos] in WHITESPACE_CHARS:
            pos += 1
        return pos

    def _commit_to(self, line_end: int) -> None:
        """Move the cursor past line_end and its newline."""
        self._pos = line_end + 1
        self._lineno += 1

    # =========================================================================
    # Token construction
    # =========================================================================

    def _make_token(
        self,
        token_type: TokenType,
        value: str,
        col: int,
        *,
        literal: int | float | bool | None = None,
    ) -> Token:
        """Create a Token on the current line.

        Args:
            token_type: The token type.
            value: The lexeme text (empty for structural tokens).
            col: Column offset (1-indexed).
            literal: Parsed payload for literal tokens.

        Returns:
            Token with raw coordinates for lazy location creation.
        """
        return Token(
            type=token_type,
            value=value,
            _lineno=self._lineno,
            _col=col,
            literal=literal,
            _source_file=self._source_file,
        )

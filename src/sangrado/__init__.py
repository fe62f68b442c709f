"""
Sangrado — Indentation-aware tokenizer for a small Python-like language

Turns source text into a flat token stream in which block structure is
explicit: INDENT, DEDENT and NEWLINE tokens are synthesized from layout.
Zero runtime dependencies.

Quick Start:
    >>> from sangrado import tokenize
    >>> [t.type.name for t in tokenize("if x:\\n  y = 1\\n")]
    ['IF', 'IDENTIFIER', 'COLON', 'NEWLINE', 'INDENT', 'IDENTIFIER', 'ASSIGN', 'INTEGER', 'NEWLINE', 'DEDENT']

    >>> # Lazy form: stop pulling whenever you like
    >>> from sangrado import iter_tokens
    >>> next(iter_tokens("x = 1\\n"))
    Token(IDENTIFIER, 'x', 1:1)

Errors:
    Both lexical failures are fatal and carry the 1-based line number:
    IndentError for a dedent that matches no open level,
    UnrecognizedTokenError for a character outside the language.
"""

from collections.abc import Iterable, Iterator

from sangrado.config import (
    LexConfig,
    get_lex_config,
    lex_config_context,
    reset_lex_config,
    set_lex_config,
)
from sangrado.errors import (
    IndentError,
    LexError,
    MixedIndentError,
    SangradoError,
    UnrecognizedTokenError,
)
from sangrado.lexer import IndentTracker, Lexer
from sangrado.location import SourceLocation
from sangrado.renderers.protocol import TokenRenderer
from sangrado.renderers.text import TextRenderer
from sangrado.tokens import Token, TokenType

__version__ = "0.1.0"


def iter_tokens(
    source: str,
    *,
    source_file: str | None = None,
    config: LexConfig | None = None,
) -> Iterator[Token]:
    """Tokenize source lazily.

    Args:
        source: Program source text
        source_file: Optional source file path for error messages
        config: Lexer options (uses the active context config if None)

    Returns:
        Iterator over tokens in source order. Errors are raised from
        the iterator when the offending line is reached.
    """
    return Lexer(source, source_file=source_file, config=config).tokenize()


def tokenize(
    source: str,
    *,
    source_file: str | None = None,
    config: LexConfig | None = None,
) -> list[Token]:
    """Tokenize source into a list of tokens.

    Args:
        source: Program source text
        source_file: Optional source file path for error messages
        config: Lexer options (uses the active context config if None)

    Returns:
        All tokens, ending with the DEDENTs that close open blocks

    Raises:
        IndentError: A line dedents to a width that matches no open level.
        UnrecognizedTokenError: A character matches no lexeme.

    Example:
        >>> [t.type.name for t in tokenize("x = 1\\n")]
        ['IDENTIFIER', 'ASSIGN', 'INTEGER', 'NEWLINE']
    """
    return list(iter_tokens(source, source_file=source_file, config=config))


def render_tokens(tokens: Iterable[Token]) -> str:
    """Render tokens in the ``KIND<TAB>payload`` text format.

    Example:
        >>> render_tokens(tokenize("x = 1\\n"))
        'IDENTIFIER\\tx\\nASSIGN\\t=\\nINTEGER\\t1\\nNEWLINE\\n'
    """
    return TextRenderer().render(tokens)


__all__ = [  # noqa: RUF022 — grouped by category for maintainability
    "__version__",
    # Entry points
    "iter_tokens",
    "render_tokens",
    "tokenize",
    # Lexer
    "IndentTracker",
    "Lexer",
    "SourceLocation",
    "Token",
    "TokenType",
    # Config
    "LexConfig",
    "get_lex_config",
    "lex_config_context",
    "reset_lex_config",
    "set_lex_config",
    # Errors
    "IndentError",
    "LexError",
    "MixedIndentError",
    "SangradoError",
    "UnrecognizedTokenError",
    # Renderers
    "TextRenderer",
    "TokenRenderer",
]

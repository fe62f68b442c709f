"""Plain-text token dump, one token per line.

Structural tokens print their kind alone; every other token prints
``KIND<TAB>payload``.

Example:
    >>> from sangrado import tokenize, render_tokens
    >>> print(render_tokens(tokenize("ok = True\\n")), end="")
    IDENTIFIER	ok
    ASSIGN	=
    BOOLEAN	true
    NEWLINE
"""

from collections.abc import Iterable

from sangrado.tokens import STRUCTURAL_TYPES, Token, TokenType


class TextRenderer:
    """Render tokens in the tab-separated reference format."""

    __slots__ = ("_separator",)

    def __init__(self, separator: str = "\t") -> None:
        self._separator = separator

    def render(self, tokens: Iterable[Token]) -> str:
        """Render tokens, each line terminated by a newline."""
        return "".join(self.render_token(token) + "\n" for token in tokens)

    def render_token(self, token: Token) -> str:
        """Render a single token without a line terminator."""
        if token.type in STRUCTURAL_TYPES:
            return token.type.name
        return f"{token.type.name}{self._separator}{self._payload(token)}"

    def _payload(self, token: Token) -> str:
        match token.type:
            case TokenType.BOOLEAN:
                return "true" if token.literal else "false"
            case TokenType.INTEGER:
                return _canonical_integer(token.value)
            case TokenType.FLOAT:
                return str(token.literal)
            case _:
                return token.value


def _canonical_integer(lexeme: str) -> str:
    """Decimal form of an integer lexeme, as str(int(lexeme)) would print it.

    Works on the text, so literals past the int/str digit limit render too.
    """
    digits = lexeme.lstrip("-").lstrip("0")
    if not digits:
        return "0"
    return f"-{digits}" if lexeme.startswith("-") else digits

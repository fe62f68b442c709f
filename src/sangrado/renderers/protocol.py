"""TokenRenderer protocol: stable interface for token renderers.

Any renderer that implements ``render(tokens) -> str`` conforms to this
protocol. The built-in ``TextRenderer`` is the reference implementation.

Example:
    from sangrado.renderers.protocol import TokenRenderer

    def dump(renderer: TokenRenderer, tokens: list[Token]) -> str:
        return renderer.render(tokens)

"""

from collections.abc import Iterable
from typing import Protocol

from sangrado.tokens import Token


class TokenRenderer(Protocol):
    """Protocol for token renderers."""

    def render(self, tokens: Iterable[Token]) -> str:
        """Render a token sequence to a string.

        Args:
            tokens: Tokens in stream order.

        Returns:
            Rendered string output.

        """
        ...

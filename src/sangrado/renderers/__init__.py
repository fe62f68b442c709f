"""Sangrado renderers.

Renderers turn a token stream into text for inspection. They only consume
tokens; nothing here feeds back into scanning.

Available Renderers:
- TextRenderer: ``KIND<TAB>payload`` per line

"""

from sangrado.renderers.protocol import TokenRenderer
from sangrado.renderers.text import TextRenderer

__all__ = ["TextRenderer", "TokenRenderer"]

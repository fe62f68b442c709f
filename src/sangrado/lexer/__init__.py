"""Indentation-aware lexer for Sangrado.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, IndentTracker
├── core.py              # Lexer class (mixin composition + line driver)
├── charsets.py          # Keyword, operator and character tables
├── indent.py            # IndentTracker (indentation stack)
├── classifiers/         # Lexeme classification mixins
│   ├── word.py          # Keywords, booleans, identifiers
│   ├── number.py        # Integers and floats
│   └── operator.py      # Operators and punctuation
└── scanners/            # Per-line phases
    ├── indent.py        # INDENT / DEDENT emission
    └── line.py          # Content tokens and NEWLINE

Usage:
    >>> from sangrado.lexer import Lexer
    >>> for token in Lexer("x = 1\\n").tokenize():
    ...     print(token)
Token(IDENTIFIER, 'x', 1:1)
Token(ASSIGN, '=', 1:3)
Token(INTEGER, '1', 1:5)
Token(NEWLINE, 1:6)

"""

from sangrado.lexer.core import Lexer
from sangrado.lexer.indent import IndentTracker

__all__ = ["IndentTracker", "Lexer"]

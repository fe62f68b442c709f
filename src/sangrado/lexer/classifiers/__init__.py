"""Lexeme classifiers for the Sangrado lexer.

Each classifier is a mixin that recognizes one family of lexemes at a
given position of the current line. Classifiers are pure: they build a
token or return None and never move the cursor.
"""

from sangrado.lexer.classifiers.number import NumberClassifierMixin
from sangrado.lexer.classifiers.operator import OperatorClassifierMixin
from sangrado.lexer.classifiers.word import WordClassifierMixin

__all__ = [
    "NumberClassifierMixin",
    "OperatorClassifierMixin",
    "WordClassifierMixin",
]

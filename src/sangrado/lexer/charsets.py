"""Character sets and lookup tables for O(1) classification.

All sets are frozensets and all tables are module-level constants:
- O(1) membership testing
- Immutability (thread-safe)
- No per-call allocation

Usage:
    from sangrado.lexer.charsets import KEYWORDS

    token_type = KEYWORDS.get(word)
"""

from types import MappingProxyType

from sangrado.tokens import TokenType

# Indentation and in-line whitespace; tabs and spaces count the same
WHITESPACE_CHARS: frozenset[str] = frozenset(" \t")

DIGITS: frozenset[str] = frozenset("0123456789")

ASCII_LETTERS: frozenset[str] = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
)

IDENTIFIER_START: frozenset[str] = ASCII_LETTERS | {"_"}
IDENTIFIER_CHARS: frozenset[str] = IDENTIFIER_START | DIGITS

COMMENT_CHAR = "#"

# Reserved words; matched only when the whole identifier-shaped word equals one
KEYWORDS = MappingProxyType(
    {
        "and": TokenType.AND,
        "break": TokenType.BREAK,
        "def": TokenType.DEF,
        "elif": TokenType.ELIF,
        "else": TokenType.ELSE,
        "for": TokenType.FOR,
        "if": TokenType.IF,
        "not": TokenType.NOT,
        "or": TokenType.OR,
        "return": TokenType.RETURN,
        "while": TokenType.WHILE,
    }
)

BOOLEANS = MappingProxyType({"True": True, "False": False})

# Checked before ONE_CHAR_OPERATORS so "==" never lexes as two "="
TWO_CHAR_OPERATORS = MappingProxyType(
    {
        "==": TokenType.EQ,
        "!=": TokenType.NEQ,
        ">=": TokenType.GTE,
        "<=": TokenType.LTE,
    }
)

ONE_CHAR_OPERATORS = MappingProxyType(
    {
        "=": TokenType.ASSIGN,
        ">": TokenType.GT,
        "<": TokenType.LT,
        "+": TokenType.PLUS,
        "-": TokenType.MINUS,
        "*": TokenType.TIMES,
        "/": TokenType.DIVIDEDBY,
        "(": TokenType.LPAREN,
        ")": TokenType.RPAREN,
        ",": TokenType.COMMA,
        ":": TokenType.COLON,
    }
)

TWO_CHAR_OPERATOR_STARTS: frozenset[str] = frozenset(op[0] for op in TWO_CHAR_OPERATORS)

"""Error-path and malformed input tests.

Both lexical errors are fatal; these tests cover their construction,
formatting and the hierarchy callers catch.
"""

import pytest

from sangrado import tokenize
from sangrado.errors import (
    IndentError,
    LexError,
    MixedIndentError,
    SangradoError,
    UnrecognizedTokenError,
)

# =========================================================================
# LexError construction and formatting
# =========================================================================


class TestLexErrorFormatting:
    """Verify LexError produces well-formatted messages."""

    def test_message_only(self) -> None:
        err = LexError("unexpected input")
        assert str(err) == "unexpected input"
        assert err.lineno is None
        assert err.col_offset is None

    def test_with_line_number(self) -> None:
        err = LexError("bad input", lineno=42)
        assert str(err) == "42 bad input"

    def test_with_line_and_column(self) -> None:
        err = LexError("bad input", lineno=10, col_offset=5)
        assert "10:5" in str(err)

    def test_with_source_file(self) -> None:
        err = LexError("bad input", lineno=3, col_offset=1, source_file="main.sg")
        assert str(err).startswith("main.sg:3:1 ")


class TestHierarchy:
    def test_all_are_sangrado_errors(self) -> None:
        for cls in (LexError, IndentError, MixedIndentError, UnrecognizedTokenError):
            assert issubclass(cls, SangradoError)

    def test_mixed_is_indent_error(self) -> None:
        assert issubclass(MixedIndentError, IndentError)

    def test_does_not_shadow_builtin(self) -> None:
        assert not issubclass(IndentError, IndentationError)


# =========================================================================
# Errors raised by tokenize()
# =========================================================================


class TestIndentErrorFromLexer:
    def test_carries_position_and_levels(self) -> None:
        with pytest.raises(IndentError) as exc_info:
            tokenize("if a:\n    b\n   c\n", source_file="prog.sg")
        err = exc_info.value
        assert err.lineno == 3
        assert err.width == 3
        assert err.levels == (0, 4)
        assert err.source_file == "prog.sg"
        assert str(err).startswith("prog.sg:3 ")
        assert "width 3" in str(err)

    def test_caught_as_lex_error(self) -> None:
        with pytest.raises(LexError):
            tokenize("a\n  b\n c\n")


class TestUnrecognizedTokenFromLexer:
    def test_carries_char_and_position(self) -> None:
        with pytest.raises(UnrecognizedTokenError) as exc_info:
            tokenize("x = 1\ny = x ^ 2\n")
        err = exc_info.value
        assert err.char == "^"
        assert err.lineno == 2
        assert err.col_offset == 7
        assert "'^'" in str(err)

    def test_error_on_indented_line(self) -> None:
        with pytest.raises(UnrecognizedTokenError) as exc_info:
            tokenize("if a:\n  ?\n")
        assert exc_info.value.col_offset == 3

    def test_stray_carriage_return(self) -> None:
        """Only a carriage return right before a newline is a terminator."""
        with pytest.raises(UnrecognizedTokenError) as exc_info:
            tokenize("a\rb\n")
        assert exc_info.value.char == "\r"

    def test_string_literals_unsupported(self) -> None:
        with pytest.raises(UnrecognizedTokenError):
            tokenize('s = "hi"\n')

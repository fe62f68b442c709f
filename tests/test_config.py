"""Tests for ContextVar-based lexer configuration.

Validates defaults, context manager behavior, thread isolation, and that
the lexer honors the active config.
"""

from threading import Thread

import pytest

from sangrado import (
    LexConfig,
    Lexer,
    MixedIndentError,
    TokenType,
    get_lex_config,
    lex_config_context,
    reset_lex_config,
    set_lex_config,
    tokenize,
)


class TestLexConfigDataclass:
    """Test LexConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = LexConfig()
        assert config.strict_indentation is False
        assert config.emit_eof is False

    def test_immutability(self) -> None:
        config = LexConfig()
        with pytest.raises(AttributeError):
            config.emit_eof = True  # type: ignore[misc]

    def test_from_dict(self) -> None:
        config = LexConfig.from_dict({"strict_indentation": True, "unknown_key": 42})
        assert config.strict_indentation is True
        assert config.emit_eof is False

    def test_from_dict_empty(self) -> None:
        assert LexConfig.from_dict({}) == LexConfig()


class TestConfigAccessors:
    """Test get/set/reset functions."""

    def teardown_method(self) -> None:
        reset_lex_config()

    def test_default_config(self) -> None:
        assert get_lex_config() == LexConfig()

    def test_set_and_get(self) -> None:
        set_lex_config(LexConfig(emit_eof=True))
        assert get_lex_config().emit_eof is True

    def test_reset_restores_default(self) -> None:
        set_lex_config(LexConfig(emit_eof=True))
        reset_lex_config()
        assert get_lex_config().emit_eof is False


class TestLexConfigContext:
    """Test lex_config_context context manager."""

    def test_context_sets_config(self) -> None:
        with lex_config_context(LexConfig(emit_eof=True)):
            assert get_lex_config().emit_eof is True
        assert get_lex_config().emit_eof is False

    def test_context_restores_on_exception(self) -> None:
        with pytest.raises(ValueError, match="test"):
            with lex_config_context(LexConfig(emit_eof=True)):
                raise ValueError("test")
        assert get_lex_config().emit_eof is False

    def test_lexer_reads_context(self) -> None:
        with lex_config_context(LexConfig(emit_eof=True)):
            tokens = tokenize("x\n")
        assert tokens[-1].type == TokenType.EOF

    def test_explicit_config_overrides_context(self) -> None:
        with lex_config_context(LexConfig(emit_eof=True)):
            tokens = tokenize("x\n", config=LexConfig())
        assert tokens[-1].type == TokenType.NEWLINE

    def test_config_captured_at_construction(self) -> None:
        with lex_config_context(LexConfig(emit_eof=True)):
            lexer = Lexer("x\n")
        assert list(lexer.tokenize())[-1].type == TokenType.EOF


class TestStrictIndentation:
    """strict_indentation end to end."""

    def test_off_by_default(self) -> None:
        tokens = tokenize("if a:\n\tb\n c\n")
        assert sum(1 for t in tokens if t.type == TokenType.INDENT) == 1

    def test_rejects_swapped_whitespace(self) -> None:
        config = LexConfig(strict_indentation=True)
        with pytest.raises(MixedIndentError) as exc_info:
            tokenize("if a:\n\tb\n c\n", config=config)
        assert exc_info.value.lineno == 3

    def test_accepts_consistent_tabs(self) -> None:
        config = LexConfig(strict_indentation=True)
        tokens = tokenize("if a:\n\tif b:\n\t\tc\n\td\ne\n", config=config)
        assert sum(1 for t in tokens if t.type == TokenType.DEDENT) == 2


class TestThreadIsolation:
    """Test thread-local configuration isolation."""

    def test_thread_isolation(self) -> None:
        results: dict[int, TokenType] = {}

        def worker(thread_id: int, config: LexConfig) -> None:
            set_lex_config(config)
            results[thread_id] = tokenize("x\n")[-1].type

        configs = [LexConfig(emit_eof=True), LexConfig(), LexConfig(emit_eof=True), LexConfig()]
        threads = [Thread(target=worker, args=(i, c)) for i, c in enumerate(configs)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert results == {
            0: TokenType.EOF,
            1: TokenType.NEWLINE,
            2: TokenType.EOF,
            3: TokenType.NEWLINE,
        }

"""Tests for namespaced logging."""

import logging

from sangrado import tokenize
from sangrado.utils.logger import get_logger


class TestGetLogger:
    def test_prefixes_name(self) -> None:
        assert get_logger("mymodule").name == "sangrado.mymodule"

    def test_keeps_existing_prefix(self) -> None:
        assert get_logger("sangrado.lexer.core").name == "sangrado.lexer.core"
        assert get_logger("sangrado").name == "sangrado"


class TestLexerLogging:
    def test_structural_transitions_logged_at_debug(self, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="sangrado"):
            tokenize("if a:\n  b\nc\n")
        messages = [r.getMessage() for r in caplog.records]
        assert any("indent to width 2" in m for m in messages)
        assert any("dedent 1 level(s) to width 0" in m for m in messages)

    def test_silent_above_debug(self, caplog) -> None:
        with caplog.at_level(logging.INFO, logger="sangrado"):
            tokenize("if a:\n  b\n")
        assert caplog.records == []

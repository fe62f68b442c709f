"""Scanners for the Sangrado lexer.

Each scanner is a mixin that drives one phase of a logical line:
indentation first, then content.
"""

from __future__ import annotations

from sangrado.lexer.scanners.indent import IndentScannerMixin
from sangrado.lexer.scanners.line import LineScannerMixin

__all__ = [
    "IndentScannerMixin",
    "LineScannerMixin",
]

"""Reader strategies for the Simian lexer.

Each scanner is a mixin that provides one or more readers. A reader
consumes a maximal lexeme starting at the current character and returns
one Token.
"""

from __future__ import annotations

from simian.lexer.scanners.operator import OperatorScannerMixin
from simian.lexer.scanners.single import SingleScannerMixin
from simian.lexer.scanners.word import WordScannerMixin

__all__ = [
    "OperatorScannerMixin",
    "SingleScannerMixin",
    "WordScannerMixin",
]

"""
ScanLang - Longest-Match Lexical Scanner
========================================

This package converts source text of a small block-structured language
into classified tokens.

Main Components
---------------
- **scanner**: the Scanner state machine (next_token, tokenize,
  stats_snapshot)
- **patterns**: the priority-ordered pattern table
- **tokens**: TokenKind and the immutable Token record
- **symbols**: the SymbolTable fed with identifier occurrences
- **driver**: whole-file scans collecting tokens, statistics and
  diagnostics
- **cli**: the scanlang command-line tool

Quick Start
-----------
    >>> from scanlang import Scanner, SymbolTable
    >>> table = SymbolTable()
    >>> scanner = Scanner('output "Hi";', symbol_table=table)
    >>> scanner.next_token()
    Token(KEYWORD, 'output', 1:1)

Or use the command-line tool:
    $ scanlang program.sl
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from scanlang.config import ScanConfig
from scanlang.driver import ScanResult, scan_file, scan_source
from scanlang.errors import (
    DiagnosticCollector,
    ScanFailedError,
    ScanLangError,
    ScannerError,
    SourceLocation,
    SourceReadError,
    UnmatchedCharacterError,
)
from scanlang.patterns import PATTERN_TABLE, PatternEntry, build_pattern_table
from scanlang.scanner import Scanner, ScanPosition
from scanlang.stats import ScanStatistics
from scanlang.symbols import SymbolEntry, SymbolTable
from scanlang.tokens import Token, TokenKind

__all__ = [
    "__version__",
    # Scanning
    "Scanner",
    "ScanPosition",
    "Token",
    "TokenKind",
    "PatternEntry",
    "PATTERN_TABLE",
    "build_pattern_table",
    "ScanStatistics",
    # Symbols
    "SymbolTable",
    "SymbolEntry",
    # Driver
    "ScanConfig",
    "ScanResult",
    "scan_source",
    "scan_file",
    # Errors
    "ScanLangError",
    "ScannerError",
    "UnmatchedCharacterError",
    "ScanFailedError",
    "SourceReadError",
    "SourceLocation",
    "DiagnosticCollector",
]

"""
Scan Driver
===========

Runs a complete scan of a source buffer or file and gathers everything a
caller needs afterwards: the tokens, the final statistics, the symbol
table and the unmatched-character diagnostics.

    >>> from scanlang.driver import scan_source
    >>> result = scan_source("loop { Count++; }")
    >>> [t.lexeme for t in result.tokens]
    ['loop', '{', 'Count', '++', ';', '}']
    >>> result.statistics.total_tokens
    6
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
import logging

from scanlang.config import ScanConfig
from scanlang.errors import (
    DiagnosticCollector,
    ScanFailedError,
    SourceReadError,
    UnmatchedCharacterError,
)
from scanlang.scanner import Scanner, log_unmatched_character
from scanlang.stats import ScanStatistics
from scanlang.symbols import SymbolTable
from scanlang.tokens import Token, TokenKind

logger = logging.getLogger(__name__)


@dataclass
class ScanResult:
    """
    Result of scanning one source.

    Attributes:
        filename: Source name used in diagnostics
        tokens: Every token returned, UNKNOWN included, END_OF_INPUT excluded
        statistics: Final statistics snapshot
        symbols: Identifier occurrences collected during the scan
        diagnostics: Unmatched-character diagnostics
    """
    filename: str
    tokens: list[Token] = field(default_factory=list)
    statistics: ScanStatistics = field(default_factory=ScanStatistics)
    symbols: SymbolTable = field(default_factory=SymbolTable)
    diagnostics: DiagnosticCollector = field(default_factory=DiagnosticCollector)

    @property
    def unknown_tokens(self) -> list[Token]:
        return [t for t in self.tokens if t.kind is TokenKind.UNKNOWN]

    def visible_tokens(self, show_unknown: bool = False) -> list[Token]:
        """Tokens to print; UNKNOWN tokens are hidden unless requested."""
        if show_unknown:
            return list(self.tokens)
        return [t for t in self.tokens if t.kind is not TokenKind.UNKNOWN]


def scan_source(
    source: str,
    filename: str = "<input>",
    config: Optional[ScanConfig] = None,
) -> ScanResult:
    """
    Scan source text to END_OF_INPUT.

    Each unmatched character is both logged and collected.

    Args:
        source: Complete decoded source text
        filename: Source name for diagnostics
        config: Driver configuration (uses defaults if None)

    Returns:
        ScanResult for the whole source

    Raises:
        ScanFailedError: In strict mode, if any character was unmatched
    """
    config = config or ScanConfig()
    result = ScanResult(
        filename=filename,
        diagnostics=DiagnosticCollector(max_errors=config.max_diagnostics),
    )

    def report(diagnostic: UnmatchedCharacterError) -> None:
        log_unmatched_character(diagnostic)
        result.diagnostics.add(diagnostic)

    scanner = Scanner(
        source,
        filename,
        symbol_table=result.symbols,
        diagnostic_sink=report,
    )

    for token in scanner.tokenize():
        if not token.is_eof():
            result.tokens.append(token)

    result.statistics = scanner.stats_snapshot()

    if config.strict and result.diagnostics.has_errors():
        raise ScanFailedError(result.diagnostics.report())

    return result


def read_source(path: Path, encoding: str = "utf-8") -> str:
    """
    Load a complete source file.

    Raises:
        FileNotFoundError: If the file does not exist
        PermissionError: If the file cannot be opened
        SourceReadError: If the file cannot be read or decoded
    """
    try:
        return path.read_text(encoding=encoding)
    except (FileNotFoundError, PermissionError):
        raise
    except UnicodeDecodeError as e:
        raise SourceReadError(str(path), f"not valid {encoding} text ({e.reason})") from e
    except LookupError as e:
        raise SourceReadError(str(path), f"unknown encoding '{encoding}'") from e
    except OSError as e:
        raise SourceReadError(str(path), e.strerror or str(e)) from e


def scan_file(path: Path, config: Optional[ScanConfig] = None) -> ScanResult:
    """Read path with the configured encoding and scan it."""
    config = config or ScanConfig()
    logger.debug(f"Scanning file {path}")
    source = read_source(path, config.encoding)
    return scan_source(source, str(path), config)

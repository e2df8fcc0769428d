"""
Scanner
=======

Longest-match lexical scanner over an in-memory source buffer.

Each call to next_token() tries every entry of the pattern table at the
current offset and keeps the longest match, breaking ties by table order.
Whitespace and comments are consumed in a loop without producing a token.
A character no pattern accepts becomes an UNKNOWN token, is reported to
the diagnostic sink, and scanning continues one character later.

Example Usage
-------------
>>> from scanlang.scanner import Scanner
>>> scanner = Scanner("declare Total = 1.25;")
>>> for token in scanner.tokenize():
...     print(token)
Token(KEYWORD, 'declare', 1:1)
Token(IDENTIFIER, 'Total ', 1:9)
Token(OPERATOR, '=', 1:15)
Token(FLOAT_LITERAL, '1.25', 1:17)
Token(PUNCTUATOR, ';', 1:21)
Token(END_OF_INPUT, 1:22)

Note the trailing space in 'Total ': spaces are identifier characters.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Iterator, Optional
import logging

from scanlang.errors import SourceLocation, UnmatchedCharacterError
from scanlang.patterns import PATTERN_TABLE, PatternEntry, longest_match
from scanlang.stats import ScanStatistics
from scanlang.symbols import SymbolSink
from scanlang.tokens import Token, TokenKind

logger = logging.getLogger(__name__)

DiagnosticSink = Callable[[UnmatchedCharacterError], None]


def log_unmatched_character(diagnostic: UnmatchedCharacterError) -> None:
    """Default diagnostic sink: report the character through logging."""
    logger.warning(
        f"Unrecognized character at line {diagnostic.line}, "
        f"column {diagnostic.column}: {diagnostic.char!r}"
    )


@dataclass(frozen=True)
class ScanPosition:
    """
    Cursor into the source buffer.

    Attributes:
        offset: Character index into the source (0-indexed)
        line: Line number (1-indexed)
        column: Column number (1-indexed, reset after each newline)
    """
    offset: int
    line: int
    column: int


class Scanner:
    """
    Tokenizes source text using the ordered pattern table.

    A scanner is created once per source buffer and consumed by calling
    next_token() until it returns END_OF_INPUT. Further calls keep
    returning END_OF_INPUT at the final position.

    Usage:
        table = SymbolTable()
        scanner = Scanner(source, "demo.sl", symbol_table=table)
        while not (token := scanner.next_token()).is_eof():
            ...
        print(scanner.stats_snapshot().format_report())

    Attributes:
        source: The text being scanned
        filename: Name used in diagnostics
    """

    def __init__(
        self,
        source: str,
        filename: str = "<input>",
        symbol_table: Optional[SymbolSink] = None,
        diagnostic_sink: Optional[DiagnosticSink] = None,
        patterns: tuple[PatternEntry, ...] = PATTERN_TABLE,
    ):
        """
        Initialize the scanner.

        Args:
            source: Complete decoded source text
            filename: Name of the source (for diagnostics)
            symbol_table: Receives every IDENTIFIER occurrence (optional)
            diagnostic_sink: Receives one UnmatchedCharacterError per
                UNKNOWN character (defaults to a logging warning)
            patterns: Priority-ordered pattern table
        """
        self.source = source
        self.filename = filename
        self._patterns = tuple(patterns)
        self._symbol_table = symbol_table
        self._diagnostic_sink = diagnostic_sink or log_unmatched_character

        # Position state
        self._pos = 0
        self._line = 1
        self._column = 1

        # Statistics state
        self._total_tokens = 0
        self._comments_removed = 0
        self._counts: dict[TokenKind, int] = {}
        self._lines_processed = source.count("\n") + 1

        logger.debug(
            f"Scanner created for {filename}: {len(source)} characters, "
            f"{self._lines_processed} lines, {len(self._patterns)} patterns"
        )

    # =========================================================================
    # Public Interface
    # =========================================================================

    @property
    def position(self) -> ScanPosition:
        """Current offset, line and column; the start of the next token."""
        return ScanPosition(self._pos, self._line, self._column)

    def next_token(self) -> Token:
        """
        Return the next significant token.

        Whitespace and comments are skipped in a loop. At the end of the
        source an END_OF_INPUT token is returned on every call.
        """
        while not self._at_end():
            match = longest_match(self._patterns, self.source, self._pos)

            if match is None:
                return self._unmatched_character()

            entry, lexeme = match

            if entry.kind is TokenKind.WHITESPACE:
                self._advance(lexeme)
                continue

            if entry.kind is TokenKind.COMMENT:
                self._comments_removed += 1
                self._advance(lexeme)
                continue

            return self._emit(entry.kind, lexeme)

        return Token(TokenKind.END_OF_INPUT, None, self._line, self._column)

    def tokenize(self) -> Iterator[Token]:
        """
        Generate tokens up to and including END_OF_INPUT.

        UNKNOWN tokens are included; callers filter them if they wish.
        """
        while True:
            token = self.next_token()
            yield token
            if token.is_eof():
                logger.debug(
                    f"Scan of {self.filename} complete: {self._total_tokens} tokens, "
                    f"{self._comments_removed} comments removed"
                )
                return

    def stats_snapshot(self) -> ScanStatistics:
        """Return the statistics as of the most recent next_token() call."""
        return ScanStatistics(
            total_tokens=self._total_tokens,
            comments_removed=self._comments_removed,
            lines_processed=self._lines_processed,
            counts_by_kind=MappingProxyType(dict(self._counts)),
        )

    def get_line_text(self) -> str:
        """Return the text of the line containing the current offset."""
        line_start = self.source.rfind("\n", 0, self._pos) + 1
        line_end = self.source.find("\n", line_start)
        if line_end == -1:
            line_end = len(self.source)
        return self.source[line_start:line_end].rstrip("\r")

    # =========================================================================
    # Token Construction
    # =========================================================================

    def _emit(self, kind: TokenKind, lexeme: str) -> Token:
        """Build a token at the start position, then consume its lexeme."""
        token = Token(kind, lexeme, self._line, self._column)

        if kind is TokenKind.IDENTIFIER and self._symbol_table is not None:
            self._symbol_table.record_identifier(lexeme, self._line)

        self._advance(lexeme)

        self._total_tokens += 1
        self._counts[kind] = self._counts.get(kind, 0) + 1
        return token

    def _unmatched_character(self) -> Token:
        """Classify one character as UNKNOWN and report it."""
        char = self.source[self._pos]
        token = Token(TokenKind.UNKNOWN, char, self._line, self._column)

        self._diagnostic_sink(
            UnmatchedCharacterError(
                char,
                SourceLocation(self.filename, self._line, self._column),
                source_line=self.get_line_text(),
            )
        )

        self._advance(char)
        return token

    # =========================================================================
    # Position Tracking
    # =========================================================================

    def _at_end(self) -> bool:
        return self._pos >= len(self.source)

    def _advance(self, text: str) -> None:
        """Move past text, updating line and column character by character."""
        for char in text:
            if char == "\n":
                self._line += 1
                self._column = 1
            else:
                self._column += 1
        self._pos += len(text)

"""
ScanLang Error Hierarchy
========================

This module defines the exception hierarchy for the scanlang package.
All exceptions inherit from ScanLangError, allowing callers to catch
every package error with a single except clause if desired.

Exception Hierarchy
-------------------
ScanLangError (base)
├── ScannerError - formatted error with source location
│   ├── UnmatchedCharacterError - no pattern matches at a position
│   └── ScanFailedError - aggregate report of unmatched characters
└── SourceReadError - source file cannot be read or decoded

Recovery Policy
---------------
The scanner itself never raises. An unrecognized character becomes an
UNKNOWN token and an UnmatchedCharacterError is handed to the diagnostic
sink as a value. Only the driver decides whether those diagnostics are
fatal (strict mode).

Error messages follow this format:
    filename:line:column: error: description
        source_line_text
        ^ (pointer to error location)
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class ScanLangError(Exception):
    """
    Base exception for all scanlang errors.

        try:
            result = scan_file(Path("program.sl"))
        except ScanLangError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source code for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Scanner Errors
# =============================================================================

class ScannerError(ScanLangError):
    """
    Base exception for errors tied to a position in scanned source.

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The actual source text at the error location (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example output:
            demo.sl:3:9: error: unrecognized character '@' (0x40)
                Total @ 5
                      ^
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class UnmatchedCharacterError(ScannerError):
    """
    No lexical pattern matches at the current position.

    This is the only condition the scanner recognizes. It is reported
    as a value to the diagnostic sink; the character itself is returned
    to the caller as an UNKNOWN token and scanning continues.
    """

    def __init__(
        self,
        char: str,
        location: SourceLocation,
        source_line: Optional[str] = None,
    ):
        self.char = char
        super().__init__(
            f"unrecognized character {char!r} (0x{ord(char):02X})",
            location=location,
            source_line=source_line,
        )

    @property
    def line(self) -> int:
        return self.location.line

    @property
    def column(self) -> int:
        return self.location.column


class ScanFailedError(ScannerError):
    """
    Aggregate scan failure containing multiple diagnostics.

    The message is already a formatted report from DiagnosticCollector
    and is passed through without another prefix.
    """

    def _format_message(self) -> str:
        """Return message as-is - it's already a formatted aggregate report."""
        return self.message


# =============================================================================
# Source Provider Errors
# =============================================================================

class SourceReadError(ScanLangError):
    """
    Source file could not be read or decoded.

    Attributes:
        path: The file that failed to load
        reason: Description of the underlying failure
    """

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"cannot read '{path}': {reason}")


# =============================================================================
# Diagnostic Collection
# =============================================================================

class DiagnosticCollector:
    """
    Collects unmatched-character diagnostics for batch reporting.

    Instances are callable, so a collector can be passed directly as the
    scanner's diagnostic sink:

        collector = DiagnosticCollector(max_errors=100)
        scanner = Scanner(source, diagnostic_sink=collector)
        ...
        if collector.has_errors():
            print(collector.report())

    Past max_errors, further diagnostics are counted but not stored, so a
    binary or mis-encoded file cannot flood the report. The sink never
    raises back into the scanner.
    """

    def __init__(self, max_errors: Optional[int] = None):
        """
        Initialize the collector.

        Args:
            max_errors: Maximum diagnostics to keep (None for unlimited)
        """
        self.errors: list[UnmatchedCharacterError] = []
        self.max_errors = max_errors
        self.suppressed = 0

    def __call__(self, diagnostic: UnmatchedCharacterError) -> None:
        self.add(diagnostic)

    def add(self, diagnostic: UnmatchedCharacterError) -> None:
        """Add a diagnostic to the collection."""
        if self.max_errors is not None and len(self.errors) >= self.max_errors:
            self.suppressed += 1
            return
        self.errors.append(diagnostic)

    def has_errors(self) -> bool:
        """Return True if any diagnostics have been collected."""
        return len(self.errors) > 0

    def error_count(self) -> int:
        """Return the number of diagnostics seen, including suppressed ones."""
        return len(self.errors) + self.suppressed

    def report(self) -> str:
        """
        Format all diagnostics for display.

        Returns:
            Formatted string with every stored diagnostic and a summary line
        """
        lines = []

        for error in self.errors:
            lines.append(str(error))
            lines.append("")

        if self.suppressed:
            lines.append(f"({self.suppressed} more not shown)")

        total = self.error_count()
        error_word = "error" if total == 1 else "errors"
        lines.append(f"{total} {error_word}")

        return "\n".join(lines)

    def clear(self) -> None:
        """Clear all collected diagnostics."""
        self.errors.clear()
        self.suppressed = 0

"""
Symbol Table
============

Records identifier occurrences reported by the scanner.

The scanner calls record_identifier() once for every IDENTIFIER token it
emits, in source order, and does no deduplication of its own. The table
keeps one entry per distinct name, in first-seen order, together with
every line the name appeared on.

Any object with a compatible record_identifier() method can stand in as
the scanner's sink (see SymbolSink).
"""

from dataclasses import dataclass, field
from typing import Iterator, Optional, Protocol


class SymbolSink(Protocol):
    """Write-only collaborator receiving identifier occurrences."""

    def record_identifier(self, lexeme: str, line: int) -> None:
        ...


@dataclass
class SymbolEntry:
    """
    Symbol table entry.

    Attributes:
        name: Identifier lexeme exactly as scanned
        first_line: Line of the first occurrence
        lines: Line of every occurrence, in scan order
    """
    name: str
    first_line: int
    lines: list[int] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.lines)


class SymbolTable:
    """
    Identifier table fed by the scanner.

    Usage:
        table = SymbolTable()
        scanner = Scanner(source, symbol_table=table)
        ...
        print(table.format_table())
    """

    def __init__(self) -> None:
        self._symbols: dict[str, SymbolEntry] = {}

    def record_identifier(self, lexeme: str, line: int) -> None:
        """Record one occurrence of an identifier."""
        entry = self._symbols.get(lexeme)
        if entry is None:
            entry = SymbolEntry(name=lexeme, first_line=line)
            self._symbols[lexeme] = entry
        entry.lines.append(line)

    def lookup(self, name: str) -> Optional[SymbolEntry]:
        """Return the entry for name, or None if it never occurred."""
        return self._symbols.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._symbols

    def __len__(self) -> int:
        return len(self._symbols)

    def __iter__(self) -> Iterator[SymbolEntry]:
        return iter(self._symbols.values())

    def occurrence_count(self) -> int:
        """Total number of occurrences across all names."""
        return sum(entry.count for entry in self._symbols.values())

    def format_table(self) -> str:
        """
        Format the table for display.

        Identifiers may contain spaces, so names are shown quoted:

            Symbol Table:
            Name                             First  Count  Lines
            'Total'                          1      2      1, 3
        """
        lines = ["Symbol Table:"]
        if not self._symbols:
            lines.append("  (empty)")
            return "\n".join(lines)

        lines.append(f"{'Name':<34} {'First':<6} {'Count':<6} Lines")
        for entry in self._symbols.values():
            occurrences = ", ".join(str(n) for n in entry.lines)
            lines.append(
                f"{entry.name!r:<34} {entry.first_line:<6} {entry.count:<6} {occurrences}"
            )
        return "\n".join(lines)

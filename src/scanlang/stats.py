"""
Scan Statistics
===============

Read-only snapshot of the scanner's counters.

Counters are observational: the scanner updates them after classifying a
token or skipping a comment, and never consults them while scanning.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from scanlang.tokens import TokenKind


@dataclass(frozen=True)
class ScanStatistics:
    """
    Statistics as of the most recent next_token() call.

    Attributes:
        total_tokens: Tokens emitted, excluding UNKNOWN and END_OF_INPUT
        comments_removed: Comments skipped
        lines_processed: Lines in the source buffer
        counts_by_kind: Emitted tokens per kind (kinds never seen are absent)
    """
    total_tokens: int = 0
    comments_removed: int = 0
    lines_processed: int = 0
    counts_by_kind: Mapping[TokenKind, int] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def count(self, kind: TokenKind) -> int:
        """Return the emitted count for kind (0 if never seen)."""
        return self.counts_by_kind.get(kind, 0)

    def format_report(self) -> str:
        """
        Format the statistics block printed at the end of a scan.

        Example:
            Scanner Statistics:
            Total Tokens: 12
            Lines Processed: 4
            Comments Removed: 1
            KEYWORD: 3
            IDENTIFIER: 2
        """
        lines = [
            "Scanner Statistics:",
            f"Total Tokens: {self.total_tokens}",
            f"Lines Processed: {self.lines_processed}",
            f"Comments Removed: {self.comments_removed}",
        ]
        # Enum declaration order, not insertion order
        for kind in TokenKind:
            if kind in self.counts_by_kind:
                lines.append(f"{kind.name}: {self.counts_by_kind[kind]}")
        return "\n".join(lines)

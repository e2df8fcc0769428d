"""
Pattern Table
=============

The ordered list of lexical patterns the scanner tries at every position.

Every pattern is tried on every step; the longest match wins. The order
below only matters when two patterns match the same number of characters,
in which case the earlier entry wins.

| Priority | Kind            | Pattern                                         |
|----------|-----------------|-------------------------------------------------|
| 1        | COMMENT         | #* ... *#                                       |
| 2        | COMMENT         | ## to end of line                               |
| 3        | OPERATOR        | ** == != <= >= && || ++ -- += -= *= /=          |
| 4        | KEYWORD         | start finish loop condition declare output ...  |
| 5        | BOOLEAN_LITERAL | true false                                      |
| 6        | IDENTIFIER      | [A-Z][a-z0-9 ]{0,30}                            |
| 7        | FLOAT_LITERAL   | [+-]?digits.digits{1,6} with optional exponent  |
| 8        | INTEGER_LITERAL | [+-]?digits                                     |
| 9        | STRING_LITERAL  | "..." with \\" \\\\ \\n \\t \\r escapes         |
| 10       | CHAR_LITERAL    | 'c' or one escape                               |
| 11       | OPERATOR        | + - * / % = < > !                               |
| 12       | PUNCTUATOR      | ( ) { } [ ] , ; :                               |
| 13       | WHITESPACE      | runs of space, tab, CR, LF                      |
"""

from dataclasses import dataclass
from typing import Optional
import re

from scanlang.tokens import TokenKind


# =============================================================================
# Word Lists
# =============================================================================

KEYWORDS: tuple[str, ...] = (
    "start",
    "finish",
    "loop",
    "condition",
    "declare",
    "output",
    "input",
    "function",
    "return",
    "break",
    "continue",
    "else",
)

BOOLEAN_LITERALS: tuple[str, ...] = ("true", "false")

MULTI_CHAR_OPERATORS: tuple[str, ...] = (
    "**", "==", "!=", "<=", ">=", "&&", "||",
    "++", "--", "+=", "-=", "*=", "/=",
)

SINGLE_CHAR_OPERATORS = "+-*/%=<>!"

PUNCTUATORS = "(){}[],;:"

# Identifier body length after the leading capital
MAX_IDENTIFIER_TAIL = 30


# =============================================================================
# Pattern Entry
# =============================================================================

@dataclass(frozen=True)
class PatternEntry:
    """
    One (kind, matcher) pair of the pattern table.

    Attributes:
        kind: Token kind produced when this pattern wins
        regex: Compiled pattern, matched anchored at the scan offset
        name: Short label for debugging output
    """
    kind: TokenKind
    regex: re.Pattern
    name: str

    def match(self, source: str, pos: int) -> Optional[str]:
        """
        Return the longest prefix of source[pos:] this pattern accepts.

        Returns None when the pattern does not match at pos, or when it
        would only match the empty string.
        """
        m = self.regex.match(source, pos)
        if m is None or m.end() == pos:
            return None
        return m.group()


def _alternation(words: tuple[str, ...]) -> str:
    return "|".join(re.escape(word) for word in words)


def _char_class(chars: str) -> str:
    return "[" + "".join(re.escape(c) for c in chars) + "]"


def _entry(kind: TokenKind, pattern: str, name: str) -> PatternEntry:
    return PatternEntry(kind, re.compile(pattern), name)


# =============================================================================
# Table Construction
# =============================================================================

def build_pattern_table() -> tuple[PatternEntry, ...]:
    """
    Build the priority-ordered pattern table.

    Returns:
        Immutable tuple of PatternEntry, highest priority first
    """
    return (
        # The body never lets a run of '*' be followed by '#' except at
        # the closing delimiter, so the first "*#" ends the comment.
        _entry(TokenKind.COMMENT, r"#\*(?:[^*]|\*+[^#*])*\*+#", "block-comment"),
        _entry(TokenKind.COMMENT, r"##[^\n\r]*", "line-comment"),
        _entry(TokenKind.OPERATOR, _alternation(MULTI_CHAR_OPERATORS), "multi-operator"),
        _entry(TokenKind.KEYWORD, _alternation(KEYWORDS), "keyword"),
        _entry(TokenKind.BOOLEAN_LITERAL, _alternation(BOOLEAN_LITERALS), "boolean"),
        _entry(
            TokenKind.IDENTIFIER,
            rf"[A-Z][a-z0-9 ]{{0,{MAX_IDENTIFIER_TAIL}}}",
            "identifier",
        ),
        _entry(
            TokenKind.FLOAT_LITERAL,
            r"[+-]?[0-9]+\.[0-9]{1,6}(?:[eE][+-]?[0-9]+)?",
            "float",
        ),
        _entry(TokenKind.INTEGER_LITERAL, r"[+-]?[0-9]+", "integer"),
        _entry(TokenKind.STRING_LITERAL, r'"(?:[^"\\\n]|\\["\\ntr])*"', "string"),
        _entry(TokenKind.CHAR_LITERAL, r"'(?:[^'\\\n]|\\[\\'ntr])'", "char"),
        _entry(TokenKind.OPERATOR, _char_class(SINGLE_CHAR_OPERATORS), "operator"),
        _entry(TokenKind.PUNCTUATOR, _char_class(PUNCTUATORS), "punctuator"),
        _entry(TokenKind.WHITESPACE, r"[ \t\r\n]+", "whitespace"),
    )


# Shared default table; entries are frozen and the tuple is immutable
PATTERN_TABLE: tuple[PatternEntry, ...] = build_pattern_table()


def longest_match(
    patterns: tuple[PatternEntry, ...],
    source: str,
    pos: int,
) -> Optional[tuple[PatternEntry, str]]:
    """
    Find the winning pattern at pos.

    Every pattern is tried. The longest lexeme wins; on equal length the
    entry that appears first in the table keeps the win.

    Args:
        patterns: Priority-ordered pattern table
        source: Complete source text
        pos: Offset to match at

    Returns:
        (entry, lexeme) for the winner, or None if nothing matches
    """
    best: Optional[tuple[PatternEntry, str]] = None

    for entry in patterns:
        lexeme = entry.match(source, pos)
        if lexeme is None:
            continue
        # Strictly greater: ties keep the earlier (higher priority) entry
        if best is None or len(lexeme) > len(best[1]):
            best = (entry, lexeme)

    return best

"""
Token Model
===========

Token kinds and the immutable Token record produced by the scanner.

Token Categories
----------------
- Keywords: start, finish, loop, condition, declare, output, input,
  function, return, break, continue, else
- Boolean literals: true, false
- Identifiers: an uppercase letter followed by up to 30 lowercase
  letters, digits or spaces (Total count, Max1)
- Numbers: integers (42, -7) and floats (3.14, +2.5e-3)
- Strings: "double quoted" with \\" \\\\ \\n \\t \\r escapes
- Characters: 'c' or one escape from \\\\ \\' \\n \\t \\r
- Operators: ** == != <= >= && || ++ -- += -= *= /= + - * / % = < > !
- Punctuators: ( ) { } [ ] , ; :

COMMENT and WHITESPACE are recognized by the pattern table but never
returned to the caller.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from scanlang.errors import SourceLocation


# =============================================================================
# Token Kind Enumeration
# =============================================================================

class TokenKind(Enum):
    """Closed set of lexical categories."""

    # === Internal Only (never emitted) ===
    COMMENT = auto()            # #* ... *# and ## ...
    WHITESPACE = auto()         # space, tab, CR, LF

    # === Words ===
    KEYWORD = auto()
    BOOLEAN_LITERAL = auto()
    IDENTIFIER = auto()

    # === Literals ===
    FLOAT_LITERAL = auto()
    INTEGER_LITERAL = auto()
    STRING_LITERAL = auto()
    CHAR_LITERAL = auto()

    # === Symbols ===
    OPERATOR = auto()
    PUNCTUATOR = auto()

    # === Recovery and Structure ===
    UNKNOWN = auto()            # Single unmatched character
    END_OF_INPUT = auto()


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A classified, positioned span of source text.

    The lexeme is the exact matched text; escapes in string and character
    literals are not interpreted. END_OF_INPUT tokens carry no lexeme.

    Attributes:
        kind: The TokenKind classification
        lexeme: The matched source text (None for END_OF_INPUT)
        line: Line of the first character (1-indexed)
        column: Column of the first character (1-indexed)
    """
    kind: TokenKind
    lexeme: Optional[str]
    line: int
    column: int

    def __repr__(self) -> str:
        if self.lexeme is not None:
            return f"Token({self.kind.name}, {self.lexeme!r}, {self.line}:{self.column})"
        return f"Token({self.kind.name}, {self.line}:{self.column})"

    def location(self, filename: str = "<input>") -> SourceLocation:
        """Return a SourceLocation for error reporting."""
        return SourceLocation(filename, self.line, self.column)

    def is_eof(self) -> bool:
        return self.kind is TokenKind.END_OF_INPUT

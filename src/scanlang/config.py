"""
Scan Configuration
==================

Driver settings for the scanlang command-line tool and scan_file().
Configuration can come from:
- Default values (defined here)
- Environment variables (ScanConfig.from_env)
- Command-line options, which override both

The scanner itself takes no configuration; these settings only control
how the driver loads source text and what it reports.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
import codecs
import os


_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


def _parse_flag(value: str) -> Optional[bool]:
    """Return True/False for a recognized flag value, None otherwise."""
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    return None


@dataclass
class ScanConfig:
    """
    Configuration for a driver run.

    Attributes:
        show_unknown: Print UNKNOWN tokens with the others (default: False)
        show_stats: Print the statistics block (default: True)
        show_symbols: Print the symbol table (default: True)
        strict: Fail the run if any character was unmatched (default: False)
        encoding: Text encoding of source files (default: "utf-8")
        max_diagnostics: Diagnostics kept for the strict-mode report
        default_input: File scanned when none is given on the command line
    """

    # Output selection
    show_unknown: bool = False
    show_stats: bool = True
    show_symbols: bool = True

    # Failure policy
    strict: bool = False
    max_diagnostics: int = 100

    # Source loading
    encoding: str = "utf-8"
    default_input: Path = field(default_factory=lambda: Path("test_input.txt"))

    @classmethod
    def from_env(cls) -> "ScanConfig":
        """
        Create ScanConfig from environment variables.

        Environment variables (all optional):
            SCANLANG_SHOW_UNKNOWN: Print UNKNOWN tokens (1/0, true/false)
            SCANLANG_STRICT: Fail on unmatched characters (1/0, true/false)
            SCANLANG_ENCODING: Source encoding (e.g., "latin-1")
            SCANLANG_MAX_DIAGNOSTICS: Diagnostic cap (integer)
            SCANLANG_INPUT: Default input file

        Unrecognized values are ignored and the default is kept.

        Returns:
            ScanConfig with values from environment variables
        """
        config = cls()

        if show_unknown := os.environ.get("SCANLANG_SHOW_UNKNOWN"):
            flag = _parse_flag(show_unknown)
            if flag is not None:
                config.show_unknown = flag

        if strict := os.environ.get("SCANLANG_STRICT"):
            flag = _parse_flag(strict)
            if flag is not None:
                config.strict = flag

        if encoding := os.environ.get("SCANLANG_ENCODING"):
            try:
                codecs.lookup(encoding)
            except LookupError:
                pass  # Unknown codec, keep the default
            else:
                config.encoding = encoding

        if max_diagnostics := os.environ.get("SCANLANG_MAX_DIAGNOSTICS"):
            try:
                value = int(max_diagnostics)
            except ValueError:
                value = None
            if value is not None and value > 0:
                config.max_diagnostics = value

        if input_path := os.environ.get("SCANLANG_INPUT"):
            config.default_input = Path(input_path)

        return config

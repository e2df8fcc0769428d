"""
ScanLang Command-Line Interface
===============================

This package provides the command-line driver for the scanner:

- **scanlang**: scan a source file and print its tokens, statistics
  and symbol table

The tool is implemented as a Click-based CLI application with help
text and consistent exit codes (see scanlang.cli.errors).
"""

__all__ = ["scan"]

"""
Scanner CLI Error Handling
==========================

Maps failures of a scanlang run to a message on stderr and an exit code.

    SourceReadError     -> "Error: cannot read ..." (+ encoding hint), exit 1
    ScanFailedError     -> diagnostic report + "scan failed" line, exit 1
    missing/unreadable  -> "Error: ...", exit 2
    anything else       -> "Internal error: ...", exit 3
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn

import click

from scanlang.errors import ScanFailedError, ScanLangError, SourceReadError


class ExitCode(IntEnum):
    """Exit codes of the scanlang command."""
    SUCCESS = 0
    SCAN_ERROR = 1       # Unmatched characters in strict mode, undecodable source
    INVALID_ARGS = 2     # Missing or unopenable input file
    INTERNAL_ERROR = 3


def handle_cli_exception(error: Exception, verbose: bool = False) -> NoReturn:
    """
    Report a failed scan and exit.

    Args:
        error: The exception that ended the run
        verbose: Print the traceback for internal errors

    Raises:
        SystemExit: Always
    """
    if isinstance(error, ScanFailedError):
        # The report already carries per-character "error:" lines
        click.echo(str(error), err=True)
        click.echo("scan failed: unrecognized characters in strict mode", err=True)
        sys.exit(ExitCode.SCAN_ERROR)

    if isinstance(error, SourceReadError):
        click.echo(f"Error: {error}", err=True)
        if isinstance(error.__cause__, (UnicodeDecodeError, LookupError)):
            click.echo("hint: choose another --encoding or set SCANLANG_ENCODING", err=True)
        sys.exit(ExitCode.SCAN_ERROR)

    if isinstance(error, ScanLangError):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.SCAN_ERROR)

    if isinstance(error, FileNotFoundError):
        click.echo(f"Error: input file not found: {error.filename or error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    if isinstance(error, (PermissionError, click.BadParameter)):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    click.echo(f"Internal error: {error}", err=True)
    if verbose:
        traceback.print_exc()
    sys.exit(ExitCode.INTERNAL_ERROR)

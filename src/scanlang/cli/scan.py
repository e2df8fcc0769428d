"""
scanlang - Scanner Command-Line Interface
=========================================

Scans a source file and prints every token, followed by the scanner
statistics and the symbol table.

Usage Examples
--------------
Scan the default input (test_input.txt):
    $ scanlang

Scan a specific file:
    $ scanlang program.sl

Include unrecognized characters in the token listing:
    $ scanlang --show-unknown program.sl

Fail when any character is unrecognized:
    $ scanlang --strict program.sl
"""

from pathlib import Path
from typing import Optional
import logging

import click

from scanlang import __version__
from scanlang.cli.errors import handle_cli_exception
from scanlang.config import ScanConfig
from scanlang.driver import ScanResult, scan_file

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


def print_result(result: ScanResult, config: ScanConfig) -> None:
    """Echo tokens, statistics and symbol table as configured."""
    for token in result.visible_tokens(config.show_unknown):
        click.echo(repr(token))

    if config.show_stats:
        click.echo()
        click.echo(result.statistics.format_report())

    if config.show_symbols:
        click.echo()
        click.echo(result.symbols.format_table())


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    required=False,
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option(
    "--show-unknown/--hide-unknown",
    default=None,
    help="List unrecognized characters as UNKNOWN tokens (default: hide)",
)
@click.option(
    "--stats/--no-stats",
    default=None,
    help="Print scanner statistics (default: on)",
)
@click.option(
    "--symbols/--no-symbols",
    default=None,
    help="Print the symbol table (default: on)",
)
@click.option(
    "--strict/--no-strict",
    default=None,
    help="Exit with an error if any character is unrecognized",
)
@click.option(
    "--encoding",
    type=str,
    default=None,
    help="Source file encoding (default: utf-8)",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="scanlang")
def main(
    input_file: Optional[Path],
    show_unknown: Optional[bool],
    stats: Optional[bool],
    symbols: Optional[bool],
    strict: Optional[bool],
    encoding: Optional[str],
    verbose: bool,
) -> None:
    """
    Scan a source file and list its tokens.

    INPUT_FILE is the source to scan (default: test_input.txt, or the
    SCANLANG_INPUT environment variable).

    Comments and whitespace are skipped. Unrecognized characters are
    reported as warnings and scanning continues after them.

    \b
    Examples:
        scanlang program.sl              # Tokens, statistics, symbols
        scanlang --no-stats program.sl   # Tokens and symbols only
        scanlang --strict program.sl     # Exit 1 on unknown characters
    """
    setup_logging(verbose)

    config = ScanConfig.from_env()
    if show_unknown is not None:
        config.show_unknown = show_unknown
    if stats is not None:
        config.show_stats = stats
    if symbols is not None:
        config.show_symbols = symbols
    if strict is not None:
        config.strict = strict
    if encoding is not None:
        config.encoding = encoding

    path = input_file if input_file is not None else config.default_input
    logger.debug(f"Configuration: {config}")

    try:
        if verbose:
            click.echo(f"Scanning file: {path}")

        result = scan_file(path, config)
        print_result(result, config)

    except Exception as e:
        handle_cli_exception(e, verbose=verbose)


if __name__ == "__main__":
    main()

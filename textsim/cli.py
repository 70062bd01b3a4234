"""
Command-line interface for textsim.

One input file compares its strings pair-wise; two files compare the second
(test) file against the first (reference) file.
"""

from __future__ import annotations

import logging

import click

from . import __version__
from .config import INIT_INPUT_SIZE, TOP_K, SimilarityConfig
from .distance import Workspace
from .process import pairwise, reference
from .record import Record, load_records
from .result import BLOCK_MARKER

logger = logging.getLogger(__name__)

USAGE = """
NAME
    textsim - find and print text similarity between sets of strings

SYNOPSIS
    textsim [OPTIONS] combfile

    textsim [OPTIONS] reffile testfile

DESCRIPTION
    textsim finds the Damerau-Levenshtein (optimal string alignment)
    distance between strings.

    The first form of invocation treats the contents of the file
    'combfile' as strings that each need to be compared with all the
    others in the file.

    The second form treats those from the file 'reffile' as correct
    reference strings, against which those in the file 'testfile' are
    compared.  Only the closest reference strings are printed for each
    test string (three by default, see --top-k), followed by a line
    containing '----'.

    In all cases, the input files should have one string per line.
    Blank lines are ignored.  Leading and trailing spaces and tabs are
    trimmed, but users should take care of non-printable characters
    themselves.

    The output is one line per combination of strings, with the
    following tab-separated format:

        pd d tl rl tstr rstr

    where 'd' is the distance between strings 'tstr' and 'rstr'; 'tl'
    and 'rl' are the line numbers of 'tstr' and 'rstr' among the
    non-blank lines of their files; and 'pd' is calculated as:

        d / (len(tstr) + len(rstr)).

OPTIONS
    --top-k N        reference matches kept per test string (default 3)
    --encoding NAME  encoding of the input files (default utf-8)
    -v, --verbose    log progress to stderr
    --version        print the version and exit
"""


def setup_logging(log_level: str = "WARNING") -> None:
    """Configure logging for the command-line run."""
    level = getattr(logging, log_level.upper(), logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def _read(path: str, config: SimilarityConfig) -> list[Record]:
    try:
        return load_records(path, encoding=config.encoding)
    except OSError as e:
        click.echo(f"!! Unable to open the input file: {path}; {e}", err=True)
        raise SystemExit(1) from e
    except (LookupError, UnicodeError) as e:
        click.echo(f"!! Unable to decode the input file: {path}; {e}", err=True)
        raise SystemExit(1) from e


def _emit(line: str, config: SimilarityConfig) -> None:
    # Undecodable input bytes are written back unchanged.
    click.echo(line.encode(config.encoding, "surrogateescape"))


class _UsageCommand(click.Command):
    """Prints the manual page instead of click's error for unparsable arguments."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError:
            click.echo(USAGE)
            ctx.exit(0)


def run_pairwise(path: str, config: SimilarityConfig) -> None:
    records = _read(path, config)
    logger.debug("all-pairs mode over %s", path)
    for result in pairwise(records, workspace=Workspace(config.initial_size)):
        _emit(result.format(), config)


def run_reference(ref_path: str, test_path: str, config: SimilarityConfig) -> None:
    references = _read(ref_path, config)
    tests = _read(test_path, config)
    logger.debug("reference mode: %s against %s", test_path, ref_path)
    blocks = reference(
        references, tests, limit=config.top_k, workspace=Workspace(config.initial_size)
    )
    for block in blocks:
        for result in block.results:
            _emit(result.format(), config)
        _emit(BLOCK_MARKER, config)


@click.command(
    name="textsim",
    cls=_UsageCommand,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.argument("files", nargs=-1, type=click.Path())
@click.option(
    "--top-k",
    type=int,
    default=TOP_K,
    show_default=True,
    help="Reference matches kept per test string",
)
@click.option(
    "--encoding",
    default="utf-8",
    show_default=True,
    help="Encoding of the input files",
)
@click.option("--verbose", "-v", is_flag=True, help="Log progress to stderr")
@click.version_option(__version__, prog_name="textsim")
def main(files: tuple[str, ...], top_k: int, encoding: str, verbose: bool) -> None:
    """Find and print text similarity between sets of strings."""
    try:
        config = SimilarityConfig(
            top_k=top_k,
            initial_size=INIT_INPUT_SIZE,
            encoding=encoding,
            log_level="DEBUG" if verbose else "WARNING",
        ).validate()
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--top-k") from e
    setup_logging(config.log_level)

    if len(files) == 1:
        run_pairwise(files[0], config)
    elif len(files) == 2:
        run_reference(files[0], files[1], config)
    else:
        click.echo(USAGE)


__all__ = ["main", "run_pairwise", "run_reference", "setup_logging", "USAGE"]

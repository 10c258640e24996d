"""Command-line interface for dirdiff."""

from __future__ import annotations

from contextlib import closing
from pathlib import Path
from typing import Optional

import click

from . import __version__
from .compare import SamplingComparator
from .config import color_enabled_by_default, get_chunk_size, get_jobs
from .errors import CompareError
from .tree import diff_directories
from .verdicts import Different, LeftOnly, RightOnly, Verdict


def echo_verdict(verdict: Verdict, color: Optional[bool] = None) -> None:
    """Print one verdict with its marker and color."""
    if isinstance(verdict, LeftOnly):
        click.secho(f"<-- {verdict.path}", fg="red", color=color)
    elif isinstance(verdict, RightOnly):
        click.secho(f"--> {verdict.path}", fg="green", color=color)
    elif isinstance(verdict, Different):
        click.secho(f"{verdict.left} <-> {verdict.right}", fg="yellow", color=color)
    else:
        raise TypeError(f"Unknown verdict: {verdict!r}")


def _report_directory(left: Path, right: Path) -> None:
    click.echo(f"Comparing {left} <-> {right}", err=True)


@click.group()
def cli() -> None:
    """Compare two directory trees."""


@cli.command()
@click.argument("left", type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.argument("right", type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.option(
    "-j",
    "--jobs",
    type=click.IntRange(min=1),
    default=None,
    help="Compare files of a directory in parallel (default: DIRDIFF_JOBS or 1).",
)
@click.option("--color/--no-color", default=None, help="Force colored output on or off.")
@click.option("-v", "--verbose", is_flag=True, help="Report each directory pair to stderr.")
@click.option("-q", "--quiet", is_flag=True, help="Print nothing; stop at the first difference.")
@click.pass_context
def compare(
    ctx: click.Context,
    left: Path,
    right: Path,
    jobs: Optional[int],
    color: Optional[bool],
    verbose: bool,
    quiet: bool,
) -> None:
    """Report paths that differ between LEFT and RIGHT.

    Exits with 0 when the trees match, 1 when differences were found and 2
    on error.
    """
    try:
        if jobs is None:
            jobs = get_jobs()
        chunk_size = get_chunk_size()
    except ValueError as e:
        raise click.UsageError(str(e))

    if color is None and not color_enabled_by_default():
        color = False

    on_directory = _report_directory if verbose else None

    comparator = SamplingComparator(chunk_size=chunk_size)
    found = False
    try:
        verdicts = diff_directories(
            left, right, jobs=jobs, comparator=comparator, on_directory=on_directory
        )
        with closing(verdicts):
            for verdict in verdicts:
                found = True
                if quiet:
                    break
                echo_verdict(verdict, color)
    except OSError as e:
        click.echo(f"Error comparing directories: {e}", err=True)
        raise CompareError(str(e))

    if found:
        ctx.exit(1)


@cli.command()
def version() -> None:
    """Display the dirdiff version."""
    click.echo(__version__)

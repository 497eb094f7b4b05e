"""Compare command: decide whether two casts record the same session.

Exit status is 0 when the casts are equal and 2 when they differ. Errors exit 1,
so file paths are checked by the command itself rather than by Click, whose
usage errors exit 2.
"""

from pathlib import Path
from typing import List, Optional

import typer
from rich.markup import escape

from .. import __version__
from ..diff import diff_casts
from ..exceptions import CastDiffError
from ..logging_config import setup_logging
from . import app
from ._common import ExitCode, console, err_console, resolve_config
from ._mismatch_output import MismatchFormatter


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"[bold cyan]cast-diff[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit(ExitCode.EQUAL)


@app.command()
def compare(
    file1: Path = typer.Argument(
        ...,
        help="Reference cast file",
        metavar="FILE",
    ),
    file2: Path = typer.Argument(
        ...,
        help="Cast file to compare against the reference",
        metavar="FILE",
    ),
    time_tolerance: Optional[int] = typer.Option(
        None,
        "--time-tolerance",
        "-t",
        help="Amount of time drift allowed between each event, in milliseconds",
        min=0,
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="No output on stdout",
    ),
    header: Optional[List[str]] = typer.Option(
        None,
        "--header",
        "-h",
        help="Header field to compare (repeatable)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose (DEBUG) logging and show where the casts differ",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Also append log records to this file",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file path (TOML format)",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """
    Compare two asciinema casts.

    Event timing is compared by the gap between consecutive events, so casts
    recorded at different times still match. Header fields are ignored
    unless named with --header.

    [bold cyan]Examples:[/bold cyan]

      cast-diff expected.cast actual.cast

      cast-diff expected.cast actual.cast -t 50

      cast-diff expected.cast actual.cast -h width -h height -q
    """
    if verbose and quiet:
        err_console.print("[red]Error:[/red] --verbose and --quiet are mutually exclusive")
        raise typer.Exit(ExitCode.ERROR)

    try:
        settings = resolve_config(
            config=config,
            time_tolerance=time_tolerance,
            header=header,
            verbose=verbose,
            quiet=quiet,
        )
    except CastDiffError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(ExitCode.ERROR)

    try:
        logger = setup_logging(settings.verbosity, log_file=str(log_file) if log_file else None)
    except OSError as e:
        err_console.print(f"[red]Error:[/red] cannot open log file: {escape(str(e))}")
        raise typer.Exit(ExitCode.ERROR)
    logger.debug("Loaded config: %s", settings)

    try:
        with _open_cast(file1) as cast1, _open_cast(file2) as cast2:
            mismatch = diff_casts(cast1, cast2, *settings.compare_options())

    except CastDiffError as e:
        logger.debug("%s: %s", e.__class__.__name__, e)
        err_console.print(f"[red]Error:[/red] error comparing casts: {escape(str(e))}")
        raise typer.Exit(ExitCode.ERROR)

    except OSError as e:
        logger.debug("I/O error: %s", e)
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(ExitCode.ERROR)

    except Exception as e:
        logger.exception("Unexpected error while comparing casts")
        err_console.print(f"[red]Unexpected error:[/red] {escape(str(e))}")
        raise typer.Exit(ExitCode.ERROR)

    show_verdict = settings.verbosity != "quiet"

    if mismatch is not None:
        if settings.verbosity == "verbose":
            MismatchFormatter(console=err_console).render(mismatch)
        if show_verdict:
            print("casts are not equal")
        raise typer.Exit(ExitCode.DIFFERENT)

    if show_verdict:
        print("casts are equal")


def _open_cast(path: Path):
    try:
        return open(path, "rb")
    except OSError as e:
        raise OSError(e.errno, f"error opening {path}: {e.strerror}") from e

"""CLI entry point: registers the compare command."""

import typer

app = typer.Typer(
    name="cast-diff",
    help="cast-diff - compare two asciinema recordings",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import commands to register them
from .compare import compare as _compare  # noqa: F401, E402


def main() -> None:
    app()

"""Rich rendering of the first difference between two casts."""

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..diff.models import CastMismatch

_KIND_LABELS = {
    "header": "HEADER",
    "event": "EVENT",
    "length": "LENGTH",
}


def _value_str(value) -> str:
    if value is None:
        return "[dim](none)[/dim]"
    return escape(repr(value))


class MismatchFormatter:
    """Render a CastMismatch to a Rich console."""

    def __init__(self, console: Optional[Console] = None):
        self._console = console or Console(stderr=True)

    def render(self, mismatch: CastMismatch) -> None:
        label = _KIND_LABELS.get(mismatch.kind, mismatch.kind.upper())
        self._console.print(
            f"[yellow]{label}[/yellow] mismatch at line {mismatch.line}: {escape(mismatch.reason)}",
            markup=True,
            highlight=False,
        )
        if mismatch.kind == "length":
            return

        if mismatch.kind == "event":
            self._render_event_table(mismatch)
        else:
            self._console.print(f"  expected: {_value_str(mismatch.expected)}")
            self._console.print(f"  actual:   {_value_str(mismatch.actual)}")

    def _render_event_table(self, mismatch: CastMismatch) -> None:
        table = Table(show_header=True, header_style="bold")
        table.add_column("", style="dim")
        table.add_column("expected")
        table.add_column("actual")
        for key in ("time", "type", "data"):
            want = mismatch.expected.get(key)
            got = mismatch.actual.get(key)
            style = "" if want == got else "red"
            got_str = escape(repr(got))
            table.add_row(
                key,
                escape(repr(want)),
                f"[{style}]{got_str}[/{style}]" if style else got_str,
            )
        self._console.print(table)

"""Shared CLI helpers."""

from pathlib import Path
from typing import List, Optional

from rich.console import Console

from ..config import DiffConfig, load_config

console = Console()
err_console = Console(stderr=True)


class ExitCode:
    """Process exit codes.

    A difference between the casts is not an error, so it gets its own code.
    """

    EQUAL = 0
    ERROR = 1
    DIFFERENT = 2


def resolve_config(
    config: Optional[Path] = None,
    time_tolerance: Optional[int] = None,
    header: Optional[List[str]] = None,
    verbose: bool = False,
    quiet: bool = False,
) -> DiffConfig:
    """Build config from CLI options."""
    overrides = {}
    if time_tolerance is not None:
        overrides["time_tolerance_ms"] = time_tolerance
    if header:
        overrides["header_fields"] = list(header)
    if verbose:
        overrides["verbose"] = True
    if quiet:
        overrides["quiet"] = True
    return load_config(config_file=config, **overrides)

"""Configuration loading and management for cast-diff.

Configuration sources are merged in priority order:
    1. Defaults (defined in DiffConfig)
    2. Global config (~/.cast-diff.toml)
    3. Project config (./cast-diff.toml)
    4. Explicit config file
    5. Environment variables (CAST_DIFF_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(time_tolerance_ms=50, header_fields=["width"])
    >>> config.time_tolerance_ms
    50
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from datetime import timedelta
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .diff.models import EqualOption, with_header_fields, with_time_tolerance
from .exceptions import ConfigurationError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]

_VERBOSITIES = ("quiet", "normal", "verbose")

ENV_PREFIX = "CAST_DIFF_"
GLOBAL_CONFIG_NAME = ".cast-diff.toml"
PROJECT_CONFIG_NAME = "cast-diff.toml"


@dataclass(frozen=True)
class DiffConfig:
    """Settings for comparing two casts.

    Attributes:
        time_tolerance_ms: Drift allowed between matching events, in
            milliseconds
        header_fields: Header fields that must be equal in both casts
        verbosity: Logging verbosity level
    """

    time_tolerance_ms: int = 0
    header_fields: list[str] = field(default_factory=list)
    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if isinstance(self.time_tolerance_ms, bool) or not isinstance(self.time_tolerance_ms, int):
            raise InvalidConfigError(
                "time_tolerance_ms", self.time_tolerance_ms, "must be an integer"
            )
        if self.time_tolerance_ms < 0:
            raise InvalidConfigError(
                "time_tolerance_ms", self.time_tolerance_ms, "must be non-negative"
            )
        if not isinstance(self.header_fields, (list, tuple)) or not all(
            isinstance(name, str) for name in self.header_fields
        ):
            raise InvalidConfigError(
                "header_fields", self.header_fields, "must be a list of strings"
            )
        if self.verbosity not in _VERBOSITIES:
            raise InvalidConfigError(
                "verbosity", self.verbosity, f"must be one of {', '.join(_VERBOSITIES)}"
            )

    @property
    def time_tolerance(self) -> timedelta:
        return timedelta(milliseconds=self.time_tolerance_ms)

    def compare_options(self) -> list[EqualOption]:
        """Options for the comparison engine."""
        return [
            with_time_tolerance(self.time_tolerance),
            with_header_fields(*self.header_fields),
        ]


def load_config(config_file: Optional[Path] = None, **overrides) -> DiffConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``verbose``
            and ``quiet`` booleans are mapped onto ``verbosity``; None values
            are ignored.

    Returns:
        Validated DiffConfig instance

    Raises:
        ConfigurationError: If a config file or environment variable is invalid
    """
    merged: dict = {}

    global_config = Path.home() / GLOBAL_CONFIG_NAME
    if global_config.exists():
        merged.update(_load_config_file(global_config, "global config"))

    project_config = Path.cwd() / PROJECT_CONFIG_NAME
    if project_config.exists():
        merged.update(_load_config_file(project_config, "project config"))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_load_config_file(config_file, "config file"))

    merged.update(_load_env_vars())

    overrides = {k: v for k, v in overrides.items() if v is not None}
    verbose = overrides.pop("verbose", False)
    quiet = overrides.pop("quiet", False)
    if verbose:
        overrides["verbosity"] = "verbose"
    elif quiet:
        overrides["verbosity"] = "quiet"
    merged.update(overrides)

    try:
        return DiffConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise ConfigurationError(f"Invalid configuration: {e}")


def _load_config_file(path: Path, label: str) -> dict:
    try:
        return _load_toml_file(path)
    except ConfigurationError:
        raise
    except Exception as e:
        raise ConfigurationError(f"Invalid {label} '{path}': {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from CAST_DIFF_* environment variables.

    Supported environment variables:
        CAST_DIFF_TIME_TOLERANCE_MS: int
        CAST_DIFF_HEADER_FIELDS: comma-separated field names
        CAST_DIFF_VERBOSITY: quiet/normal/verbose
    """
    type_hints = get_type_hints(DiffConfig)

    result: dict[str, Any] = {}

    for field_name in DiffConfig.__dataclass_fields__:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        try:
            result[field_name] = _parse_env_value(env_value, type_hints[field_name])
        except ValueError as e:
            raise ConfigurationError(f"Invalid {env_key}: {e}")

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse an environment variable string to the field's type."""
    origin = getattr(type_hint, "__origin__", None)

    if origin is list:
        return [part.strip() for part in value.split(",") if part.strip()]

    if type_hint is int:
        return int(value)

    # String (including Literal types like Verbosity)
    return value


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict."""
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        # tomli for Python 3.9-3.10
        import tomli as tomllib  # type: ignore

    with open(path, "rb") as f:
        return tomllib.load(f)

"""Exception hierarchy for cast-diff."""

from .base import CastDiffError
from .cast import CastFormatError, DecodeError
from .config import ConfigurationError, InvalidConfigError

__all__ = [
    "CastDiffError",
    "CastFormatError",
    "DecodeError",
    "ConfigurationError",
    "InvalidConfigError",
]

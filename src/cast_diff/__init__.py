"""
cast-diff - compare asciinema recordings

Decides whether two asciinema v2 casts record the same terminal session.
Event timing may drift within a tolerance, and only the header fields a
caller names are compared.
"""

__version__ = "0.1.0"

from .diff import (
    CastMismatch,
    CompareOptions,
    Event,
    compare_headers,
    decode_event,
    decode_header,
    deep_equal,
    diff_casts,
    equal,
    events_equal,
    with_header_fields,
    with_time_tolerance,
)
from .exceptions import CastDiffError, DecodeError

__all__ = [
    "equal",  # Main entry point
    "diff_casts",
    "with_time_tolerance",
    "with_header_fields",
    "CompareOptions",
    "CastMismatch",
    "Event",
    "decode_event",
    "decode_header",
    "compare_headers",
    "deep_equal",
    "events_equal",
    "CastDiffError",
    "DecodeError",
]

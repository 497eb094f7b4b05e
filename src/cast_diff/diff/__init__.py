"""Diff layer: decoding, header comparison and drift-tolerant cast equality."""

from .decoder import decode_event, decode_header
from .engine import diff_casts, equal, events_equal
from .headers import compare_headers, deep_equal, find_header_mismatch
from .models import (
    CastMismatch,
    CompareOptions,
    EqualOption,
    Event,
    with_header_fields,
    with_time_tolerance,
)

__all__ = [
    "CastMismatch",
    "CompareOptions",
    "EqualOption",
    "Event",
    "compare_headers",
    "decode_event",
    "decode_header",
    "deep_equal",
    "diff_casts",
    "equal",
    "events_equal",
    "find_header_mismatch",
    "with_header_fields",
    "with_time_tolerance",
]

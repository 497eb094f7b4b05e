"""Line decoding for cast files.

A cast is newline-delimited JSON. The first line is a header object, every
following line is an event tuple ``[seconds, type, data]``. Only the shape
needed for comparison is checked; the rest of the asciinema grammar is left
alone.
"""

import json
import math
from typing import Any, Union

from ..exceptions import DecodeError
from .models import NANOSECONDS_PER_SECOND, Event, Header

RawLine = Union[str, bytes]


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON constant {name}")


def _parse_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"number out of range: {text}")
    return value


def _parse_int(text: str) -> int:
    # JSON numbers must fit a float64, whatever their spelling
    value = int(text)
    try:
        float(value)
    except OverflowError:
        raise ValueError("number out of range: integer too large") from None
    return value


def _load_json(line: RawLine) -> Any:
    """Parse one line of strict JSON, raising DecodeError on failure."""
    if isinstance(line, (bytes, bytearray)):
        line = bytes(line).decode("utf-8", errors="replace")
    try:
        return json.loads(
            line,
            parse_constant=_reject_constant,
            parse_float=_parse_float,
            parse_int=_parse_int,
        )
    except ValueError as e:
        raise DecodeError(f"malformed JSON: {e}") from e


def _is_number(value: Any) -> bool:
    # bool is an int subclass but not a JSON number
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def decode_header(line: RawLine) -> Header:
    """Decode a header line into a mapping, or None for a ``null`` header."""
    value = _load_json(line)
    if value is not None and not isinstance(value, dict):
        raise DecodeError(f"header must be a JSON object, got {type(value).__name__}")
    return value


def decode_event(line: RawLine) -> Event:
    """Decode an event line ``[seconds, type, data]`` into an Event."""
    value = _load_json(line)
    if not isinstance(value, list) or len(value) != 3:
        raise DecodeError("invalid event data")

    seconds, event_type, data = value
    if not _is_number(seconds):
        raise DecodeError("invalid time")
    seconds = float(seconds)
    if not isinstance(event_type, str):
        raise DecodeError("invalid type")
    if not isinstance(data, str):
        raise DecodeError("invalid data")

    return Event(
        time=int(seconds * NANOSECONDS_PER_SECOND),
        type=event_type,
        data=data,
    )

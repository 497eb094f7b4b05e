"""Stream equality engine: decides whether two casts record the same session.

The two streams are read in lockstep:
  1. Line 1 is the header. Only the configured header fields are compared.
  2. Every later line is an event. Absolute timestamps are not compared;
     instead the gap between consecutive events in stream A is replayed onto
     stream B and the resulting expected time must be matched within the
     time tolerance.
  3. Both streams must run out on the same line.

The first difference ends the comparison. Decode failures raise DecodeError
and are never reported as a plain difference.
"""

import logging
from typing import Iterable, Iterator, Optional, Union

from ..exceptions import DecodeError
from .decoder import RawLine, decode_event, decode_header
from .headers import find_header_mismatch
from .models import CastMismatch, CompareOptions, Duration, EqualOption, Event

logger = logging.getLogger(__name__)

Stream = Iterable[RawLine]


def events_equal(
    expected: Optional[Event],
    actual: Optional[Event],
    tolerance: Duration = 0,
) -> bool:
    """Compare two events, either of which may be absent."""
    if expected is None or actual is None:
        return expected is None and actual is None
    return expected.equal(actual, tolerance)


def _strip_eol(line: RawLine) -> RawLine:
    # Drop one "\n" and then one "\r", so CRLF files compare like LF files
    newline, carriage = (b"\n", b"\r") if isinstance(line, (bytes, bytearray)) else ("\n", "\r")
    if line.endswith(newline):
        line = line[:-1]
    if line.endswith(carriage):
        line = line[:-1]
    return line


def _lines(stream: Stream) -> Iterator[RawLine]:
    for line in stream:
        yield _strip_eol(line)


def _resolve_options(options: tuple) -> CompareOptions:
    # A prebuilt CompareOptions may be passed in place of option callables
    if any(isinstance(option, CompareOptions) for option in options):
        if len(options) != 1:
            raise TypeError(
                "a CompareOptions instance must be passed alone, not mixed with other options"
            )
        return options[0]
    return CompareOptions.build(*options)


def _decode(decoder, line: RawLine, stream: str, line_number: int):
    try:
        return decoder(line)
    except DecodeError as e:
        raise e.at(stream, line_number) from e


def _event_summary(event: Event) -> dict:
    return {"time": event.seconds, "type": event.type, "data": event.data}


def diff_casts(
    a: Stream,
    b: Stream,
    *options: Union[EqualOption, CompareOptions],
) -> Optional[CastMismatch]:
    """Compare two casts and return the first difference, or None if equal.

    Args:
        a: The reference cast, as an iterable of lines (a file opened in
            text or binary mode works).
        b: The cast under test.
        *options: Options from :func:`with_time_tolerance` and
            :func:`with_header_fields`, or a single CompareOptions.

    Returns:
        A CastMismatch describing the first difference, or None.

    Raises:
        DecodeError: If a header or event line of either stream is malformed.
    """
    opts = _resolve_options(options)
    a_lines = _lines(a)
    b_lines = _lines(b)

    line_number = 0
    last_a_time = 0
    last_b_time = 0

    for a_line in a_lines:
        b_line = next(b_lines, None)
        line_number += 1
        if b_line is None:
            return _report(CastMismatch(
                line=line_number,
                kind="length",
                reason="cast b ended before cast a",
            ))

        if line_number == 1:
            a_header = _decode(decode_header, a_line, "a", line_number)
            b_header = _decode(decode_header, b_line, "b", line_number)
            field = find_header_mismatch(a_header, b_header, opts.header_fields)
            if field is not None:
                return _report(CastMismatch(
                    line=line_number,
                    kind="header",
                    reason=f"header field {field!r} differs",
                    expected=(a_header or {}).get(field),
                    actual=(b_header or {}).get(field),
                ))
            continue

        a_event = _decode(decode_event, a_line, "a", line_number)
        b_event = _decode(decode_event, b_line, "b", line_number)

        want_b = Event(
            time=last_b_time + (a_event.time - last_a_time),
            type=a_event.type,
            data=a_event.data,
        )
        if not events_equal(want_b, b_event, opts.time_tolerance):
            return _report(CastMismatch(
                line=line_number,
                kind="event",
                reason=_event_reason(want_b, b_event),
                expected=_event_summary(want_b),
                actual=_event_summary(b_event),
            ))

        last_a_time = a_event.time
        last_b_time = b_event.time

    if next(b_lines, None) is not None:
        return _report(CastMismatch(
            line=line_number + 1,
            kind="length",
            reason="cast a ended before cast b",
        ))

    logger.debug("casts are equal (%d lines)", line_number)
    return None


def equal(
    a: Stream,
    b: Stream,
    *options: Union[EqualOption, CompareOptions],
) -> bool:
    """Return True if two casts record the same session.

    See :func:`diff_casts` for arguments and errors.
    """
    return diff_casts(a, b, *options) is None


def _event_reason(want: Event, got: Event) -> str:
    if want.type != got.type:
        return f"event type differs: {want.type!r} != {got.type!r}"
    if want.data != got.data:
        return "event data differs"
    drift_ms = (got.time - want.time) / 1_000_000
    return f"event time drifted by {drift_ms:+.3f}ms"


def _report(mismatch: CastMismatch) -> CastMismatch:
    logger.debug("casts differ at %s", mismatch.describe())
    return mismatch

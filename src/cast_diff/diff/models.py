"""Data models for cast comparison: events, comparison options, mismatch reports."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

NANOSECONDS_PER_SECOND = 1_000_000_000

# A decoded header line. None means the line was JSON ``null``.
Header = Optional[Dict[str, Any]]

Duration = Union[timedelta, int]


def to_nanoseconds(value: Duration) -> int:
    """Convert a timedelta (or an int already in nanoseconds) to nanoseconds."""
    if isinstance(value, timedelta):
        return (value // timedelta(microseconds=1)) * 1000
    return int(value)


@dataclass(frozen=True)
class Event:
    """One timestamped record of a cast.

    ``time`` is the offset from the start of the recording in nanoseconds.
    """

    time: int
    type: str
    data: str

    @property
    def seconds(self) -> float:
        return self.time / NANOSECONDS_PER_SECOND

    def equal(self, other: Optional["Event"], tolerance: Duration = 0) -> bool:
        """Return True if ``other`` matches this event within ``tolerance``.

        Type and data must match exactly. ``other.time`` must fall inside the
        closed interval ``[self.time - tolerance, self.time + tolerance]``.
        """
        if other is None:
            return False
        if self.type != other.type or self.data != other.data:
            return False
        tol = to_nanoseconds(tolerance)
        if other.time < self.time - tol:
            return False
        if other.time > self.time + tol:
            return False
        return True


# ── Comparison options ──────────────────────────────────────────────────────


@dataclass
class _OptionAccumulator:
    """Mutable options collected before a comparison starts."""

    time_tolerance: int = 0
    header_fields: List[str] = field(default_factory=list)


EqualOption = Callable[[_OptionAccumulator], None]


def with_time_tolerance(tolerance: Duration) -> EqualOption:
    """Allow each event's timing to drift by up to ``tolerance``."""
    nanos = to_nanoseconds(tolerance)
    if nanos < 0:
        raise ValueError("time tolerance must be non-negative")

    def apply(opts: _OptionAccumulator) -> None:
        opts.time_tolerance = nanos

    return apply


def with_header_fields(*fields: str) -> EqualOption:
    """Compare the named header fields. Repeated options add up."""

    def apply(opts: _OptionAccumulator) -> None:
        opts.header_fields.extend(fields)

    return apply


@dataclass(frozen=True)
class CompareOptions:
    """Settled options for a single comparison.

    ``header_fields`` keeps the order the fields were first named in, without
    duplicates; header mismatches are reported in that order.
    """

    time_tolerance: int = 0
    header_fields: Tuple[str, ...] = ()

    @classmethod
    def build(cls, *options: EqualOption) -> "CompareOptions":
        acc = _OptionAccumulator()
        for option in options:
            option(acc)
        return cls(
            time_tolerance=acc.time_tolerance,
            header_fields=tuple(dict.fromkeys(acc.header_fields)),
        )


# ── Mismatch report ─────────────────────────────────────────────────────────


@dataclass(frozen=True)
class CastMismatch:
    """The first difference found between two casts."""

    line: int  # 1-based; line 1 is the header
    kind: str  # "header" | "event" | "length"
    reason: str
    expected: Any = None
    actual: Any = None

    def describe(self) -> str:
        return f"line {self.line}: {self.reason}"

"""Recording-format exceptions: malformed headers and event lines."""

from typing import Any, Dict, Optional

from .base import CastDiffError


class CastFormatError(CastDiffError):
    """Base class for errors in the content of a cast file."""
    pass


class DecodeError(CastFormatError):
    """Raised when a header or event line cannot be decoded.

    The decoder only knows the line it was handed, so ``stream`` and
    ``line_number`` are filled in by the engine via :meth:`at`.
    """

    def __init__(
        self,
        reason: str,
        stream: Optional[str] = None,
        line_number: Optional[int] = None,
    ):
        details: Dict[str, Any] = {}
        if stream is not None:
            details["stream"] = stream
        if line_number is not None:
            details["line"] = line_number

        super().__init__(f"Cannot decode cast line: {reason}", details=details)
        self.reason = reason
        self.stream = stream
        self.line_number = line_number

    def at(self, stream: str, line_number: int) -> "DecodeError":
        """Return a copy of this error located at ``stream``/``line_number``."""
        return DecodeError(self.reason, stream=stream, line_number=line_number)

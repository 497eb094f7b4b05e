"""Header comparison restricted to a chosen set of fields.

Cast headers carry machine-specific values (``timestamp``, ``env``, terminal
size) that rarely match between two recordings of the same session, so only
the fields a caller names are ever looked at.
"""

from typing import Any, Iterable, Mapping, Optional

from .models import Header


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def deep_equal(a: Any, b: Any) -> bool:
    """Structural equality over decoded JSON values.

    Values of different JSON kinds are never equal (``True`` is not ``1``).
    Numbers compare by value, so ``1`` equals ``1.0``.
    """
    if a is None or b is None:
        return a is None and b is None

    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool) and a == b

    if _is_number(a) or _is_number(b):
        return _is_number(a) and _is_number(b) and a == b

    if isinstance(a, str) or isinstance(b, str):
        return isinstance(a, str) and isinstance(b, str) and a == b

    if isinstance(a, Mapping) and isinstance(b, Mapping):
        if a.keys() != b.keys():
            return False
        return all(deep_equal(a[key], b[key]) for key in a)

    if isinstance(a, (list, tuple)) and isinstance(b, (list, tuple)):
        if len(a) != len(b):
            return False
        return all(deep_equal(x, y) for x, y in zip(a, b))

    return False


def find_header_mismatch(a: Header, b: Header, fields: Iterable[str]) -> Optional[str]:
    """Return the first field whose values differ between two headers, or None."""
    if a is None and b is None:
        return None
    if a is None:
        a = {}
    if b is None:
        b = {}
    for name in fields:
        if not deep_equal(a.get(name), b.get(name)):
            return name
    return None


def compare_headers(a: Header, b: Header, fields: Iterable[str]) -> bool:
    """Return True if ``a`` and ``b`` agree on every field in ``fields``.

    Absent headers count as empty. A field missing from a header compares as
    ``None``. Fields not listed are ignored, so an empty ``fields`` always
    compares equal.
    """
    return find_header_mismatch(a, b, fields) is None

"""
redis-store — Value Coercion

Redis hands values back as raw bytes, while fallbacks come from the caller
already typed. The typed accessors accept exactly those two representations;
anything else raises TypeMismatchError.
"""

import re
from typing import Any

from ..errors import TypeMismatchError

TRUE_STRINGS = frozenset({"1", "true"})
FALSE_STRINGS = frozenset({"0", "false"})

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


def decode_reply(raw: bytes) -> str | bytes:
    """Decode a GET reply as UTF-8; bytes that are not valid UTF-8 stay bytes."""
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        return raw


def _as_text(value: Any) -> Any:
    """Decode bytes where possible; other values pass through unchanged."""
    if isinstance(value, bytes):
        return decode_reply(value)
    return value


def to_bool(key: str, raw: Any) -> bool:
    """Interpret a stored "1"/"true" or "0"/"false"."""
    raw = _as_text(raw)
    if raw in TRUE_STRINGS:
        return True
    if raw in FALSE_STRINGS:
        return False
    raise TypeMismatchError(key, "bool", raw)


def to_int(key: str, raw: Any) -> int | None:
    """Parse a stored base-10 integer; None when it is not numeric."""
    raw = _as_text(raw)
    if isinstance(raw, bytes):
        # not valid UTF-8, so not a number either
        return None
    if not isinstance(raw, str):
        raise TypeMismatchError(key, "int", raw)
    if not _INT_PATTERN.fullmatch(raw):
        return None
    return int(raw, 10)


def to_string(key: str, raw: Any) -> str:
    raw = _as_text(raw)
    if not isinstance(raw, str):
        raise TypeMismatchError(key, "str", raw)
    return raw


def ensure_type(key: str, value: Any, expected: type) -> Any:
    """
    Check a resolved default against the accessor's type.

    bool is not accepted where int is expected.
    """
    if isinstance(value, expected) and not (expected is int and isinstance(value, bool)):
        return value
    raise TypeMismatchError(key, expected.__name__, value)


def encode_value(value: Any) -> Any:
    """
    Prepare a value for SET.

    Booleans are written as "1"/"0" so that to_bool reads them back. Everything
    else is handed to the client, which rejects unsupported types with DataError.
    """
    if isinstance(value, bool):
        return "1" if value else "0"
    return value

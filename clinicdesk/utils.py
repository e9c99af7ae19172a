import hashlib
from typing import Any, Iterable, List, Optional


# =========================
# Identifiers
# =========================
def parse_id(value: Any) -> Optional[int]:
    """Strictly parse a numeric id from a route segment or JSON value.

    Accepts ints and strings of ASCII digits. Returns None for anything else so
    callers can report the referenced record as missing.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        value = value.strip()
        if value.isascii() and value.isdigit():
            return int(value)
    return None


# =========================
# Collections
# =========================
def unique_in_order(values: Iterable[Any]) -> List[Any]:
    """Drop repeated values, keeping the first occurrence of each."""
    return list(dict.fromkeys(values))


def is_blank(value: Any) -> bool:
    """True for values a form would treat as not filled in."""
    return value is None or value == ""


def hash_identifier(value: str) -> str:
    return hashlib.sha256(value.encode()).hexdigest()

"""
Key functions for merging sorted text lines.

Each function maps one input line to the value the merge compares. Input
files must already be sorted by the same key.

Available by name (see get_key):
    line      raw line, lexicographic (no key function)
    numeric   first field as a number
    surt      SURT canonical form of the URL in the first field
    field:N   N-th whitespace separated field (0-based), lexicographic
"""

from typing import Callable, Optional

import surt


def _first_field(line: str) -> str:
    parts = line.split(None, 1)
    return parts[0] if parts else ""


def field_key(index: int, sep: Optional[str] = None) -> Callable[[str], str]:
    """
    Build a key function returning one field of a line.

    Args:
        index: 0-based field position
        sep: Field separator (default: any whitespace)

    Returns:
        callable: Key function; lines without that field map to ""
    """
    if index < 0:
        raise ValueError(f"Field index must be non-negative, got {index}")

    def key(line: str) -> str:
        fields = line.rstrip("\r\n").split(sep)
        return fields[index] if index < len(fields) else ""

    return key


def numeric_key(line: str) -> float:
    """
    Use the first field of a line as a number.

    Raises:
        ValueError: If the first field is not numeric
    """
    field = _first_field(line)
    try:
        return float(field)
    except ValueError:
        raise ValueError(f"Not a numeric line: {line.rstrip()!r}") from None


def surt_key(line: str) -> str:
    """
    SURT form of the URL in the first field of a line.

    Example:
        "http://www.arquivo.pt/page 20200101" -> "pt,arquivo)/page"
    """
    return surt.surt(_first_field(line))


KEYS = {
    "line": None,
    "numeric": numeric_key,
    "surt": surt_key,
}


def get_key(name: str) -> Optional[Callable[[str], object]]:
    """
    Resolve a key function from its command-line name.

    Args:
        name: "line", "numeric", "surt" or "field:N"

    Returns:
        callable or None: None means lines compare as they are

    Raises:
        ValueError: If the name is unknown or the field index is invalid
    """
    if name.startswith("field:"):
        index = name.split(":", 1)[1]
        if not index.isdigit():
            raise ValueError(f"Invalid field index in key {name!r}")
        return field_key(int(index))

    if name not in KEYS:
        raise ValueError(f"Unknown key: {name!r} (expected line, numeric, surt or field:N)")
    return KEYS[name]

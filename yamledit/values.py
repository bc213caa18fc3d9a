"""Value classification and comparison."""
from collections.abc import Mapping
from datetime import date
from typing import Any, Tuple

from .models import ValueKind

SCALAR_TYPES = (str, bool, int, float, date)
SEQUENCE_TYPES = (list, tuple)

def classify(value: Any) -> ValueKind:
    """Classify a value for update purposes.

    Scalars and sequences are simple and always replaced wholesale. Only
    mappings are structured and eligible for a line-preserving merge.

    Args:
        value: Desired or current value.

    Returns:
        ValueKind: The value's kind. Never raises.
    """
    if value is None:
        return ValueKind.DELETE
    if isinstance(value, SCALAR_TYPES + SEQUENCE_TYPES):
        return ValueKind.SIMPLE
    if isinstance(value, Mapping):
        return ValueKind.STRUCTURED
    return ValueKind.UNSUPPORTED

def key_matches(candidate: Any, key: Any) -> bool:
    """Whether a parsed mapping key is the update key ``key``.

    Parsed keys may be ints, floats or booleans (``8080:``, ``true:``); they
    are compared by the text they were written as.
    """
    if candidate == key and type(candidate) is type(key):
        return True
    if isinstance(candidate, bool):
        candidate = "true" if candidate else "false"
    return str(candidate) == str(key)

def find_key(mapping: Mapping, key: Any) -> Tuple[bool, Any]:
    """Look ``key`` up in a parsed mapping.

    An identically typed key wins over one that only reads the same.

    Returns:
        Tuple[bool, Any]: Whether the key is present, and its value.
    """
    matches = [(candidate, value) for candidate, value in mapping.items() if key_matches(candidate, key)]
    for candidate, value in matches:
        if type(candidate) is type(key):
            return True, value
    if matches:
        return True, matches[0][1]
    return False, None

def deep_equal(current: Any, desired: Any) -> bool:
    """Compare a parsed value with a desired value.

    Booleans never equal numbers, tuples compare like lists and any mapping
    compares like a dict. Mapping keys compare by their written form.
    """
    if isinstance(current, bool) or isinstance(desired, bool):
        return isinstance(current, bool) and isinstance(desired, bool) and current == desired
    if isinstance(current, Mapping) and isinstance(desired, Mapping):
        if len(current) != len(desired):
            return False
        for k, v in desired.items():
            found, existing = find_key(current, k)
            if not found or not deep_equal(existing, v):
                return False
        return True
    if isinstance(current, SEQUENCE_TYPES) and isinstance(desired, SEQUENCE_TYPES):
        if len(current) != len(desired):
            return False
        return all(deep_equal(c, d) for c, d in zip(current, desired))
    if isinstance(current, (int, float)) and isinstance(desired, (int, float)):
        return current == desired
    return type(current) is type(desired) and current == desired

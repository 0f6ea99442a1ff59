from __future__ import annotations

from flagpr.core.types import DocValue


def set_nested_value(document: dict[str, DocValue], dotted_key: str, value: DocValue) -> dict[str, DocValue]:
    """
    Set `value` at a dot-delimited path inside a mapping, in place.

    Every segment before the last must hold a mapping; anything else found
    there (missing, None, scalar, list) is replaced with a fresh empty dict.
    The last segment is overwritten unconditionally. Sibling keys are left
    untouched. Returns the same document for convenience.
    """
    keys = dotted_key.split(".")
    current = document

    for key in keys[:-1]:
        child = current.get(key)
        if not isinstance(child, dict):
            child = {}
            current[key] = child
        current = child

    current[keys[-1]] = value
    return document


def get_nested_value(document: dict[str, DocValue], dotted_key: str) -> DocValue:
    """Read a dot-delimited path. Raises KeyError when any segment is missing."""
    current: DocValue = document
    for key in dotted_key.split("."):
        if not isinstance(current, dict) or key not in current:
            raise KeyError(dotted_key)
        current = current[key]
    return current

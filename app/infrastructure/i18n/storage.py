"""Nested key-path helpers for plain dict structures.

A path is a sequence of keys, one per nesting level. Paths are taken
literally: dots inside a key have no special meaning.
"""

from typing import Any, Mapping, Sequence

_MISSING = object()


def _walk(data: Mapping, path: Sequence[Any]) -> Any:
    current: Any = data
    for key in path:
        if not isinstance(current, Mapping) or key not in current:
            return _MISSING
        current = current[key]
    return current


def exists(data: Mapping, path: Sequence[Any]) -> bool:
    """Check whether every key of ``path`` is present in ``data``.

    A present leaf counts even when its value is ``None``. An empty path
    never exists.
    """
    if not path:
        return False
    return _walk(data, path) is not _MISSING


def get(data: Mapping, path: Sequence[Any], default: Any = None) -> Any:
    """Return the value at ``path``, or ``default`` if any key is missing."""
    if not path:
        return default
    value = _walk(data, path)
    return default if value is _MISSING else value


def insert(data: Mapping, path: Sequence[Any], value: Any) -> dict:
    """Return a copy of ``data`` with ``value`` set at ``path``.

    Mappings along the path are shallow-copied and missing (or non-mapping)
    intermediate levels are replaced by new dicts; ``data`` itself is left
    untouched.

    Raises:
        ValueError: If ``path`` is empty.
    """
    if not path:
        raise ValueError("Cannot insert a value at an empty path")

    result = dict(data)
    current = result
    for key in path[:-1]:
        child = current.get(key)
        child = dict(child) if isinstance(child, Mapping) else {}
        current[key] = child
        current = child
    current[path[-1]] = value

    return result

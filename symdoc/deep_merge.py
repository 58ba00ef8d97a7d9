"""Logic for deep merging configuration dictionaries."""

from typing import Any

# Lists under these keys extend the defaults instead of replacing them.
ADDITIVE_LIST_KEYS = frozenset({"external_namespaces"})


def _union(base: list[Any], extra: list[Any]) -> list[Any]:
    return sorted({*base, *extra})


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Deep merge ``update`` over ``base`` without modifying either.

    Nested mappings merge key by key. Lists and scalars from ``update`` win,
    except lists under ``ADDITIVE_LIST_KEYS``, which become the sorted union of
    both sides.
    """
    result = dict(base)
    for key, value in update.items():
        current = result.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            result[key] = deep_merge(current, value)
        elif (
            key in ADDITIVE_LIST_KEYS
            and isinstance(current, list)
            and isinstance(value, list)
        ):
            result[key] = _union(current, value)
        else:
            result[key] = value
    return result

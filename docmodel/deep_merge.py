"""Logic for deep merging configuration dictionaries."""

from typing import Any

# Lists under these keys extend the base list instead of replacing it.
ADDITIVE_KEYS = {"search_directories"}


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries.

    - Objects are merged recursively.
    - Arrays in 'update' replace 'base' arrays, except for ``ADDITIVE_KEYS``
      where entries are appended in order, skipping duplicates.
    """
    result = base.copy()
    for key, value in update.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        elif (
            key in ADDITIVE_KEYS
            and isinstance(value, list)
            and isinstance(result.get(key), list)
        ):
            merged = list(result[key])
            merged.extend(v for v in value if v not in merged)
            result[key] = merged
        else:
            result[key] = value
    return result

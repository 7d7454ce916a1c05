"""Utility functions."""

from typing import Any


def deep_merge(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    """Layer one settings dictionary over another.

    Used to stack the global and local override files on top of the
    defaults: a project that only sets ``prettierConfig.semi`` keeps the
    default ``singleQuote`` and ``trailingComma``, while a scalar such as
    ``dir`` is replaced outright. Neither argument is modified.

    Examples:
        >>> deep_merge({"prettierConfig": {"semi": True}}, {"prettierConfig": {"tabWidth": 4}})
        {'prettierConfig': {'semi': True, 'tabWidth': 4}}

        >>> deep_merge({"type": "class"}, {"type": "functional"})
        {'type': 'functional'}
    """
    result = base.copy()

    for key, value in overlay.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result

"""Deep merge of a partial layout against a default layout.

Mappings merge recursively; lists and every other value in the override
replace the default wholesale. The result never shares mutable containers
with either argument.
"""

from __future__ import annotations

__all__ = ["merge_layouts"]

from collections.abc import Mapping
from copy import deepcopy
from typing import Any

from stackplot.errors import ConfigurationTypeError


def _is_mapping(value: Any) -> bool:
    return isinstance(value, Mapping)


def merge_layouts(override: Mapping[str, Any], default: Mapping[str, Any]) -> dict[str, Any]:
    """Complete ``override`` with the values of ``default`` it does not set.

    Args:
        override: The partial, user-supplied layout.
        default: The layout providing every missing value.

    Raises:
        ConfigurationTypeError: if either argument is not a mapping.

    Returns a new dict; neither argument is mutated.
    """
    if not _is_mapping(override) or not _is_mapping(default):
        raise ConfigurationTypeError(
            "Layouts can only be merged from mappings, got "
            f"{type(override).__name__} and {type(default).__name__}"
        )
    return _merge(override, default)


def _merge(override: Mapping[str, Any], default: Mapping[str, Any]) -> dict[str, Any]:
    merged: dict[str, Any] = {}
    for key, value in default.items():
        if key not in override:
            merged[key] = deepcopy(value)
    for key, value in override.items():
        if _is_mapping(value) and _is_mapping(default.get(key)):
            merged[key] = _merge(value, default[key])
        else:
            # Lists and type mismatches replace the default subtree.
            merged[key] = deepcopy(value)
    return merged

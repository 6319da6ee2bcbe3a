"""Dense index ordering shared by panel stacking and data-layer painting.

An order is a list of ids whose list position is the index: panels use it
for ``y_index`` (top to bottom) and data layers for ``z_index`` (back to
front). Inserting or removing an id shifts the later entries, so the
indices always stay a permutation of ``0..N-1``.
"""

from __future__ import annotations

__all__ = ["apply_order", "insert_ordered", "remove_ordered", "resolve_insert_index"]

import numbers
from collections.abc import Mapping, MutableMapping
from typing import Any

from stackplot.errors import ConfigurationValueError


def resolve_insert_index(size: int, position: int | None = None) -> int:
    """Resolve a requested insert position into a concrete index.

    ``None`` appends. Non-negative positions are clamped to ``[0, size]``.
    Negative positions count back from the end, so ``-1`` places the new
    entry just before the current last one; they never go below 0.

    Raises:
        ConfigurationValueError: ``position`` is not a whole number.
    """
    if position is None:
        return size
    whole = isinstance(position, numbers.Integral) or (
        isinstance(position, float) and position.is_integer()
    )
    if isinstance(position, bool) or not whole:
        raise ConfigurationValueError(
            f"Insert positions must be whole numbers, got {position!r}"
        )
    position = int(position)
    if position < 0:
        return max(size + position, 0)
    return min(position, size)


def insert_ordered(order: list[str], item_id: str, position: int | None = None) -> int:
    """Insert ``item_id`` into ``order`` and return the index it lands on."""
    index = resolve_insert_index(len(order), position)
    order.insert(index, item_id)
    return index


def remove_ordered(order: list[str], item_id: str) -> int:
    """Remove ``item_id`` from ``order`` and return the index it held."""
    index = order.index(item_id)
    del order[index]
    return index


def apply_order(
    order: list[str],
    layouts: Mapping[str, MutableMapping[str, Any]],
    key: str,
) -> None:
    """Write each id's index in ``order`` to ``layouts[id][key]``."""
    for index, item_id in enumerate(order):
        layouts[item_id][key] = index

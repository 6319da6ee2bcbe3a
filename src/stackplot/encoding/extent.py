"""Axis extents: the numeric ``[lower, upper]`` range an axis scales over.

The extent starts as the min/max of the configured field over the data,
then gets padded by proportional buffers, widened to any ``min_extent``,
and finally pinned to ``floor`` / ``ceiling``. Pinning runs last and
replaces the bound outright, so a floor of 0 pulls the lower bound down as
well as up, and a floor above the ceiling yields an inverted extent.
"""

from __future__ import annotations

__all__ = [
    "apply_axis_config",
    "axis_config",
    "get_axis_extent",
    "is_number",
    "numeric_values",
]

import math
import numbers
from collections.abc import Iterable, Mapping
from typing import Any

from stackplot.errors import InvalidAxisError
from stackplot.layout.constants import AXIS_IDS


def axis_config(layout: Mapping[str, Any], axis: Any) -> Mapping[str, Any]:
    """Return the ``<axis>_axis`` config of a data-layer layout.

    Raises:
        InvalidAxisError: if ``axis`` is not a known axis id or the layout
            configures no field for it.
    """
    if not isinstance(axis, str) or axis not in AXIS_IDS:
        raise InvalidAxisError(
            f"Invalid axis identifier {axis!r}; expected one of {', '.join(AXIS_IDS)}"
        )
    config = layout.get(f"{axis}_axis")
    if not isinstance(config, Mapping) or config.get("field") is None:
        raise InvalidAxisError(f"Axis '{axis}' has no configured field")
    return config


def is_number(value: Any) -> bool:
    """True for real, non-NaN numbers; bools and numeric strings are not numbers."""
    return (
        isinstance(value, numbers.Real)
        and not isinstance(value, bool)
        and not math.isnan(value)
    )


def numeric_values(data: Iterable[Mapping[str, Any]], field: str) -> list[float]:
    """Real, non-NaN values of ``field`` across ``data``; anything else is skipped."""
    values = []
    for record in data:
        value = record.get(field) if isinstance(record, Mapping) else None
        if is_number(value):
            values.append(value)
    return values


def get_axis_extent(
    layout: Mapping[str, Any],
    data: Iterable[Mapping[str, Any]],
    axis: Any,
) -> list[float | None]:
    """Compute the extent of ``axis`` for a data layer.

    Args:
        layout: The (merged) data-layer layout holding ``<axis>_axis``.
        data: The layer's records.
        axis: One of ``"x"``, ``"y1"``, ``"y2"``.

    Returns ``[lower, upper]``, or ``[None, None]`` when the field holds no
    numeric values.
    """
    config = axis_config(layout, axis)
    return apply_axis_config(numeric_values(data, config["field"]), config)


def apply_axis_config(values: list[float], config: Mapping[str, Any]) -> list[float | None]:
    """Turn raw axis values into an extent using the buffers and bounds in ``config``."""
    if not values:
        return [None, None]

    lower, upper = min(values), max(values)
    span = upper - lower

    lower_buffer = config.get("lower_buffer")
    if is_number(lower_buffer):
        lower -= span * lower_buffer
    upper_buffer = config.get("upper_buffer")
    if is_number(upper_buffer):
        upper += span * upper_buffer

    min_extent = config.get("min_extent")
    if isinstance(min_extent, (list, tuple)) and len(min_extent) == 2:
        if is_number(min_extent[0]):
            lower = min(lower, min_extent[0])
        if is_number(min_extent[1]):
            upper = max(upper, min_extent[1])

    floor = config.get("floor")
    if is_number(floor):
        lower = floor
    ceiling = config.get("ceiling")
    if is_number(ceiling):
        upper = ceiling

    return [lower, upper]

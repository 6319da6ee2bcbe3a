"""Tick generation for numeric axes."""

from __future__ import annotations

__all__ = ["pretty_ticks"]

import math
from collections.abc import Sequence

from stackplot.layout.constants import CLIP_RANGES, DEFAULT_TICK_COUNT


def pretty_ticks(
    extent: Sequence[float],
    clip_range: str = "neither",
    target_tick_count: int | None = DEFAULT_TICK_COUNT,
) -> list[float]:
    """Return evenly spaced, round-numbered ticks covering ``extent``.

    The tick unit is 1, 2, 5 or 10 times a power of ten, picked so that
    roughly ``target_tick_count`` ticks span the extent. The first tick is
    at or below the lower bound and the last at or above the upper bound;
    ``clip_range`` ("low", "high", "both" or "neither") drops whichever of
    those falls outside the extent.
    """
    try:
        target = int(target_tick_count) if target_tick_count is not None else DEFAULT_TICK_COUNT
    except (TypeError, ValueError):
        target = DEFAULT_TICK_COUNT
    target = max(target, 1)
    if clip_range not in CLIP_RANGES:
        clip_range = "neither"

    low, high = extent[0], extent[1]
    span = abs(low - high)
    if span == 0:
        return [low]

    min_n = target / 3
    shrink_sml = 0.75
    high_u_bias = 1.5
    u5_bias = 0.5 + 1.5 * high_u_bias

    cell = span / target
    if math.log10(span) < -2:
        cell = (span * shrink_sml) / min_n

    base = 10 ** math.floor(math.log10(cell))
    decimals = 0
    if 0 < base < 1:
        decimals = abs(round(math.log10(base)))

    unit = base
    if (2 * base) - cell < high_u_bias * (cell - unit):
        unit = 2 * base
        if (5 * base) - cell < u5_bias * (cell - unit):
            unit = 5 * base
            if (10 * base) - cell < high_u_bias * (cell - unit):
                unit = 10 * base

    ticks: list[float] = []
    tick = round(math.floor(low / unit) * unit, decimals)
    while tick < high:
        ticks.append(tick)
        tick += unit
        if decimals > 0:
            tick = round(tick, decimals)
    ticks.append(tick)

    if clip_range in ("low", "both") and ticks[0] < low:
        ticks = ticks[1:]
    if clip_range in ("high", "both") and ticks[-1] > high:
        ticks = ticks[:-1]
    return ticks

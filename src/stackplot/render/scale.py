"""Linear mapping from data space to pixel space."""

from __future__ import annotations

__all__ = ["linear_scale"]

from collections.abc import Sequence
from typing import Callable


def linear_scale(
    domain: Sequence[float | None] | None,
    pixel_range: Sequence[float],
) -> Callable[[float], float]:
    """Return a function mapping ``domain`` linearly onto ``pixel_range``.

    An unknown (``None``) or zero-width domain maps everything to the middle
    of the range.
    """
    r0, r1 = pixel_range[0], pixel_range[1]
    if not domain or domain[0] is None or domain[1] is None or domain[0] == domain[1]:
        middle = (r0 + r1) / 2
        return lambda _value: middle
    d0, d1 = domain[0], domain[1]
    ratio = (r1 - r0) / (d1 - d0)
    return lambda value: r0 + (value - d0) * ratio

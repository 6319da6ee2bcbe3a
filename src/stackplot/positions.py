"""Genomic position formatting and parsing.

Positions are integers (base pairs); strings may use ``,`` separators and
``K``/``M``/``G`` suffixes with an optional trailing ``b``.
"""

from __future__ import annotations

__all__ = ["parse_position_query", "position_int_to_string", "position_string_to_int"]

import math
import re

_EXP_SYMBOLS = {0: "", 3: "K", 6: "M", 9: "G"}
_SUFFIX_PATTERN = re.compile(r"([KMG])B*$")
_MULTIPLIERS = {"K": 1e3, "M": 1e6, "G": 1e9}

_POSITION = r"[\d,.]+[kmgbKMGB]*"
_CHR_POS_OFFSET = re.compile(rf"^(\w+):({_POSITION})([-+])({_POSITION})$")
_CHR_POS = re.compile(rf"^(\w+):({_POSITION})$")


def position_int_to_string(position: float, exp: int | None = None, suffix: bool = False) -> str:
    """Format ``position`` scaled by ``10**exp``.

    Without ``exp`` the largest of 0, 3, 6, 9 not exceeding the position's
    magnitude is used. ``suffix`` appends the unit (``b``, ``Kb``, ``Mb``,
    ``Gb``).
    """
    log = math.log10(position) if position > 0 else 0.0
    if exp is None:
        exp = int(min(max(log // 3 * 3, 0), 9))
    places_exp = exp - math.floor(round(log, exp + 3))
    min_exp = min(max(exp, 0), 2)
    places = int(min(max(places_exp, min_exp), 12))
    text = f"{position / 10 ** exp:.{places}f}"
    if suffix and exp in _EXP_SYMBOLS:
        text += f" {_EXP_SYMBOLS[exp]}b"
    return text


def position_string_to_int(text: str) -> int:
    """Parse ``"5Mb"``, ``"1.4Kb"`` or ``"73,054,882"`` into an integer position."""
    value = text.upper().replace(",", "")
    multiplier = 1.0
    match = _SUFFIX_PATTERN.search(value)
    if match:
        multiplier = _MULTIPLIERS[match.group(1)]
        value = value[: match.start()]
    return int(round(float(value) * multiplier))


def parse_position_query(query: str) -> dict[str, str | int] | None:
    """Parse ``chr:start-end``, ``chr:center+offset`` or ``chr:position``.

    Returns ``{"chr", "start", "end"}`` for ranges, ``{"chr", "position"}``
    for a single position, or ``None`` if the query matches neither.
    """
    match = _CHR_POS_OFFSET.match(query)
    if match:
        chrom, first, sign, second = match.groups()
        if sign == "+":
            center = position_string_to_int(first)
            offset = position_string_to_int(second)
            return {"chr": chrom, "start": center - offset, "end": center + offset}
        return {
            "chr": chrom,
            "start": position_string_to_int(first),
            "end": position_string_to_int(second),
        }
    match = _CHR_POS.match(query)
    if match:
        return {"chr": match.group(1), "position": position_string_to_int(match.group(2))}
    return None

"""Scalable parameters: layout values that resolve per data record.

A scalable parameter is one of:

* a literal (string, number, bool, ``None``), returned as-is;
* a descriptor ``{"scale_function": name, "field": f, "parameters": {...}}``,
  evaluated by calling the named scale function on ``datum[f]``;
* a sequence (list or tuple) of the above, tried left to right until one
  yields a value.

Scale functions take ``(parameters, value)`` and return the encoded value,
or ``None`` when no branch applies.
"""

from __future__ import annotations

__all__ = [
    "ScaleFunction",
    "ScaleFunctionRegistry",
    "categorical_bin",
    "default_scale_functions",
    "if_equal",
    "interpolate",
    "numerical_bin",
    "resolve_scalable_parameter",
]

from collections.abc import Mapping, Sequence
from typing import Any, Callable

from stackplot.encoding.extent import is_number
from stackplot.errors import ConfigurationTypeError, UnknownScaleFunctionError
from stackplot.registry import Registry

ScaleFunction = Callable[[Mapping[str, Any], Any], Any]


class ScaleFunctionRegistry(Registry[ScaleFunction]):
    """Catalog of named scale functions."""

    kind = "scale function"
    not_found_error = UnknownScaleFunctionError

    def _validate(self, name: str, entry: ScaleFunction) -> None:
        if not callable(entry):
            raise ConfigurationTypeError(
                f"scale function '{name}' must be callable, got {type(entry).__name__}"
            )


def resolve_scalable_parameter(
    spec: Any,
    datum: Mapping[str, Any] | None,
    registry: ScaleFunctionRegistry,
) -> Any:
    """Resolve ``spec`` against one data record.

    Raises:
        UnknownScaleFunctionError: a descriptor names an unregistered function.
        ConfigurationTypeError: a mapping lacks ``scale_function``.
    """
    if isinstance(spec, Sequence) and not isinstance(spec, (str, bytes)):
        for option in spec:
            value = resolve_scalable_parameter(option, datum, registry)
            if value is not None:
                return value
        return None
    if isinstance(spec, Mapping):
        name = spec.get("scale_function")
        if name is None:
            raise ConfigurationTypeError(
                "scalable parameter descriptors need a 'scale_function' key"
            )
        func = registry.get(name)
        field = spec.get("field")
        value = datum.get(field) if (datum and field is not None) else None
        return func(spec.get("parameters") or {}, value)
    return spec


# ---------------------------------------------------------------------------
# Built-in scale functions
# ---------------------------------------------------------------------------


def if_equal(parameters: Mapping[str, Any], value: Any) -> Any:
    """``then`` when ``value`` equals ``field_value``, else ``else`` (default None)."""
    if value is not None and value == parameters.get("field_value"):
        return parameters.get("then")
    return parameters.get("else")


def categorical_bin(parameters: Mapping[str, Any], value: Any) -> Any:
    """Look ``value`` up in ``categories`` and return the parallel ``values`` entry."""
    categories = list(parameters.get("categories") or [])
    values = list(parameters.get("values") or [])
    if value is None or value not in categories:
        return parameters.get("null_value")
    idx = categories.index(value)
    return values[idx] if idx < len(values) else parameters.get("null_value")


def numerical_bin(parameters: Mapping[str, Any], value: Any) -> Any:
    """Bucket a number by ascending ``breaks``; values below the first break use bin 0."""
    breaks = list(parameters.get("breaks") or [])
    values = list(parameters.get("values") or [])
    if not is_number(value) or not breaks:
        return parameters.get("null_value")
    idx = 0
    for i, brk in enumerate(breaks):
        if value >= brk:
            idx = i
    return values[idx] if idx < len(values) else parameters.get("null_value")


def _parse_hex_color(value: Any) -> tuple[int, int, int] | None:
    if not isinstance(value, str) or len(value) != 7 or not value.startswith("#"):
        return None
    try:
        return tuple(int(value[i:i + 2], 16) for i in (1, 3, 5))  # type: ignore[return-value]
    except ValueError:
        return None


def _lerp(low: Any, high: Any, t: float) -> Any:
    if is_number(low) and is_number(high):
        return low + (high - low) * t
    low_rgb, high_rgb = _parse_hex_color(low), _parse_hex_color(high)
    if low_rgb is not None and high_rgb is not None:
        channels = (round(a + (b - a) * t) for a, b in zip(low_rgb, high_rgb))
        return "#" + "".join(f"{c:02x}" for c in channels)
    return None


def interpolate(parameters: Mapping[str, Any], value: Any) -> Any:
    """Linearly interpolate between ``values`` over ascending ``breaks``.

    Numbers interpolate arithmetically and ``#rrggbb`` strings per channel.
    Inputs outside the break range clamp to the first / last value.
    """
    breaks = list(parameters.get("breaks") or [])
    values = list(parameters.get("values") or [])
    null_value = parameters.get("null_value")
    if len(breaks) < 2 or len(breaks) != len(values) or not is_number(value):
        return null_value
    if value <= breaks[0]:
        return values[0]
    if value >= breaks[-1]:
        return values[-1]
    for upper in range(1, len(breaks)):
        if breaks[upper - 1] <= value <= breaks[upper]:
            span = breaks[upper] - breaks[upper - 1]
            if span <= 0:
                return null_value
            t = (value - breaks[upper - 1]) / span
            result = _lerp(values[upper - 1], values[upper], t)
            return null_value if result is None else result
    return null_value


BUILTIN_SCALE_FUNCTIONS: tuple[tuple[str, ScaleFunction], ...] = (
    ("if", if_equal),
    ("numerical_bin", numerical_bin),
    ("categorical_bin", categorical_bin),
    ("interpolate", interpolate),
)


def default_scale_functions() -> ScaleFunctionRegistry:
    """Build a fresh registry holding the built-in scale functions."""
    registry = ScaleFunctionRegistry()
    for name, func in BUILTIN_SCALE_FUNCTIONS:
        registry.add(name, func)
    return registry

"""Per-datum visual encoding: scalable parameters, axis extents, predicates."""

from stackplot.encoding.extent import get_axis_extent
from stackplot.encoding.predicates import evaluate_predicate
from stackplot.encoding.scales import (
    ScaleFunctionRegistry,
    default_scale_functions,
    resolve_scalable_parameter,
)

__all__ = [
    "ScaleFunctionRegistry",
    "default_scale_functions",
    "evaluate_predicate",
    "get_axis_extent",
    "resolve_scalable_parameter",
]

"""Per-chart catalogs of scale functions and data-layer kinds."""

from __future__ import annotations

__all__ = ["ChartContext"]

from dataclasses import dataclass, field

from stackplot.data_layers import DataLayerRegistry, default_data_layers
from stackplot.encoding.scales import ScaleFunctionRegistry, default_scale_functions


@dataclass
class ChartContext:
    """Registries a plot resolves layer ``type`` and ``scale_function`` names against.

    Each plot gets its own context unless one is passed in, so registering a
    custom kind or scale function never leaks into unrelated charts.
    """

    scale_functions: ScaleFunctionRegistry = field(default_factory=default_scale_functions)
    data_layers: DataLayerRegistry = field(default_factory=default_data_layers)

    @classmethod
    def default(cls) -> ChartContext:
        return cls()

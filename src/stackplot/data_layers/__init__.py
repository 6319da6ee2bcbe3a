"""Data-layer kinds and the registry that builds layers from layouts."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from stackplot.data_layers.base import DataLayer, DataLayerKind, Tooltip
from stackplot.data_layers.genes import GenesKind
from stackplot.data_layers.intervals import IntervalsKind
from stackplot.data_layers.line import LineKind
from stackplot.data_layers.scatter import ScatterKind
from stackplot.encoding.scales import ScaleFunctionRegistry
from stackplot.errors import ConfigurationTypeError, ConfigurationValueError
from stackplot.registry import Registry

if TYPE_CHECKING:
    from stackplot.layout.panel import Panel


class DataLayerRegistry(Registry[DataLayerKind]):
    """Catalog of data-layer kinds, keyed by the layout ``type`` they serve."""

    kind = "data layer"

    def _validate(self, name: str, entry: DataLayerKind) -> None:
        if not isinstance(entry, DataLayerKind):
            raise ConfigurationTypeError(
                f"data layer '{name}' must be a DataLayerKind instance, got {type(entry).__name__}"
            )

    def create(
        self,
        name: str,
        layout: Mapping[str, Any],
        parent: Panel | None = None,
        scale_functions: ScaleFunctionRegistry | None = None,
    ) -> DataLayer:
        """Build a layer of kind ``name`` from a partial ``layout``."""
        kind = self.get(name)
        if not isinstance(layout, Mapping):
            raise ConfigurationTypeError(
                f"Data layer layouts must be mappings, got {type(layout).__name__}"
            )
        if layout.get("id") is None:
            raise ConfigurationValueError(f"Cannot create {name} data layer without an 'id'")
        return DataLayer(kind, layout, parent=parent, scale_functions=scale_functions)


BUILTIN_DATA_LAYERS: tuple[DataLayerKind, ...] = (
    ScatterKind(),
    LineKind(),
    GenesKind(),
    IntervalsKind(),
)


def default_data_layers() -> DataLayerRegistry:
    """Build a fresh registry holding the built-in kinds."""
    registry = DataLayerRegistry()
    for kind in BUILTIN_DATA_LAYERS:
        registry.add(kind.name, kind)
    return registry


__all__ = [
    "BUILTIN_DATA_LAYERS",
    "DataLayer",
    "DataLayerKind",
    "DataLayerRegistry",
    "GenesKind",
    "IntervalsKind",
    "LineKind",
    "ScatterKind",
    "Tooltip",
    "default_data_layers",
]

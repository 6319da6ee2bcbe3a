"""Panels: one horizontal band of the stacked chart.

A panel owns its data layers and their paint order (``z_index``), and the
union of their axis extents. Its pixel geometry is assigned by the parent
``Plot``.
"""

from __future__ import annotations

__all__ = ["Panel"]

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from stackplot.axes import pretty_ticks
from stackplot.context import ChartContext
from stackplot.data_layers import DataLayer
from stackplot.errors import (
    ConfigurationTypeError,
    ConfigurationValueError,
    DuplicateIdError,
    InvalidAxisError,
    NotFoundError,
)
from stackplot.layout.constants import AXIS_IDS, DEFAULT_TICK_COUNT
from stackplot.layout.merge import merge_layouts
from stackplot.layout.ordering import (
    apply_order,
    insert_ordered,
    remove_ordered,
    resolve_insert_index,
)
from stackplot.layouts import PANEL_DEFAULT_LAYOUT

if TYPE_CHECKING:
    from stackplot.layout.geometry import Plot

logger = logging.getLogger(__name__)


class Panel:
    """A panel inside a plot."""

    def __init__(self, layout: Mapping[str, Any], parent: Plot | None = None) -> None:
        if not isinstance(layout, Mapping):
            raise ConfigurationTypeError(
                f"Panel layouts must be mappings, got {type(layout).__name__}"
            )
        if layout.get("id") is None:
            raise ConfigurationValueError("Panel layouts require an 'id'")

        # Authored proportions stay fixed; the rest are derived on relayout.
        self.authored_proportional_height: float | None = layout.get("proportional_height")
        self.authored_proportional_width: float | None = layout.get("proportional_width")

        self.layout = merge_layouts(layout, PANEL_DEFAULT_LAYOUT)
        self.id: str = self.layout["id"]
        self.parent = parent
        self.context = parent.context if parent is not None else ChartContext.default()
        self.layout_idx: int | None = None

        self.data_layers: dict[str, DataLayer] = {}
        self.data_layer_ids_by_z_index: list[str] = []
        self.x_extent: list[float] | None = None
        self.y1_extent: list[float] | None = None
        self.y2_extent: list[float] | None = None

        layer_layouts = self.layout["data_layers"]
        self.layout["data_layers"] = []
        for layer_layout in layer_layouts:
            self.add_data_layer(layer_layout)

    def __repr__(self) -> str:
        return f"Panel(id={self.id!r}, layers={self.data_layer_ids_by_z_index!r})"

    # -----------------------------------------------------------------------
    # Data layers
    # -----------------------------------------------------------------------

    def add_data_layer(self, layout: Mapping[str, Any]) -> DataLayer:
        """Create a data layer from ``layout`` and insert it in paint order.

        ``layout["type"]`` names a kind registered in the plot's context;
        ``layout["z_index"]`` (optional) places it in the paint order.
        """
        if not isinstance(layout, Mapping):
            raise ConfigurationTypeError(
                f"Data layer layouts must be mappings, got {type(layout).__name__}"
            )
        layer_id = layout.get("id")
        if layer_id is None:
            raise ConfigurationValueError(f"Data layer in panel '{self.id}' requires an 'id'")
        if layer_id in self.data_layers:
            raise DuplicateIdError(f"Data layer '{layer_id}' already exists in panel '{self.id}'")
        kind_name = layout.get("type")
        if kind_name is None:
            raise ConfigurationValueError(f"Data layer '{layer_id}' requires a 'type'")
        index = resolve_insert_index(len(self.data_layer_ids_by_z_index), layout.get("z_index"))

        layer = self.context.data_layers.create(
            kind_name,
            layout,
            parent=self,
            scale_functions=self.context.scale_functions,
        )
        insert_ordered(self.data_layer_ids_by_z_index, layer.id, index)
        self.data_layers[layer.id] = layer
        self.layout["data_layers"].append(layer.layout)
        self._apply_z_order()
        if self.parent is not None:
            self.parent.state.setdefault(layer.state_id, {"highlighted": [], "selected": []})
        logger.debug("Panel '%s': added %s layer '%s'", self.id, kind_name, layer.id)
        return layer

    def remove_data_layer(self, layer_id: str) -> Panel:
        if layer_id not in self.data_layers:
            raise NotFoundError(f"Data layer '{layer_id}' not found in panel '{self.id}'")
        layer = self.data_layers.pop(layer_id)
        remove_ordered(self.data_layer_ids_by_z_index, layer_id)
        self.layout["data_layers"] = [
            entry for entry in self.layout["data_layers"] if entry is not layer.layout
        ]
        if self.parent is not None:
            self.parent.state.pop(layer.state_id, None)
        self._apply_z_order()
        layer.parent = None
        logger.debug("Panel '%s': removed layer '%s'", self.id, layer_id)
        return self

    def _apply_z_order(self) -> None:
        apply_order(
            self.data_layer_ids_by_z_index,
            {layer_id: layer.layout for layer_id, layer in self.data_layers.items()},
            "z_index",
        )

    # -----------------------------------------------------------------------
    # Extents and ticks
    # -----------------------------------------------------------------------

    @property
    def extents(self) -> dict[str, list[float] | None]:
        return {"x": self.x_extent, "y1": self.y1_extent, "y2": self.y2_extent}

    def generate_extents(self) -> dict[str, list[float] | None]:
        """Union the coupled axis extents of every layer into the panel's extents."""
        for axis in AXIS_IDS:
            extent: list[float] | None = None
            for layer_id in self.data_layer_ids_by_z_index:
                layer = self.data_layers[layer_id]
                config = layer.layout.get(f"{axis}_axis")
                if not isinstance(config, Mapping) or config.get("field") is None:
                    continue
                if config.get("decoupled"):
                    continue
                lower, upper = layer.get_axis_extent(axis)
                if lower is None or upper is None:
                    continue
                if extent is None:
                    extent = [lower, upper]
                else:
                    extent = [min(extent[0], lower), max(extent[1], upper)]
            setattr(self, f"{axis}_extent", extent)
        return self.extents

    def axis_ticks(self, axis: str) -> list[float]:
        """Tick positions for ``axis`` over its current extent (empty if unknown)."""
        if axis not in AXIS_IDS:
            raise InvalidAxisError(
                f"Invalid axis identifier {axis!r}; expected one of {', '.join(AXIS_IDS)}"
            )
        extent = self.extents[axis]
        if extent is None:
            return []
        config = self.layout["axes"].get(axis) or {}
        return pretty_ticks(
            extent,
            config.get("clip_range", "neither"),
            config.get("tick_count", DEFAULT_TICK_COUNT),
        )

    # -----------------------------------------------------------------------
    # Geometry
    # -----------------------------------------------------------------------

    def inner_bounds(self) -> dict[str, float]:
        """Drawing area inside the margins, in panel coordinates."""
        margin = self.layout["margin"]
        x0 = margin.get("left", 0)
        y0 = margin.get("top", 0)
        x1 = max(self.layout["width"] - margin.get("right", 0), x0)
        y1 = max(self.layout["height"] - margin.get("bottom", 0), y0)
        return {"x0": x0, "x1": x1, "y0": y0, "y1": y1}

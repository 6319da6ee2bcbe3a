"""Intervals data layer: labelled spans grouped onto one row per category."""

from __future__ import annotations

from typing import Any

import drawsvg as draw

from stackplot.data_layers.base import DataLayer, DataLayerKind, span_axis_extent
from stackplot.encoding.extent import numeric_values
from stackplot.layout.constants import TRACK_GAP, TRACK_HEIGHT


class IntervalsKind(DataLayerKind):
    name = "intervals"
    default_layout = {
        "id_field": "id",
        "track_field": "state_name",
        "color": "#5cb85c",
        "track_height": TRACK_HEIGHT,
        "track_gap": TRACK_GAP,
        "x_axis": {"field": "start", "end_field": "end"},
    }

    def get_axis_extent(self, layer: DataLayer, axis: Any) -> list[float | None]:
        return span_axis_extent(layer, axis)

    def categories(self, layer: DataLayer) -> list[Any]:
        """Distinct ``track_field`` values in order of first appearance."""
        field = layer.layout.get("track_field")
        seen: list[Any] = []
        for datum in layer.data:
            category = datum.get(field)
            if category not in seen:
                seen.append(category)
        return seen

    def render(self, layer: DataLayer) -> draw.Group:
        group = draw.Group(id=layer.get_base_id(), class_="stackplot-data_layer stackplot-intervals")
        config = layer.layout.get("x_axis") or {}
        start_field = config.get("field")
        if start_field is None or not layer.data:
            return group
        end_field = config.get("end_field") or start_field

        x_scale, _ = layer.scales()
        bounds = layer.parent.inner_bounds()
        track_height = layer.layout["track_height"]
        rows = {category: row for row, category in enumerate(self.categories(layer))}

        for datum in layer.data:
            starts = numeric_values([datum], start_field)
            ends = numeric_values([datum], end_field)
            if not starts or not ends:
                continue
            x0, x1 = sorted((x_scale(starts[0]), x_scale(ends[0])))
            top = bounds["y0"] + rows[datum.get(layer.layout["track_field"])] * (
                track_height + layer.layout["track_gap"]
            )
            color = layer.resolve_scalable_parameter(layer.layout.get("color"), datum)
            attrs = {
                "fill": color or self.default_layout["color"],
                "class_": layer.element_classes(datum, "stackplot-interval"),
            }
            if layer.has_element_id(datum):
                attrs["id"] = layer.get_element_id(datum)
            group.append(draw.Rectangle(x0, top, max(x1 - x0, 1.0), track_height, **attrs))
        return group

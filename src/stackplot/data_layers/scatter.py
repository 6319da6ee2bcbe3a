"""Scatter data layer: one point per record."""

from __future__ import annotations

import math

import drawsvg as draw

from stackplot.data_layers.base import DataLayer, DataLayerKind
from stackplot.encoding.extent import is_number
from stackplot.layout.constants import POINT_SIZE

POINT_SHAPES: tuple[str, ...] = ("circle", "square", "diamond")


class ScatterKind(DataLayerKind):
    name = "scatter"
    default_layout = {
        "point_size": POINT_SIZE,
        "point_shape": "circle",
        "color": "#888888",
        "fill_opacity": 1,
        "id_field": "id",
    }

    def render(self, layer: DataLayer) -> draw.Group:
        group = draw.Group(id=layer.get_base_id(), class_="stackplot-data_layer stackplot-scatter")
        x_field = layer.axis_field("x")
        y_axis = layer.y_axis_id()
        if x_field is None or y_axis is None:
            return group
        y_field = layer.axis_field(y_axis)
        x_scale, y_scale = layer.scales()

        for datum in layer.data:
            x, y = datum.get(x_field), datum.get(y_field)
            if not (is_number(x) and is_number(y)):
                continue
            size = layer.resolve_scalable_parameter(layer.layout.get("point_size"), datum)
            if not is_number(size) or size <= 0:
                size = POINT_SIZE
            shape = layer.resolve_scalable_parameter(layer.layout.get("point_shape"), datum)
            color = layer.resolve_scalable_parameter(layer.layout.get("color"), datum)
            attrs = {
                "fill": color or self.default_layout["color"],
                "fill_opacity": layer.layout.get("fill_opacity", 1),
                "class_": layer.element_classes(datum, "stackplot-point"),
            }
            if layer.has_element_id(datum):
                attrs["id"] = layer.get_element_id(datum)
            group.append(_point(shape, x_scale(x), y_scale(y), size, attrs))
        return group


def _point(shape, cx: float, cy: float, size: float, attrs: dict) -> draw.DrawingElement:
    """A mark of area ``size`` centred on ``(cx, cy)``."""
    if shape == "square":
        side = math.sqrt(size)
        return draw.Rectangle(cx - side / 2, cy - side / 2, side, side, **attrs)
    if shape == "diamond":
        half = math.sqrt(size / 2)
        return draw.Lines(cx, cy - half, cx + half, cy, cx, cy + half, cx - half, cy, close=True, **attrs)
    return draw.Circle(cx, cy, math.sqrt(size / math.pi), **attrs)

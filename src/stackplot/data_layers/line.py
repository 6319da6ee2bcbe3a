"""Line data layer: records joined in x order by a single path."""

from __future__ import annotations

import drawsvg as draw

from stackplot.data_layers.base import DataLayer, DataLayerKind
from stackplot.encoding.extent import numeric_values
from stackplot.layout.constants import LINE_WIDTH


class LineKind(DataLayerKind):
    name = "line"
    default_layout = {
        "style": {
            "fill": "none",
            "stroke": "#333333",
            "stroke-width": LINE_WIDTH,
        },
        "interpolate": "linear",
    }

    def render(self, layer: DataLayer) -> draw.Group:
        group = draw.Group(id=layer.get_base_id(), class_="stackplot-data_layer stackplot-line")
        x_field = layer.axis_field("x")
        y_axis = layer.y_axis_id()
        if x_field is None or y_axis is None:
            return group
        y_field = layer.axis_field(y_axis)

        points = sorted(
            (datum[x_field], datum[y_field])
            for datum in layer.data
            if numeric_values([datum], x_field) and numeric_values([datum], y_field)
        )
        if len(points) < 2:
            return group

        x_scale, y_scale = layer.scales()
        style = {key.replace("-", "_"): value for key, value in layer.layout.get("style", {}).items()}
        path = draw.Path(class_="stackplot-line-path", **style)
        first_x, first_y = points[0]
        path.M(x_scale(first_x), y_scale(first_y))
        for x, y in points[1:]:
            if layer.layout.get("interpolate") == "step":
                path.H(x_scale(x))
            path.L(x_scale(x), y_scale(y))
        group.append(path)
        return group

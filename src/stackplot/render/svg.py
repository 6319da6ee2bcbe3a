"""SVG generation for stacked-panel plots using drawsvg."""

from __future__ import annotations

__all__ = ["render_svg"]

import logging
from typing import TYPE_CHECKING

import drawsvg as draw

from stackplot.positions import position_int_to_string
from stackplot.render.scale import linear_scale
from stackplot.render.style import DEFAULT_STYLE, Style

if TYPE_CHECKING:
    from stackplot.layout.geometry import Plot
    from stackplot.layout.panel import Panel

logger = logging.getLogger(__name__)


def render_svg(plot: Plot, style: Style = DEFAULT_STYLE) -> str:
    """Render a plot to an SVG string."""
    if not plot.panels:
        return '<svg xmlns="http://www.w3.org/2000/svg"></svg>'

    width, height = plot.layout["width"], plot.layout["height"]
    logger.debug("Rendering plot '%s' at %sx%s with %d panels", plot.id, width, height, len(plot.panels))
    d = draw.Drawing(width, height, id=plot.id)

    # Background
    d.append(draw.Rectangle(0, 0, width, height, fill=style.background_color))

    for panel_id in plot.panel_ids_by_y_index:
        _render_panel(d, plot.panels[panel_id], style)

    return d.as_svg()


def _render_panel(d: draw.Drawing, panel: Panel, style: Style) -> None:
    """Render one panel, its data layers and its axes at the panel origin."""
    origin = panel.layout["origin"]
    group = draw.Group(
        id=f"{panel.parent.id}.{panel.id}",
        class_="stackplot-panel",
        transform=f"translate({origin['x']},{origin['y']})",
    )
    group.append(draw.Rectangle(
        0, 0, panel.layout["width"], panel.layout["height"],
        fill=style.panel_fill,
        stroke=style.panel_stroke,
        class_="stackplot-panel-background",
    ))

    title = panel.layout.get("title")
    if title:
        group.append(draw.Text(
            str(title),
            style.title_font_size,
            panel.layout["margin"].get("left", 0), style.title_font_size + 4,
            fill=style.title_color,
            font_family=style.font_family,
            class_="stackplot-title",
        ))

    panel.generate_extents()
    for layer_id in panel.data_layer_ids_by_z_index:
        group.append(panel.data_layers[layer_id].render())

    _render_x_axis(group, panel, style)
    _render_y_axis(group, panel, style)
    d.append(group)


def _within(value: float, low: float, high: float) -> bool:
    # Ticks on the extent edges may land a rounding error outside it.
    return low - 1e-6 <= value <= high + 1e-6


def _format_tick(value: float, tick_format: str | None) -> str:
    if tick_format == "region":
        return position_int_to_string(value, 6)
    return f"{value:g}"


def _render_x_axis(group: draw.Group, panel: Panel, style: Style) -> None:
    """Render the x axis line, ticks and labels along the bottom margin."""
    ticks = panel.axis_ticks("x")
    if not ticks:
        return
    bounds = panel.inner_bounds()
    config = panel.layout["axes"].get("x") or {}
    scale = linear_scale(panel.x_extent, (bounds["x0"], bounds["x1"]))
    axis = draw.Group(class_="stackplot-axis stackplot-axis-x")
    axis.append(draw.Line(
        bounds["x0"], bounds["y1"], bounds["x1"], bounds["y1"],
        stroke=style.axis_color,
    ))
    for tick in ticks:
        x = scale(tick)
        if not _within(x, bounds["x0"], bounds["x1"]):
            continue
        axis.append(draw.Line(
            x, bounds["y1"], x, bounds["y1"] + style.tick_length,
            stroke=style.axis_color,
        ))
        axis.append(draw.Text(
            _format_tick(tick, config.get("tick_format")),
            style.tick_font_size,
            x, bounds["y1"] + style.tick_length + style.tick_font_size,
            fill=style.axis_color,
            font_family=style.font_family,
            text_anchor="middle",
            class_="stackplot-tick",
        ))
    label = config.get("label")
    if label:
        axis.append(draw.Text(
            str(label),
            style.tick_font_size,
            (bounds["x0"] + bounds["x1"]) / 2,
            bounds["y1"] + style.tick_length + style.tick_font_size * 2.5,
            fill=style.axis_color,
            font_family=style.font_family,
            text_anchor="middle",
            class_="stackplot-axis-label",
        ))
    group.append(axis)


def _render_y_axis(group: draw.Group, panel: Panel, style: Style) -> None:
    """Render the y1 axis along the left margin."""
    ticks = panel.axis_ticks("y1")
    if not ticks:
        return
    bounds = panel.inner_bounds()
    config = panel.layout["axes"].get("y1") or {}
    scale = linear_scale(panel.y1_extent, (bounds["y1"], bounds["y0"]))
    axis = draw.Group(class_="stackplot-axis stackplot-axis-y1")
    axis.append(draw.Line(
        bounds["x0"], bounds["y0"], bounds["x0"], bounds["y1"],
        stroke=style.axis_color,
    ))
    for tick in ticks:
        y = scale(tick)
        if not _within(y, bounds["y0"], bounds["y1"]):
            continue
        axis.append(draw.Line(
            bounds["x0"] - style.tick_length, y, bounds["x0"], y,
            stroke=style.axis_color,
        ))
        axis.append(draw.Text(
            _format_tick(tick, config.get("tick_format")),
            style.tick_font_size,
            bounds["x0"] - style.tick_length - 2, y,
            fill=style.axis_color,
            font_family=style.font_family,
            text_anchor="end",
            dominant_baseline="central",
            class_="stackplot-tick",
        ))
    group.append(axis)

"""Style constants for plot rendering."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Style:
    """Visual style for a rendered plot."""

    name: str
    background_color: str
    panel_fill: str
    panel_stroke: str
    font_family: str
    title_color: str
    title_font_size: float
    axis_color: str
    tick_font_size: float
    tick_length: float = 4.0
    # Mark defaults (used when a layout leaves the value unresolved)
    point_color: str = "#888888"
    line_color: str = "#333333"
    gene_color: str = "#000099"
    interval_color: str = "#5cb85c"
    highlight_stroke: str = "#ff7f00"
    selected_stroke: str = "#d43f3a"


DEFAULT_STYLE = Style(
    name="default",
    background_color="#ffffff",
    panel_fill="none",
    panel_stroke="#e0e0e0",
    font_family="'Helvetica Neue', Helvetica, Arial, sans-serif",
    title_color="#333333",
    title_font_size=14.0,
    axis_color="#666666",
    tick_font_size=10.0,
)

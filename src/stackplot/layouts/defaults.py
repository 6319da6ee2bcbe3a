"""Bare plot and panel layouts: every recognized key at its neutral value."""

from stackplot.layout.constants import PANEL_MIN_HEIGHT, PANEL_MIN_WIDTH

DEFAULT_PLOT_LAYOUT = {
    "state": {},
    "width": 1,
    "height": 1,
    "min_width": 1,
    "min_height": 1,
    "aspect_ratio": 1,
    "responsive_resize": False,
    "panels": [],
}

PANEL_DEFAULT_LAYOUT = {
    "title": None,
    "y_index": None,
    "width": 0,
    "height": 0,
    "origin": {"x": 0, "y": 0},
    "min_width": PANEL_MIN_WIDTH,
    "min_height": PANEL_MIN_HEIGHT,
    "proportional_width": None,
    "proportional_height": None,
    "proportional_origin": {"x": 0, "y": 0},
    "margin": {"top": 0, "right": 0, "bottom": 0, "left": 0},
    "axes": {
        "x": {},
        "y1": {},
        "y2": {},
    },
    "data_layers": [],
}

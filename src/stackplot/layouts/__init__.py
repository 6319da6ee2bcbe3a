"""Default layouts.

Every layout handed to a plot, panel or data layer is completed by merging
it against one of these. They are never mutated; consumers always work on
merged copies.
"""

from stackplot.layouts.defaults import DEFAULT_PLOT_LAYOUT, PANEL_DEFAULT_LAYOUT
from stackplot.layouts.standard import STANDARD_LAYOUT

LAYOUTS = {
    "plot": DEFAULT_PLOT_LAYOUT,
    "panel": PANEL_DEFAULT_LAYOUT,
    "standard": STANDARD_LAYOUT,
}

__all__ = ["LAYOUTS", "DEFAULT_PLOT_LAYOUT", "PANEL_DEFAULT_LAYOUT", "STANDARD_LAYOUT"]

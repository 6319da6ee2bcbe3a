"""Layout constants used across layout, encoding and render modules.

Centralizes the numeric defaults for plot and panel geometry, axis
handling, and mark sizing.
"""

# ---------------------------------------------------------------------------
# Geometry invariants
# ---------------------------------------------------------------------------
PROPORTION_TOLERANCE: float = 1e-9
"""Allowed drift of the summed proportional panel heights from 1.0."""

PROPORTIONAL_DIMENSIONS: tuple[str, ...] = ("height", "width")
"""Dimensions accepted by ``Plot.sum_proportional``."""

# ---------------------------------------------------------------------------
# Plot defaults
# ---------------------------------------------------------------------------
PLOT_WIDTH: float = 800.0
"""Width of the standard plot layout."""

PLOT_HEIGHT: float = 450.0
"""Height of the standard plot layout."""

PLOT_MIN_WIDTH: float = 400.0
"""Minimum width of the standard plot layout."""

PLOT_MIN_HEIGHT: float = 225.0
"""Minimum height of the standard plot layout."""

PLOT_ASPECT_RATIO: float = 16 / 9
"""Width / height ratio of the standard plot layout."""

# ---------------------------------------------------------------------------
# Panel defaults
# ---------------------------------------------------------------------------
PANEL_MIN_WIDTH: float = 1.0
"""Smallest width a panel may shrink to unless its layout says otherwise."""

PANEL_MIN_HEIGHT: float = 1.0
"""Smallest height a panel may shrink to unless its layout says otherwise."""

# ---------------------------------------------------------------------------
# Axes
# ---------------------------------------------------------------------------
AXIS_IDS: tuple[str, ...] = ("x", "y1", "y2")
"""Axis identifiers a data layer may configure (as ``<axis>_axis``)."""

DEFAULT_TICK_COUNT: int = 5
"""Target number of ticks produced by ``pretty_ticks``."""

CLIP_RANGES: tuple[str, ...] = ("low", "high", "both", "neither")
"""Accepted ``clip_range`` values for ``pretty_ticks``."""

# ---------------------------------------------------------------------------
# Marks
# ---------------------------------------------------------------------------
POINT_SIZE: float = 40.0
"""Default scatter point area in square pixels."""

LINE_WIDTH: float = 1.5
"""Default stroke width of line data layers."""

TRACK_HEIGHT: float = 12.0
"""Height of one gene / interval track row."""

TRACK_GAP: float = 4.0
"""Vertical gap between gene / interval track rows."""

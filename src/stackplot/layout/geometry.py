"""Proportional geometry for a stack of panels.

The plot owns the pixel size of the chart; each panel owns a fraction of it
(``proportional_height`` / ``proportional_width``). Panels that author their
proportional height keep it. The others share what remains of 1.0 in
proportion to their pixel heights, which is also what drives the plot
height. After every change the proportional heights sum to 1.0 and each
panel's origin sits at the cumulative height of the panels above it.
"""

from __future__ import annotations

__all__ = ["Plot"]

import logging
import math
from collections.abc import Mapping
from typing import Any

from stackplot.context import ChartContext
from stackplot.encoding.extent import is_number
from stackplot.errors import (
    ConfigurationTypeError,
    ConfigurationValueError,
    DuplicateIdError,
    LayoutInvariantError,
    NotFoundError,
)
from stackplot.layout.constants import PROPORTION_TOLERANCE, PROPORTIONAL_DIMENSIONS
from stackplot.layout.merge import merge_layouts
from stackplot.layout.ordering import (
    apply_order,
    insert_ordered,
    remove_ordered,
    resolve_insert_index,
)
from stackplot.layout.panel import Panel
from stackplot.layouts import STANDARD_LAYOUT

logger = logging.getLogger(__name__)


def _is_dimension(value: Any) -> bool:
    """True for finite, positive real numbers (bools excluded)."""
    return is_number(value) and math.isfinite(value) and value > 0


class Plot:
    """A chart: a vertical stack of panels sharing one pixel canvas.

    Args:
        plot_id: Identifier used as the prefix of every element id.
        layout: Partial plot layout, completed against ``STANDARD_LAYOUT``.
        state: Initial shared state, merged over ``layout["state"]``.
        context: Registries for data-layer kinds and scale functions; a
            fresh default context when omitted.
    """

    def __init__(
        self,
        plot_id: str,
        layout: Mapping[str, Any] | None = None,
        state: Mapping[str, Any] | None = None,
        context: ChartContext | None = None,
    ) -> None:
        if layout is None:
            layout = {}
        if not isinstance(layout, Mapping):
            raise ConfigurationTypeError(
                f"Plot layouts must be mappings, got {type(layout).__name__}"
            )
        self.id = plot_id
        self.context = context if context is not None else ChartContext.default()
        self.layout = merge_layouts(layout, STANDARD_LAYOUT)
        self.state: dict[str, Any] = merge_layouts(state or {}, self.layout["state"])
        self.layout["state"] = self.state

        for key in ("width", "height"):
            if not _is_dimension(self.layout[key]):
                raise ConfigurationValueError(
                    f"Plot '{plot_id}': {key} must be a positive number, got {self.layout[key]!r}"
                )
        if self.layout["responsive_resize"] and not _is_dimension(self.layout["aspect_ratio"]):
            raise ConfigurationValueError(
                f"Plot '{plot_id}': responsive plots need a positive aspect_ratio, "
                f"got {self.layout['aspect_ratio']!r}"
            )

        self._base_min_width = self.layout["min_width"]
        self._base_min_height = self.layout["min_height"]

        self.panels: dict[str, Panel] = {}
        self.panel_ids_by_y_index: list[str] = []
        panel_layouts = self.layout["panels"]
        self.layout["panels"] = []
        for panel_layout in panel_layouts:
            self.add_panel(panel_layout)
        if not self.panels:
            self.relayout()

    def __repr__(self) -> str:
        return (
            f"Plot(id={self.id!r}, width={self.layout['width']!r}, "
            f"height={self.layout['height']!r}, panels={self.panel_ids_by_y_index!r})"
        )

    # -----------------------------------------------------------------------
    # Panels
    # -----------------------------------------------------------------------

    def add_panel(self, layout: Mapping[str, Any]) -> Panel:
        """Add a panel and re-solve the geometry.

        ``layout["y_index"]`` places the panel in the stack: omitted appends,
        a non-negative index is clamped to the stack size and a negative one
        counts back from the bottom.
        """
        if not isinstance(layout, Mapping):
            raise ConfigurationTypeError(
                f"Panel layouts must be mappings, got {type(layout).__name__}"
            )
        if layout.get("id") in self.panels:
            raise DuplicateIdError(f"Panel '{layout['id']}' already exists in plot '{self.id}'")
        # y_index is validated before any write.
        index = resolve_insert_index(len(self.panel_ids_by_y_index), layout.get("y_index"))
        panel = Panel(layout, parent=self)
        panel.layout_idx = len(self.layout["panels"])
        self.panels[panel.id] = panel
        self.layout["panels"].append(panel.layout)
        insert_ordered(self.panel_ids_by_y_index, panel.id, index)
        self._apply_y_order()
        logger.debug(
            "Plot '%s': added panel '%s' at y_index %d",
            self.id, panel.id, panel.layout["y_index"],
        )
        self.relayout()
        return panel

    def remove_panel(self, panel_id: str) -> Plot:
        """Remove a panel, drop its layers' state and re-solve the geometry."""
        if panel_id not in self.panels:
            raise NotFoundError(f"Panel '{panel_id}' not found in plot '{self.id}'")
        panel = self.panels.pop(panel_id)
        for layer in panel.data_layers.values():
            self.state.pop(layer.state_id, None)

        remove_ordered(self.panel_ids_by_y_index, panel_id)
        del self.layout["panels"][panel.layout_idx]
        for other in self.panels.values():
            if other.layout_idx > panel.layout_idx:
                other.layout_idx -= 1
        self._apply_y_order()
        panel.parent = None

        self.layout["min_width"] = self._base_min_width
        self.layout["min_height"] = self._base_min_height
        logger.debug("Plot '%s': removed panel '%s'", self.id, panel_id)
        self.relayout()
        return self

    def _apply_y_order(self) -> None:
        apply_order(
            self.panel_ids_by_y_index,
            {panel_id: panel.layout for panel_id, panel in self.panels.items()},
            "y_index",
        )

    def _ordered_panels(self) -> list[Panel]:
        return [self.panels[panel_id] for panel_id in self.panel_ids_by_y_index]

    # -----------------------------------------------------------------------
    # Geometry
    # -----------------------------------------------------------------------

    def sum_proportional(self, dimension: str) -> float:
        """Sum of ``proportional_<dimension>`` over all panels."""
        if dimension not in PROPORTIONAL_DIMENSIONS:
            raise ConfigurationValueError(
                f"Unknown proportional dimension {dimension!r}; "
                f"expected one of {', '.join(PROPORTIONAL_DIMENSIONS)}"
            )
        key = f"proportional_{dimension}"
        return sum(panel.layout[key] or 0 for panel in self.panels.values())

    def set_dimensions(self, width: Any = None, height: Any = None) -> Plot:
        """Resize the plot, honouring the panel floors and responsive mode.

        Invalid sizes leave the plot untouched.
        """
        responsive = self.layout["responsive_resize"]
        aspect_ratio = self.layout["aspect_ratio"]
        if responsive and width is None and _is_dimension(height):
            width = height * aspect_ratio
        elif responsive and height is None and _is_dimension(width):
            height = width / aspect_ratio
        if not (_is_dimension(width) and _is_dimension(height)):
            logger.debug(
                "Plot '%s': ignoring set_dimensions(width=%r, height=%r)", self.id, width, height,
            )
            return self
        self._apply_dimensions(width, height)
        self._position_panels()
        self._check_proportions()
        return self

    def relayout(self) -> Plot:
        """Re-derive proportions, plot size and panel placement from the panels."""
        panels = self._ordered_panels()
        width, height = self.layout["width"], self.layout["height"]
        if not panels:
            self._apply_dimensions(width, height)
            return self

        for panel in panels:
            if panel.authored_proportional_width is None:
                panel.layout["proportional_width"] = 1
            if panel.authored_proportional_height is not None:
                panel.layout["proportional_height"] = panel.authored_proportional_height

        implicit = [panel for panel in panels if panel.authored_proportional_height is None]
        explicit_total = sum(
            panel.authored_proportional_height
            for panel in panels
            if panel.authored_proportional_height is not None
        )
        remaining = 1.0 - explicit_total
        weights = [self._pixel_height(panel) for panel in implicit]
        weight_total = sum(weights)

        if implicit and remaining > PROPORTION_TOLERANCE and weight_total > 0:
            for panel, weight in zip(implicit, weights):
                panel.layout["proportional_height"] = remaining * weight / weight_total
            height = weight_total / remaining
        else:
            # Nothing left to share: size implicit panels against the current
            # height, then rescale everything to sum to one.
            for panel, weight in zip(implicit, weights):
                panel.layout["proportional_height"] = weight / height
            total = sum(panel.layout["proportional_height"] for panel in panels)
            if total > 0:
                for panel in panels:
                    panel.layout["proportional_height"] /= total
            else:
                for panel in panels:
                    panel.layout["proportional_height"] = 1 / len(panels)

        declared_widths = [
            panel.layout["width"]
            for panel in panels
            if panel.authored_proportional_width is None and _is_dimension(panel.layout["width"])
        ]
        if declared_widths:
            width = max(declared_widths)

        self._apply_dimensions(width, height)
        self._position_panels()
        self._check_proportions()
        return self

    @staticmethod
    def _pixel_height(panel: Panel) -> float:
        height = panel.layout["height"]
        if _is_dimension(height):
            return height
        min_height = panel.layout["min_height"]
        return min_height if _is_dimension(min_height) else 0

    def _floors(self) -> tuple[float, float]:
        if not self.panels:
            return self._base_min_width, self._base_min_height
        min_width = max(panel.layout["min_width"] for panel in self.panels.values())
        min_height = sum(panel.layout["min_height"] for panel in self.panels.values())
        return min_width, min_height

    def _apply_dimensions(self, width: float, height: float) -> None:
        min_width, min_height = self._floors()
        self.layout["min_width"] = min_width
        self.layout["min_height"] = min_height
        width = max(width, min_width)
        height = max(height, min_height)
        if self.layout["responsive_resize"]:
            aspect_ratio = self.layout["aspect_ratio"]
            height = width / aspect_ratio
            if height < min_height:
                height = min_height
                width = height * aspect_ratio
        else:
            self.layout["aspect_ratio"] = width / height
        self.layout["width"] = width
        self.layout["height"] = height

    def _position_panels(self) -> None:
        width, height = self.layout["width"], self.layout["height"]
        cursor = 0.0
        for panel in self._ordered_panels():
            proportional_height = panel.layout["proportional_height"]
            panel.layout["proportional_origin"]["x"] = 0
            panel.layout["proportional_origin"]["y"] = cursor
            panel.layout["origin"]["x"] = 0
            panel.layout["origin"]["y"] = cursor * height
            panel.layout["width"] = width * panel.layout["proportional_width"]
            panel.layout["height"] = height * proportional_height
            cursor += proportional_height

    def _check_proportions(self) -> None:
        if not self.panels:
            return
        total = self.sum_proportional("height")
        if abs(total - 1.0) > PROPORTION_TOLERANCE:
            raise LayoutInvariantError(
                f"Plot '{self.id}': proportional heights sum to {total!r}, expected 1.0"
            )

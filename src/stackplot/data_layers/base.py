"""Data layers: data-bound collections of marks hosted by a panel.

A ``DataLayer`` holds one layer's layout, records, interaction state and
tooltips. What the layer looks like is delegated to its ``DataLayerKind``,
a registered variant that owns the default layout and the drawing code.
"""

from __future__ import annotations

__all__ = ["DataLayer", "DataLayerKind", "STATUSES", "Tooltip", "span_axis_extent"]

import logging
import re
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, ClassVar

import drawsvg as draw

from stackplot.encoding.extent import apply_axis_config, axis_config, get_axis_extent, numeric_values
from stackplot.encoding.predicates import element_status, evaluate_predicate
from stackplot.encoding.scales import (
    ScaleFunctionRegistry,
    default_scale_functions,
    resolve_scalable_parameter,
)
from stackplot.errors import ConfigurationTypeError, ConfigurationValueError, ElementIdError
from stackplot.layout.merge import merge_layouts
from stackplot.render.scale import linear_scale

if TYPE_CHECKING:
    from stackplot.layout.panel import Panel

logger = logging.getLogger(__name__)

STATUSES: tuple[str, ...] = ("highlighted", "selected")
"""Element statuses tracked in a layer's state."""

TRIGGER_ACTIONS: tuple[str, ...] = ("toggle", "set", "unset")

_NON_WORD = re.compile(r"\W")
_RESERVED_ID_CHARS = re.compile(r"[:.\[\],]")


@dataclass
class Tooltip:
    """An open tooltip for one element; drawing it is the host's concern."""

    element_id: str
    datum: Any
    html: str = ""


class DataLayerKind(ABC):
    """A renderable variant of data layer.

    Subclasses set ``name`` and ``default_layout`` and implement ``render``.
    The encoding hooks can be overridden when a kind reads its data
    differently (e.g. features spanning a start and an end field).
    """

    name: ClassVar[str] = ""
    default_layout: ClassVar[Mapping[str, Any]] = {}

    def build_layout(self, layout: Mapping[str, Any]) -> dict[str, Any]:
        return merge_layouts(layout, self.default_layout)

    def resolve_scalable_parameter(self, layer: DataLayer, spec: Any, datum: Any) -> Any:
        return resolve_scalable_parameter(spec, datum, layer.scale_functions)

    def get_axis_extent(self, layer: DataLayer, axis: Any) -> list[float | None]:
        return get_axis_extent(layer.layout, layer.data, axis)

    @abstractmethod
    def render(self, layer: DataLayer) -> draw.Group:
        """Draw the layer's marks in panel coordinates."""


class DataLayer:
    """One data layer inside a panel."""

    def __init__(
        self,
        kind: DataLayerKind,
        layout: Mapping[str, Any],
        parent: Panel | None = None,
        scale_functions: ScaleFunctionRegistry | None = None,
    ) -> None:
        if not isinstance(layout, Mapping):
            raise ConfigurationTypeError(
                f"Data layer layouts must be mappings, got {type(layout).__name__}"
            )
        if layout.get("id") is None:
            raise ConfigurationValueError("Data layer layouts require an 'id'")
        self.kind = kind
        self.layout = kind.build_layout(layout)
        self.id: str = self.layout["id"]
        self.parent = parent
        self.scale_functions = (
            scale_functions if scale_functions is not None else default_scale_functions()
        )
        self.data: list[dict[str, Any]] = []
        self.tooltips: dict[str, Tooltip] = {}
        self._own_state: dict[str, list[str]] = {status: [] for status in STATUSES}

    def __repr__(self) -> str:
        return f"DataLayer(id={self.id!r}, kind={self.kind.name!r})"

    # -----------------------------------------------------------------------
    # Identity and state
    # -----------------------------------------------------------------------

    @property
    def state_id(self) -> str:
        if self.parent is None:
            return self.id
        return f"{self.parent.id}.{self.id}"

    @property
    def state(self) -> dict[str, list[str]]:
        """This layer's entry in the plot state (or a private one when detached)."""
        plot = self.parent.parent if self.parent is not None else None
        if plot is None:
            return self._own_state
        entry = plot.state.setdefault(self.state_id, {})
        for status in STATUSES:
            entry.setdefault(status, [])
        return entry

    def get_base_id(self) -> str:
        parts = [self.id]
        if self.parent is not None:
            parts.insert(0, self.parent.id)
            if self.parent.parent is not None:
                parts.insert(0, self.parent.parent.id)
        return ".".join(str(part) for part in parts)

    def has_element_id(self, element: Any) -> bool:
        if isinstance(element, str):
            return True
        id_field = self.layout.get("id_field") or "id"
        return isinstance(element, Mapping) and element.get(id_field) is not None

    def get_element_id(self, element: Any) -> str:
        """Stable DOM-safe id for a record (or an element id string)."""
        if isinstance(element, str):
            element_id = element
        elif isinstance(element, Mapping):
            id_field = self.layout.get("id_field") or "id"
            if element.get(id_field) is None:
                raise ElementIdError(
                    f"Unable to generate element id: record has no '{id_field}' field"
                )
            element_id = _NON_WORD.sub("", str(element[id_field]))
        else:
            raise ElementIdError(f"Unable to generate element id for {element!r}")
        return _RESERVED_ID_CHARS.sub("_", f"{self.get_base_id()}-{element_id}")

    # -----------------------------------------------------------------------
    # Highlight / select
    # -----------------------------------------------------------------------

    def _status_ids(self, status: str) -> list[str]:
        if status not in STATUSES:
            raise ConfigurationValueError(
                f"Unknown element status {status!r}; expected one of {', '.join(STATUSES)}"
            )
        return self.state[status]

    def is_element(self, status: str, element: Any) -> bool:
        return self.get_element_id(element) in self._status_ids(status)

    def set_element_status(self, status: str, element: Any, active: bool = True) -> None:
        ids = self._status_ids(status)
        element_id = self.get_element_id(element)
        if active and element_id not in ids:
            ids.append(element_id)
        elif not active and element_id in ids:
            ids.remove(element_id)
        self.show_or_hide_tooltip(element)

    def set_all_elements_status(self, status: str, active: bool = True) -> None:
        ids = self._status_ids(status)
        if active:
            for element in self.data:
                element_id = self.get_element_id(element)
                if element_id not in ids:
                    ids.append(element_id)
        else:
            ids.clear()
        for element in self.data:
            self.show_or_hide_tooltip(element)

    def highlight_element(self, element: Any) -> None:
        self.set_element_status("highlighted", element, True)

    def unhighlight_element(self, element: Any) -> None:
        self.set_element_status("highlighted", element, False)

    def highlight_all_elements(self) -> None:
        self.set_all_elements_status("highlighted", True)

    def unhighlight_all_elements(self) -> None:
        self.set_all_elements_status("highlighted", False)

    def select_element(self, element: Any) -> None:
        self.set_element_status("selected", element, True)

    def unselect_element(self, element: Any) -> None:
        self.set_element_status("selected", element, False)

    def select_all_elements(self) -> None:
        self.set_all_elements_status("selected", True)

    def unselect_all_elements(self) -> None:
        self.set_all_elements_status("selected", False)

    def handle_event(self, event: str, element: Any) -> None:
        """Apply the ``highlighted`` / ``selected`` triggers bound to ``event``.

        ``event`` is a name such as ``"mouseover"`` or ``"onmouseover"``.
        """
        key = event if event.startswith("on") else f"on{event}"
        for status in STATUSES:
            triggers = self.layout.get(status)
            if not isinstance(triggers, Mapping) or key not in triggers:
                continue
            action = triggers[key]
            if action == "toggle":
                active = not self.is_element(status, element)
            elif action == "set":
                active = True
            elif action == "unset":
                active = False
            else:
                raise ConfigurationValueError(
                    f"Unknown {status} action {action!r} for '{key}'; "
                    f"expected one of {', '.join(TRIGGER_ACTIONS)}"
                )
            self.set_element_status(status, element, active)

    # -----------------------------------------------------------------------
    # Tooltips
    # -----------------------------------------------------------------------

    def create_tooltip(self, element: Any) -> Tooltip:
        element_id = self.get_element_id(element)
        tooltip = self.tooltips.get(element_id)
        if tooltip is None:
            tooltip_layout = self.layout.get("tooltip") or {}
            tooltip = Tooltip(
                element_id=element_id,
                datum=element,
                html=tooltip_layout.get("html") or "",
            )
            self.tooltips[element_id] = tooltip
        return tooltip

    def destroy_tooltip(self, element_or_id: Any) -> None:
        if isinstance(element_or_id, str) and element_or_id in self.tooltips:
            element_id = element_or_id
        else:
            element_id = self.get_element_id(element_or_id)
        self.tooltips.pop(element_id, None)

    def show_or_hide_tooltip(self, element: Any) -> None:
        """Open or close the element's tooltip per the layout's show/hide predicates."""
        tooltip_layout = self.layout.get("tooltip")
        if not isinstance(tooltip_layout, Mapping):
            return
        element_id = self.get_element_id(element)
        status = element_status(
            element_id in self.state["highlighted"],
            element_id in self.state["selected"],
        )
        show = evaluate_predicate(tooltip_layout.get("show"), status)
        hide = evaluate_predicate(tooltip_layout.get("hide"), status)
        if show and not hide:
            self.create_tooltip(element)
        else:
            self.destroy_tooltip(element_id)

    # -----------------------------------------------------------------------
    # Encoding and drawing
    # -----------------------------------------------------------------------

    def resolve_scalable_parameter(self, spec: Any, datum: Any) -> Any:
        return self.kind.resolve_scalable_parameter(self, spec, datum)

    def get_axis_extent(self, axis: Any) -> list[float | None]:
        return self.kind.get_axis_extent(self, axis)

    def axis_field(self, axis: str) -> str | None:
        config = self.layout.get(f"{axis}_axis")
        if isinstance(config, Mapping):
            return config.get("field")
        return None

    def y_axis_id(self) -> str | None:
        """The y axis (``"y1"`` or ``"y2"``) this layer plots against, if any."""
        for axis in ("y1", "y2"):
            if self.axis_field(axis) is not None:
                return axis
        return None

    def axis_domain(self, axis: str | None) -> list[float | None] | None:
        """Extent used to scale ``axis``: the panel's, unless the axis is decoupled."""
        if axis is None or self.axis_field(axis) is None:
            return None
        config = self.layout[f"{axis}_axis"]
        if config.get("decoupled") or self.parent is None:
            return self.get_axis_extent(axis)
        return self.parent.extents.get(axis)

    def scales(self) -> tuple[Callable[[float], float], Callable[[float], float]]:
        """Data -> pixel mappings for x and y within the parent panel."""
        if self.parent is None:
            raise ConfigurationValueError(f"Data layer '{self.id}' must belong to a panel to render")
        bounds = self.parent.inner_bounds()
        x_scale = linear_scale(self.axis_domain("x"), (bounds["x0"], bounds["x1"]))
        y_scale = linear_scale(self.axis_domain(self.y_axis_id()), (bounds["y1"], bounds["y0"]))
        return x_scale, y_scale

    def element_classes(self, element: Any, base: str) -> str:
        classes = [base]
        if self.has_element_id(element):
            element_id = self.get_element_id(element)
            for status in STATUSES:
                if element_id in self.state[status]:
                    classes.append(f"stackplot-{status}")
        return " ".join(classes)

    def render(self) -> draw.Group:
        logger.debug("Rendering data layer '%s' (%s)", self.id, self.kind.name)
        return self.kind.render(self)


def span_axis_extent(layer: DataLayer, axis: Any) -> list[float | None]:
    """Extent for kinds whose x axis spans ``field`` to ``end_field``."""
    if axis != "x":
        return get_axis_extent(layer.layout, layer.data, axis)
    config = axis_config(layer.layout, axis)
    end_field = config.get("end_field") or config["field"]
    values = numeric_values(layer.data, config["field"]) + numeric_values(layer.data, end_field)
    return apply_axis_config(values, config)

"""Tests for data layers: element ids, status changes, events and tooltips."""

import pytest

from stackplot.context import ChartContext
from stackplot.data_layers import (
    DataLayer,
    DataLayerKind,
    DataLayerRegistry,
    ScatterKind,
    default_data_layers,
)
from stackplot.errors import (
    ConfigurationTypeError,
    ConfigurationValueError,
    DuplicateNameError,
    ElementIdError,
    NotFoundError,
)
from stackplot.layout.geometry import Plot

TOOLTIP = {
    "show": {"or": ["highlighted", "selected"]},
    "hide": {"and": ["unhighlighted", "unselected"]},
}


def _make_layer(**extra):
    layout = {
        "id": "d",
        "type": "scatter",
        "x_axis": {"field": "x"},
        "y1_axis": {"field": "y"},
    }
    layout.update(extra)
    plot = Plot("plot", {"panels": [{"id": "p", "height": 100, "data_layers": [layout]}]})
    layer = plot.panels["p"].data_layers["d"]
    layer.data = [
        {"id": "a", "x": 1, "y": 2},
        {"id": "b", "x": 2, "y": 4},
        {"id": "c", "x": 3, "y": 1},
    ]
    return layer


# ---------------------------------------------------------------------------
# Element ids
# ---------------------------------------------------------------------------


def test_base_id():
    """The base id chains plot, panel and layer ids."""
    assert _make_layer().get_base_id() == "plot.p.d"


def test_element_id_from_record():
    """Element ids prefix the record id with the base id, made DOM-safe."""
    layer = _make_layer()
    assert layer.get_element_id({"id": "a"}) == "plot_p_d-a"


def test_element_id_strips_non_word_characters():
    """Punctuation in the record id is dropped."""
    layer = _make_layer()
    assert layer.get_element_id({"id": "10:1234_A/G"}) == "plot_p_d-101234_AG"


def test_element_id_custom_id_field():
    """``id_field`` picks the record field used for the id."""
    layer = _make_layer(id_field="variant")
    assert layer.get_element_id({"variant": "rs1"}) == "plot_p_d-rs1"


def test_element_id_from_string():
    """A string element is used as the id itself."""
    layer = _make_layer()
    assert layer.get_element_id("foo") == "plot_p_d-foo"


def test_element_id_missing_field_raises():
    """Records without the id field cannot be identified."""
    layer = _make_layer()
    with pytest.raises(ElementIdError):
        layer.get_element_id({"x": 1})
    with pytest.raises(ElementIdError):
        layer.get_element_id(42)


def test_detached_layer_ids_and_state():
    """A layer created outside a panel keeps its own state."""
    layer = default_data_layers().create("scatter", {"id": "solo"})
    assert layer.get_base_id() == "solo"
    assert layer.state_id == "solo"
    layer.highlight_element({"id": "a"})
    assert layer.state["highlighted"] == ["solo-a"]


# ---------------------------------------------------------------------------
# Highlight and select
# ---------------------------------------------------------------------------


def test_highlight_and_unhighlight_element():
    """Highlighting adds the element id once; unhighlighting removes it."""
    layer = _make_layer()
    a = layer.data[0]
    layer.highlight_element(a)
    layer.highlight_element(a)
    assert layer.state["highlighted"] == ["plot_p_d-a"]
    assert layer.is_element("highlighted", a)
    layer.unhighlight_element(a)
    assert layer.state["highlighted"] == []
    layer.unhighlight_element(a)
    assert layer.state["highlighted"] == []


def test_highlight_all_elements():
    """All records are highlighted in data order, then all cleared."""
    layer = _make_layer()
    layer.highlight_element(layer.data[1])
    layer.highlight_all_elements()
    assert layer.state["highlighted"] == ["plot_p_d-b", "plot_p_d-a", "plot_p_d-c"]
    layer.unhighlight_all_elements()
    assert layer.state["highlighted"] == []


def test_select_and_unselect():
    """Selection is tracked independently of highlighting."""
    layer = _make_layer()
    layer.select_element(layer.data[2])
    assert layer.state["selected"] == ["plot_p_d-c"]
    assert layer.state["highlighted"] == []
    layer.select_all_elements()
    assert len(layer.state["selected"]) == 3
    layer.unselect_element(layer.data[2])
    assert layer.state["selected"] == ["plot_p_d-a", "plot_p_d-b"]
    layer.unselect_all_elements()
    assert layer.state["selected"] == []


def test_status_lives_in_plot_state():
    """Status lists are the plot-level state entry for the layer."""
    layer = _make_layer()
    layer.select_element(layer.data[0])
    assert layer.parent.parent.state["p.d"]["selected"] == ["plot_p_d-a"]


def test_unknown_status_raises():
    """Only highlighted and selected are statuses."""
    layer = _make_layer()
    with pytest.raises(ConfigurationValueError):
        layer.set_element_status("hovered", layer.data[0])


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------


def test_handle_event_toggle():
    """A toggle trigger flips the status on each event."""
    layer = _make_layer(highlighted={"onmouseover": "toggle"})
    a = layer.data[0]
    layer.handle_event("mouseover", a)
    assert layer.is_element("highlighted", a)
    layer.handle_event("onmouseover", a)
    assert not layer.is_element("highlighted", a)


def test_handle_event_set_and_unset():
    """set and unset force the status regardless of its current value."""
    layer = _make_layer(selected={"onclick": "set", "ondblclick": "unset"})
    a = layer.data[0]
    layer.handle_event("click", a)
    layer.handle_event("click", a)
    assert layer.state["selected"] == ["plot_p_d-a"]
    layer.handle_event("dblclick", a)
    assert layer.state["selected"] == []


def test_handle_event_without_trigger_is_noop():
    """Events with no bound trigger change nothing."""
    layer = _make_layer(highlighted={"onmouseover": "toggle"})
    layer.handle_event("click", layer.data[0])
    assert layer.state == {"highlighted": [], "selected": []}


def test_handle_event_unknown_action():
    """Trigger actions are toggle, set or unset."""
    layer = _make_layer(selected={"onclick": "flip"})
    with pytest.raises(ConfigurationValueError):
        layer.handle_event("click", layer.data[0])


# ---------------------------------------------------------------------------
# Tooltips
# ---------------------------------------------------------------------------


def test_create_and_destroy_tooltip():
    """Tooltips are keyed by element id and can be destroyed by id or record."""
    layer = _make_layer(tooltip={"html": "<b>{{id}}</b>"})
    a, b = layer.data[0], layer.data[1]
    tooltip = layer.create_tooltip(a)
    assert tooltip.element_id == "plot_p_d-a"
    assert tooltip.datum is a
    assert tooltip.html == "<b>{{id}}</b>"
    assert layer.create_tooltip(a) is tooltip
    layer.create_tooltip(b)
    layer.destroy_tooltip("plot_p_d-a")
    layer.destroy_tooltip(b)
    assert layer.tooltips == {}


def test_tooltip_follows_status():
    """show/hide predicates open and close the tooltip as status changes."""
    layer = _make_layer(tooltip=TOOLTIP)
    a = layer.data[0]
    layer.highlight_element(a)
    assert "plot_p_d-a" in layer.tooltips
    layer.select_element(a)
    layer.unhighlight_element(a)
    assert "plot_p_d-a" in layer.tooltips
    layer.unselect_element(a)
    assert layer.tooltips == {}


def test_tooltip_for_all_elements():
    """Bulk status changes open and close every tooltip."""
    layer = _make_layer(tooltip=TOOLTIP)
    layer.select_all_elements()
    assert sorted(layer.tooltips) == ["plot_p_d-a", "plot_p_d-b", "plot_p_d-c"]
    layer.unselect_all_elements()
    assert layer.tooltips == {}


def test_tooltip_string_predicate():
    """A single leaf works as a show predicate."""
    layer = _make_layer(tooltip={"show": "selected"})
    a = layer.data[0]
    layer.highlight_element(a)
    assert layer.tooltips == {}
    layer.select_element(a)
    assert list(layer.tooltips) == ["plot_p_d-a"]


def test_no_tooltip_config_no_tooltips():
    """Layers without a tooltip layout never open tooltips."""
    layer = _make_layer()
    layer.select_all_elements()
    assert layer.tooltips == {}


# ---------------------------------------------------------------------------
# Encoding delegation
# ---------------------------------------------------------------------------


def test_resolve_scalable_parameter_uses_context_functions():
    """Scale functions come from the plot's context."""
    layer = _make_layer()
    spec = {
        "scale_function": "categorical_bin",
        "field": "id",
        "parameters": {"categories": ["a", "b"], "values": ["red", "blue"]},
    }
    assert layer.resolve_scalable_parameter(spec, layer.data[1]) == "blue"
    assert layer.resolve_scalable_parameter("#fff", layer.data[1]) == "#fff"


def test_layer_get_axis_extent():
    """Layer extents come from its own data."""
    layer = _make_layer()
    assert layer.get_axis_extent("x") == [1, 3]
    assert layer.get_axis_extent("y1") == [1, 4]


def test_gene_extent_spans_start_and_end():
    """Gene layers measure x from the start field to the end field."""
    layer = default_data_layers().create("genes", {"id": "g"})
    layer.data = [
        {"gene_id": "g1", "start": 100, "end": 400},
        {"gene_id": "g2", "start": 250, "end": 900},
    ]
    assert layer.get_axis_extent("x") == [100, 900]


# ---------------------------------------------------------------------------
# Registry and custom kinds
# ---------------------------------------------------------------------------


def test_builtin_kinds_in_order():
    """The default registry lists the built-in kinds in registration order."""
    assert default_data_layers().list() == ["scatter", "line", "genes", "intervals"]


def test_create_merges_kind_defaults():
    """Created layers carry the kind's default layout under the user's."""
    layer = default_data_layers().create("scatter", {"id": "s", "point_size": 10})
    assert isinstance(layer, DataLayer)
    assert layer.layout["point_size"] == 10
    assert layer.layout["point_shape"] == "circle"
    assert layer.layout["id"] == "s"


def test_create_validation():
    """create() needs a known kind and a mapping layout with an id."""
    registry = default_data_layers()
    with pytest.raises(NotFoundError):
        registry.create("heatmap", {"id": "h"})
    with pytest.raises(ConfigurationTypeError):
        registry.create("scatter", "s")
    with pytest.raises(ConfigurationValueError):
        registry.create("scatter", {"point_size": 1})


def test_registry_rejects_non_kinds():
    """Only DataLayerKind instances can be registered."""
    registry = DataLayerRegistry()
    with pytest.raises(ConfigurationTypeError):
        registry.add("scatter", ScatterKind)
    registry.add("scatter", ScatterKind())
    with pytest.raises(DuplicateNameError):
        registry.add("scatter", ScatterKind())
    registry.set("scatter", None)
    assert "scatter" not in registry


class _DotsKind(DataLayerKind):
    name = "dots"
    default_layout = {"dot_color": "green"}

    def render(self, layer):
        raise NotImplementedError


def test_custom_kind_in_context():
    """A kind registered on a context is usable by that context's plots only."""
    context = ChartContext.default()
    context.data_layers.add("dots", _DotsKind())
    plot = Plot(
        "plot",
        {"panels": [{"id": "p", "data_layers": [{"id": "d", "type": "dots"}]}]},
        context=context,
    )
    assert plot.panels["p"].data_layers["d"].layout["dot_color"] == "green"
    with pytest.raises(NotFoundError):
        Plot("other", {"panels": [{"id": "p", "data_layers": [{"id": "d", "type": "dots"}]}]})

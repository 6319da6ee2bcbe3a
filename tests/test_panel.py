"""Tests for panels: data-layer management, extents and ticks."""

import pytest

from stackplot.errors import (
    ConfigurationTypeError,
    ConfigurationValueError,
    DuplicateIdError,
    InvalidAxisError,
    NotFoundError,
)
from stackplot.layout.geometry import Plot


def _make_plot():
    return Plot("plot", {
        "width": 100,
        "height": 100,
        "min_width": 1,
        "min_height": 1,
        "panels": [],
    })


def _make_panel(**layout):
    plot = _make_plot()
    return plot.add_panel({"id": "p", "height": 100, **layout})


def _scatter(layer_id, **extra):
    layout = {
        "id": layer_id,
        "type": "scatter",
        "x_axis": {"field": "x"},
        "y1_axis": {"field": "y"},
    }
    layout.update(extra)
    return layout


def test_panel_layers_from_layout():
    """Data layers listed in the panel layout are created in order."""
    panel = _make_panel(data_layers=[_scatter("a"), _scatter("b")])
    assert panel.data_layer_ids_by_z_index == ["a", "b"]
    assert [entry["id"] for entry in panel.layout["data_layers"]] == ["a", "b"]
    assert panel.data_layers["b"].layout["z_index"] == 1


def test_add_data_layer_with_z_index():
    """d1 at z_index 1 then d2 at z_index 0 paint as d2, d1."""
    panel = _make_panel()
    panel.add_data_layer(_scatter("d1", z_index=1))
    panel.add_data_layer(_scatter("d2", z_index=0))
    assert panel.data_layer_ids_by_z_index == ["d2", "d1"]
    assert panel.data_layers["d2"].layout["z_index"] == 0
    assert panel.data_layers["d1"].layout["z_index"] == 1


def test_add_data_layer_negative_z_index():
    """A negative z_index counts back from the top of the paint order."""
    panel = _make_panel()
    for layer_id in ("a", "b", "c"):
        panel.add_data_layer(_scatter(layer_id))
    panel.add_data_layer(_scatter("d", z_index=-1))
    assert panel.data_layer_ids_by_z_index == ["a", "b", "d", "c"]


def test_add_data_layer_creates_state():
    """Adding a layer creates its plot-level state entry."""
    panel = _make_panel()
    layer = panel.add_data_layer(_scatter("d1"))
    assert layer.state_id == "p.d1"
    assert panel.parent.state["p.d1"] == {"highlighted": [], "selected": []}
    assert layer.state is panel.parent.state["p.d1"]


def test_add_data_layer_keeps_existing_state():
    """State handed to the plot survives layer creation."""
    plot = Plot(
        "plot",
        {"panels": [{"id": "p", "data_layers": [_scatter("d1")]}]},
        state={"p.d1": {"highlighted": ["x"], "selected": []}},
    )
    assert plot.state["p.d1"]["highlighted"] == ["x"]


def test_add_duplicate_data_layer_raises():
    """Layer ids are unique within a panel."""
    panel = _make_panel()
    panel.add_data_layer(_scatter("d1"))
    with pytest.raises(DuplicateIdError):
        panel.add_data_layer(_scatter("d1"))


def test_add_data_layer_validation():
    """Layer layouts need to be mappings with an id and a known type."""
    panel = _make_panel()
    with pytest.raises(ConfigurationTypeError):
        panel.add_data_layer(["scatter"])
    with pytest.raises(ConfigurationValueError):
        panel.add_data_layer({"type": "scatter"})
    with pytest.raises(ConfigurationValueError):
        panel.add_data_layer({"id": "d1"})
    with pytest.raises(NotFoundError):
        panel.add_data_layer({"id": "d1", "type": "heatmap"})
    assert panel.data_layers == {}


@pytest.mark.parametrize("bad", ["back", 0.5, False])
def test_bad_z_index_leaves_panel_unchanged(bad):
    """A non-integer z_index is rejected before the layer is created."""
    panel = _make_panel()
    panel.add_data_layer(_scatter("a"))
    with pytest.raises(ConfigurationValueError):
        panel.add_data_layer(_scatter("b", z_index=bad))
    assert list(panel.data_layers) == ["a"]
    assert panel.data_layer_ids_by_z_index == ["a"]
    assert [entry["id"] for entry in panel.layout["data_layers"]] == ["a"]
    assert "p.b" not in panel.parent.state


def test_remove_data_layer_compacts():
    """Removing a layer closes the gap in z_index and drops its state."""
    panel = _make_panel()
    for layer_id in ("a", "b", "c"):
        panel.add_data_layer(_scatter(layer_id))
    panel.remove_data_layer("a")
    assert panel.data_layer_ids_by_z_index == ["b", "c"]
    assert panel.data_layers["b"].layout["z_index"] == 0
    assert panel.data_layers["c"].layout["z_index"] == 1
    assert [entry["id"] for entry in panel.layout["data_layers"]] == ["b", "c"]
    assert "p.a" not in panel.parent.state


def test_remove_unknown_data_layer_raises():
    """Removing a layer that is not there raises NotFoundError."""
    panel = _make_panel()
    with pytest.raises(NotFoundError):
        panel.remove_data_layer("nope")


def test_generate_extents_unions_coupled_layers():
    """Panel extents cover every coupled layer; decoupled axes are skipped."""
    panel = _make_panel()
    a = panel.add_data_layer(_scatter("a"))
    b = panel.add_data_layer(_scatter("b", x_axis={"field": "x", "decoupled": True}))
    c = panel.add_data_layer(_scatter("c"))
    a.data = [{"x": 1, "y": 10}, {"x": 4, "y": 20}]
    b.data = [{"x": -100, "y": 0}]
    c.data = [{"x": 3, "y": 15}, {"x": 8, "y": 30}]
    extents = panel.generate_extents()
    assert extents["x"] == [1, 8]
    assert extents["y1"] == [0, 30]
    assert extents["y2"] is None
    assert panel.x_extent == [1, 8]


def test_generate_extents_without_data():
    """Layers without numeric values leave the extent unknown."""
    panel = _make_panel(data_layers=[_scatter("a")])
    panel.generate_extents()
    assert panel.x_extent is None
    assert panel.axis_ticks("x") == []


def test_axis_ticks():
    """Ticks are nice numbers spanning the panel extent."""
    panel = _make_panel(data_layers=[_scatter("a")])
    panel.data_layers["a"].data = [{"x": 0, "y": 1}, {"x": 10, "y": 2}]
    panel.generate_extents()
    assert panel.axis_ticks("x") == pytest.approx([0, 2, 4, 6, 8, 10])


def test_axis_ticks_unknown_axis():
    """Only x, y1 and y2 have ticks."""
    panel = _make_panel()
    with pytest.raises(InvalidAxisError):
        panel.axis_ticks("z")


def test_inner_bounds_subtract_margins():
    """The drawing area sits inside the panel margins."""
    panel = _make_panel(
        width=100,
        margin={"top": 10, "right": 20, "bottom": 30, "left": 40},
    )
    assert panel.inner_bounds() == {"x0": 40, "x1": 80, "y0": 10, "y1": 70}

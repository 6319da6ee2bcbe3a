"""Gene track data layer.

Genes are laid out on stacked tracks so that no two features on the same
track overlap; each gene is drawn as a bar spanning its start and end with
its name underneath.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

import drawsvg as draw

from stackplot.data_layers.base import DataLayer, DataLayerKind, span_axis_extent
from stackplot.encoding.extent import numeric_values
from stackplot.layout.constants import TRACK_GAP, TRACK_HEIGHT

logger = logging.getLogger(__name__)


def _span(datum: Mapping[str, Any], start_field: str, end_field: str) -> tuple[float, float] | None:
    start = numeric_values([datum], start_field)
    end = numeric_values([datum], end_field)
    if not start or not end:
        return None
    return min(start[0], end[0]), max(start[0], end[0])


def assign_tracks(spans: Sequence[tuple[float, float]], min_gap: float = 0.0) -> list[int]:
    """Greedy track assignment for ``(start, end)`` spans.

    Spans are visited by start; each goes on the first track whose last span
    ends more than ``min_gap`` before it starts. Returns a track number per
    input span, in input order.
    """
    tracks_end: list[float] = []
    assignment = [0] * len(spans)
    for index in sorted(range(len(spans)), key=lambda i: spans[i]):
        start, end = spans[index]
        for track, track_end in enumerate(tracks_end):
            if start > track_end + min_gap:
                tracks_end[track] = end
                assignment[index] = track
                break
        else:
            tracks_end.append(end)
            assignment[index] = len(tracks_end) - 1
    return assignment


class GenesKind(DataLayerKind):
    name = "genes"
    default_layout = {
        "id_field": "gene_id",
        "label_field": "gene_name",
        "color": "#000099",
        "track_height": TRACK_HEIGHT,
        "track_gap": TRACK_GAP,
        "label_font_size": 10,
        "x_axis": {"field": "start", "end_field": "end"},
    }

    def get_axis_extent(self, layer: DataLayer, axis: Any) -> list[float | None]:
        return span_axis_extent(layer, axis)

    def render(self, layer: DataLayer) -> draw.Group:
        group = draw.Group(id=layer.get_base_id(), class_="stackplot-data_layer stackplot-genes")
        config = layer.layout.get("x_axis") or {}
        start_field = config.get("field")
        if start_field is None:
            return group
        end_field = config.get("end_field") or start_field

        genes, spans = [], []
        for datum in layer.data:
            span = _span(datum, start_field, end_field)
            if span is not None:
                genes.append(datum)
                spans.append(span)
        if not genes:
            return group

        x_scale, _ = layer.scales()
        bounds = layer.parent.inner_bounds()
        track_height = layer.layout["track_height"]
        row_height = track_height + layer.layout["track_gap"] + layer.layout["label_font_size"]
        tracks = assign_tracks(spans)
        logger.debug("Layer '%s': %d genes on %d tracks", layer.id, len(genes), max(tracks) + 1)

        for datum, (start, end), track in zip(genes, spans, tracks):
            x0, x1 = x_scale(start), x_scale(end)
            top = bounds["y0"] + track * row_height
            color = layer.resolve_scalable_parameter(layer.layout.get("color"), datum)
            attrs = {"class_": layer.element_classes(datum, "stackplot-gene")}
            if layer.has_element_id(datum):
                attrs["id"] = layer.get_element_id(datum)
            gene = draw.Group(**attrs)
            gene.append(draw.Rectangle(
                x0, top, max(x1 - x0, 1.0), track_height,
                fill=color or self.default_layout["color"],
            ))
            label = datum.get(layer.layout.get("label_field"))
            if label is not None:
                gene.append(draw.Text(
                    str(label),
                    layer.layout["label_font_size"],
                    (x0 + x1) / 2,
                    top + track_height + layer.layout["label_font_size"],
                    text_anchor="middle",
                ))
            group.append(gene)
        return group

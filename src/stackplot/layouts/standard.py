"""Standard two-panel layout: association scatter above a gene track."""

from stackplot.layout.constants import (
    PLOT_ASPECT_RATIO,
    PLOT_HEIGHT,
    PLOT_MIN_HEIGHT,
    PLOT_MIN_WIDTH,
    PLOT_WIDTH,
)

STANDARD_LAYOUT = {
    "state": {},
    "width": PLOT_WIDTH,
    "height": PLOT_HEIGHT,
    "min_width": PLOT_MIN_WIDTH,
    "min_height": PLOT_MIN_HEIGHT,
    "aspect_ratio": PLOT_ASPECT_RATIO,
    "responsive_resize": False,
    "panels": [
        {
            "id": "positions",
            "width": PLOT_WIDTH,
            "height": PLOT_HEIGHT / 2,
            "min_width": PLOT_MIN_WIDTH,
            "min_height": PLOT_MIN_HEIGHT / 2,
            "proportional_width": 1,
            "proportional_height": 0.5,
            "margin": {"top": 35, "right": 50, "bottom": 40, "left": 50},
            "axes": {
                "x": {"label": "Position", "tick_format": "region"},
                "y1": {"label": "-log10 p-value"},
            },
            "data_layers": [
                {
                    "id": "significance",
                    "type": "line",
                    "fields": ["sig:x", "sig:y"],
                    "z_index": 0,
                    "style": {"fill": "none", "stroke-width": "1px", "stroke": "#d3d3d3"},
                    "x_axis": {"field": "sig:x", "decoupled": True},
                    "y1_axis": {"field": "sig:y"},
                },
                {
                    "id": "positions",
                    "type": "scatter",
                    "point_shape": "circle",
                    "point_size": 40,
                    "fields": ["id", "position", "pvalue|neglog10", "refAllele", "ld:state"],
                    "id_field": "id",
                    "z_index": 1,
                    "x_axis": {"field": "position"},
                    "y1_axis": {
                        "field": "pvalue|neglog10",
                        "floor": 0,
                        "upper_buffer": 0.05,
                        "min_extent": [0, 10],
                    },
                    "color": [
                        {
                            "scale_function": "if",
                            "field": "ld:isrefvar",
                            "parameters": {"field_value": 1, "then": "#9632b8"},
                        },
                        {
                            "scale_function": "numerical_bin",
                            "field": "ld:state",
                            "parameters": {
                                "breaks": [0, 0.2, 0.4, 0.6, 0.8],
                                "values": ["#357ebd", "#46b8da", "#5cb85c", "#eea236", "#d43f3a"],
                            },
                        },
                        "#b8b8b8",
                    ],
                    "highlighted": {"onmouseover": "toggle"},
                    "selected": {"onclick": "toggle"},
                    "tooltip": {
                        "show": {"or": ["highlighted", "selected"]},
                        "hide": {"and": ["unhighlighted", "unselected"]},
                    },
                },
            ],
        },
        {
            "id": "genes",
            "width": PLOT_WIDTH,
            "height": PLOT_HEIGHT / 2,
            "min_width": PLOT_MIN_WIDTH,
            "min_height": PLOT_MIN_HEIGHT / 2,
            "proportional_width": 1,
            "proportional_height": 0.5,
            "margin": {"top": 20, "right": 50, "bottom": 20, "left": 50},
            "axes": {},
            "data_layers": [
                {
                    "id": "genes",
                    "type": "genes",
                    "fields": ["gene:gene"],
                    "id_field": "gene_id",
                    "selected": {"onclick": "toggle"},
                    "tooltip": {
                        "show": {"or": ["highlighted", "selected"]},
                        "hide": {"and": ["unhighlighted", "unselected"]},
                    },
                }
            ],
        },
    ],
}

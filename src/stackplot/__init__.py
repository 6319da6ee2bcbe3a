"""stackplot: layout resolution and geometry for stacked-panel charts."""

import logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

from stackplot.context import ChartContext  # noqa: E402
from stackplot.layout.geometry import Plot  # noqa: E402
from stackplot.layout.merge import merge_layouts  # noqa: E402
from stackplot.layout.panel import Panel  # noqa: E402

__all__ = ["ChartContext", "Panel", "Plot", "merge_layouts", "__version__"]

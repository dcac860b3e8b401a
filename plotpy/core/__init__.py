"""
Graph entities, figure aggregator and numeric serialization.

Example:
    from plotpy.core import Contour, Plot
"""

from plotpy.core.errors import (
    PlotFileError,
    PlotPyError,
    RendererError,
    SerializationError,
)
from plotpy.core.graph_maker import GraphMaker
from plotpy.core.contour import Contour
from plotpy.core.plot import Plot

__all__ = [
    "Contour",
    "GraphMaker",
    "Plot",
    "PlotFileError",
    "PlotPyError",
    "RendererError",
    "SerializationError",
]

"""
plotpy: compose matplotlib figures as scripts and render them with Python.

Graph entities such as ``Contour`` accumulate script statements, ``Plot``
composes them with figure-wide directives and ``Plot.save`` runs the
resulting script in a separate Python process.
"""

from plotpy.configs import RendererConfig, load_renderer_config
from plotpy.core import (
    Contour,
    GraphMaker,
    Plot,
    PlotFileError,
    PlotPyError,
    RendererError,
    SerializationError,
)

__version__ = "0.1.0"

__all__ = [
    "Contour",
    "GraphMaker",
    "Plot",
    "PlotFileError",
    "PlotPyError",
    "RendererConfig",
    "RendererError",
    "SerializationError",
    "load_renderer_config",
]

"""
Constants for the plotpy core.

This module defines the script fragments and defaults shared by the graph
entities and the figure aggregator.
"""

# Message of the error raised when the renderer prints diagnostics
RENDERER_FAILED_MESSAGE = "python3 failed; please see the log file"

# Colormaps selected by Contour.colormap_index (wraps around)
COLORMAPS = [
    "bwr",
    "RdBu",
    "hsv",
    "jet",
    "terrain",
    "pink",
    "Greys",
    "viridis",
    "plasma",
]

# Figure-level statements
GRID_STYLE = "linestyle='--',color='grey',zorder=-1000"
SAVEFIG_OPTIONS = "bbox_inches='tight', bbox_extra_artists=EXTRA_ARTISTS"

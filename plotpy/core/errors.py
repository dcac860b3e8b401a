"""
Custom exceptions for the plotpy core.

The three failure kinds of the figure pipeline are kept apart so callers can
react to each one: bad numeric input at draw time, filesystem faults while
saving, and diagnostics reported by the renderer process.
"""

from pathlib import Path


class PlotPyError(Exception):
    """Base exception for all plotpy errors."""

    pass


class SerializationError(PlotPyError):
    """Raised when numeric input cannot be turned into script text."""

    pass


class PlotFileError(PlotPyError):
    """Raised when the script file, log file or target directory cannot be written."""

    pass


class RendererError(PlotPyError):
    """Raised when the renderer process reports diagnostics.

    The diagnostics themselves are stored in the log file at ``log_path``.
    """

    def __init__(self, message: str, log_path: Path | None = None):
        super().__init__(message)
        self.log_path = log_path

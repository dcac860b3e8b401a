"""Figure aggregator collecting graph entities and figure-wide directives."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from plotpy.configs.config import RendererConfig
from plotpy.core.constants import GRID_STYLE, RENDERER_FAILED_MESSAGE, SAVEFIG_OPTIONS
from plotpy.core.conversions import format_number, string_literal
from plotpy.core.errors import PlotFileError, RendererError
from plotpy.core.graph_maker import GraphMaker
from plotpy.renderer.python_runner import call_python3
from plotpy.utils.logging_config import LoggerAdapter, get_logger, set_log_level
from plotpy.utils.os import sibling_path

logger = get_logger(__name__)


class Plot(GraphMaker):
    """
    Driver that composes a figure and calls Python to render it.

    Every directive appends one statement group to the figure buffer, in
    call order. Entities are copied into the buffer by ``add``.

    Example:
        >>> plot = Plot()
        >>> plot.equal()
        >>> plot.range(-1.0, 1.0, 0.0, 2.0)
        >>> plot.grid_and_labels("x-label", "y-label")
        >>> plot.save("/tmp/plotpy/example.svg")  # doctest: +SKIP
    """

    def __init__(self, config: RendererConfig | None = None):
        """
        Initialize an empty figure.

        Args:
            config: Renderer settings (default: RendererConfig())
        """
        self.config = config or RendererConfig()
        self.buffer = ""
        if config is not None:
            set_log_level(config.log_level)

    def add(self, graph: GraphMaker) -> None:
        """Append the complete current buffer of a graph entity."""
        self.buffer += graph.get_buffer()

    def get_buffer(self) -> str:
        return self.buffer

    def save(self, figure_path: str | Path) -> Path:
        """
        Write the script next to the figure and run it with Python.

        The script is written to ``<stem>.py``. If the interpreter prints
        anything, the output is stored in ``<stem>.log`` and the figure is
        considered not produced; otherwise a log left by an earlier failed
        save is removed. The figure buffer is left untouched, so a
        figure can be saved several times.

        Args:
            figure_path: Image file to create; the extension selects the format

        Returns:
            Resolved path of the image file

        Raises:
            PlotFileError: If the script, log file or directory cannot be written
            RendererError: If the interpreter reported diagnostics
        """
        figure_path = Path(figure_path).resolve()
        figure_logger = LoggerAdapter(logger, {"figure": figure_path.name})

        commands = (
            f"{self.buffer}\n"
            f"fn={string_literal(str(figure_path))}\n"
            f"plt.savefig(fn, {SAVEFIG_OPTIONS})\n"
        )
        script_path = sibling_path(figure_path, self.config.script_extension)
        log_path = sibling_path(figure_path, self.config.log_extension)
        output = call_python3(commands, script_path, self.config)

        if output:
            try:
                log_path.write_text(output, encoding=self.config.encoding)
            except OSError as error:
                raise PlotFileError(f"cannot write log file {log_path}: {error}") from error
            figure_logger.error("Renderer failed; diagnostics written to %s", log_path)
            raise RendererError(RENDERER_FAILED_MESSAGE, log_path=log_path)

        # a log left by an earlier failed save no longer describes this figure
        try:
            log_path.unlink(missing_ok=True)
        except OSError as error:
            raise PlotFileError(f"cannot remove stale log file {log_path}: {error}") from error
        figure_logger.info("Saved figure to %s", figure_path)
        return figure_path

    # Subplots

    def subplot(self, row: int, col: int, index: int) -> None:
        """
        Configure subplots.

        Args:
            row: Number of rows in the subplot grid
            col: Number of columns in the subplot grid
            index: Subplot to activate; indices start at one
        """
        self.buffer += f"\nplt.subplot({row},{col},{index})\n"

    def subplot_horizontal_gap(self, value: float) -> None:
        """Set the horizontal gap between subplots."""
        self.buffer += f"plt.subplots_adjust(hspace={format_number(value)})\n"

    def subplot_vertical_gap(self, value: float) -> None:
        """Set the vertical gap between subplots."""
        self.buffer += f"plt.subplots_adjust(wspace={format_number(value)})\n"

    def subplot_gap(self, horizontal: float, vertical: float) -> None:
        """Set the horizontal and vertical gaps between subplots."""
        self.buffer += (
            f"plt.subplots_adjust(hspace={format_number(horizontal)},"
            f"wspace={format_number(vertical)})\n"
        )

    # Axes

    def equal(self) -> None:
        """Use the same scale for both axes."""
        self.buffer += "plt.axis('equal')\n"

    def hide_axes(self) -> None:
        self.buffer += "plt.axis('off')\n"

    def range(self, xmin: float, xmax: float, ymin: float, ymax: float) -> None:
        """Set the axes limits."""
        self.buffer += f"plt.axis([{_join(xmin, xmax, ymin, ymax)}])\n"

    def range_from_limits(self, limits: Sequence[float]) -> None:
        """
        Set the axes limits from ``[xmin, xmax, ymin, ymax]``.

        Raises:
            ValueError: If ``limits`` does not hold exactly four values
        """
        if len(limits) != 4:
            raise ValueError(f"Expected 4 limits (xmin, xmax, ymin, ymax), got {len(limits)}")
        self.range(*limits)

    def xmin(self, xmin: float) -> None:
        self._partial_range(xmin=xmin)

    def xmax(self, xmax: float) -> None:
        self._partial_range(xmax=xmax)

    def ymin(self, ymin: float) -> None:
        self._partial_range(ymin=ymin)

    def ymax(self, ymax: float) -> None:
        self._partial_range(ymax=ymax)

    def xrange(self, xmin: float, xmax: float) -> None:
        """Set the x limits and keep the y limits."""
        self._partial_range(xmin=xmin, xmax=xmax)

    def yrange(self, ymin: float, ymax: float) -> None:
        """Set the y limits and keep the x limits."""
        self._partial_range(ymin=ymin, ymax=ymax)

    def xnticks(self, num: int) -> None:
        """Set the number of ticks along x; zero removes the ticks."""
        self.buffer += _nticks("get_xaxis", num)

    def ynticks(self, num: int) -> None:
        """Set the number of ticks along y; zero removes the ticks."""
        self.buffer += _nticks("get_yaxis", num)

    # Labels

    def xlabel(self, label: str) -> None:
        self.buffer += f"plt.xlabel({string_literal(label)})\n"

    def ylabel(self, label: str) -> None:
        self.buffer += f"plt.ylabel({string_literal(label)})\n"

    def labels(self, xlabel: str, ylabel: str) -> None:
        self.xlabel(xlabel)
        self.ylabel(ylabel)

    def grid_and_labels(self, xlabel: str, ylabel: str) -> None:
        """Add a dashed grid behind the data and both axis labels."""
        self.buffer += f"plt.grid({GRID_STYLE})\n"
        self.labels(xlabel, ylabel)

    def title(self, title: str) -> None:
        self.buffer += f"plt.title({string_literal(title)})\n"

    # Figure

    def set_figure_size_inches(self, width: float, height: float) -> None:
        self.buffer += (
            f"plt.gcf().set_size_inches({format_number(width)},{format_number(height)})\n"
        )

    def clear_current_figure(self) -> None:
        self.buffer += "plt.clf()\n"

    def _partial_range(
        self,
        xmin: float | None = None,
        xmax: float | None = None,
        ymin: float | None = None,
        ymax: float | None = None,
    ) -> None:
        # limits left as None keep their current value
        limits = [
            format_number(value) if value is not None else f"plt.axis()[{position}]"
            for position, value in enumerate((xmin, xmax, ymin, ymax))
        ]
        self.buffer += f"plt.axis([{','.join(limits)}])\n"


def _join(*values: float) -> str:
    return ",".join(format_number(value) for value in values)


def _nticks(axis_getter: str, num: int) -> str:
    if num == 0:
        return f"plt.gca().{axis_getter}().set_ticks([])\n"
    return f"plt.gca().{axis_getter}().set_major_locator(tck.MaxNLocator({num}))\n"

"""Contour plots of scalar fields given on rectangular grids."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from plotpy.core.constants import COLORMAPS
from plotpy.core.conversions import (
    check_same_shape,
    format_number,
    matrix_to_array,
    string_literal,
    vector_to_num_list,
    vector_to_str_list,
)
from plotpy.core.graph_maker import GraphMaker

Grid = Sequence[Sequence[float]]


@dataclass
class Contour(GraphMaker):
    """
    Generates a contour plot.

    Configuration is held in plain attributes and read at every draw call,
    so the same object can draw several times with different settings.

    Example:
        >>> contour = Contour()
        >>> contour.levels = [0.25, 0.5, 1.0]
        >>> contour.draw_filled(x, y, z)  # doctest: +SKIP
    """

    colors: list[str] = field(default_factory=list)
    levels: list[float] = field(default_factory=list)
    colormap_index: int = 0
    colormap_name: str = ""
    number_format: str = ""
    no_lines: bool = False
    no_labels: bool = False
    no_inline: bool = False
    no_colorbar: bool = False
    colorbar_label: str = ""
    selected_value: float = 0.0
    selected_color: str = ""
    selected_linewidth: float = 0.0
    line_color: str = "black"
    line_style: str = ""
    line_width: float = 0.0
    fontsize_labels: float = 0.0
    buffer: str = field(default="", repr=False)

    def draw_filled(self, x: Grid, y: Grid, z: Grid) -> None:
        """
        Draw a filled contour.

        :param x: Grid of x coordinates
        :param y: Grid of y coordinates, same shape as x
        :param z: Grid of values, same shape as x
        :raises SerializationError: If the grids are ragged or differ in shape
        """
        commands = self._grid_commands(x, y, z)
        commands += f"plt.contourf(x,y,z{self.options()})\n"
        self.buffer += commands

    def draw_lines(self, x: Grid, y: Grid, z: Grid) -> None:
        """
        Draw contour lines, labelled unless ``no_labels`` is set.

        :raises SerializationError: If the grids are ragged or differ in shape
        """
        commands = self._grid_commands(x, y, z)
        commands += f"cl=plt.contour(x,y,z{self.options_line()})\n"
        if not self.no_labels:
            commands += f"plt.clabel(cl{self.options_label()})\n"
        self.buffer += commands

    def draw(self, x: Grid, y: Grid, z: Grid) -> None:
        """
        Draw a filled contour with lines, labels, colorbar and selected level.

        Each decoration is controlled by its flag: ``no_lines``,
        ``no_labels``, ``no_colorbar``; the selected level is drawn only
        when ``selected_color`` is set.

        :raises SerializationError: If the grids are ragged or differ in shape
        """
        commands = self._grid_commands(x, y, z)
        commands += f"cf=plt.contourf(x,y,z{self.options_filled()})\n"
        if not self.no_lines:
            commands += f"cl=plt.contour(x,y,z{self.options_line()})\n"
            if not self.no_labels:
                commands += f"plt.clabel(cl{self.options_label()})\n"
        if not self.no_colorbar:
            commands += f"cb=plt.colorbar(cf{self.options_colorbar()})\n"
            if self.colorbar_label:
                commands += f"cb.ax.set_ylabel({string_literal(self.colorbar_label)})\n"
        if self.selected_color:
            commands += f"plt.contour(x,y,z{self.options_selected()})\n"
        self.buffer += commands

    def options(self) -> str:
        """Return the options clause of ``draw_filled``: explicit colors and levels."""
        opt = ""
        if self.colors:
            opt += f",colors={vector_to_str_list(self.colors)}"
        if self.levels:
            opt += f",levels={vector_to_num_list(self.levels)}"
        return opt

    def options_filled(self) -> str:
        """Return the filled-contour options of ``draw``, falling back to a colormap."""
        if self.colors:
            return self.options()
        return f",cmap={string_literal(self.colormap())}" + self.options()

    def options_line(self) -> str:
        opt = f",colors=[{string_literal(self.line_color)}]"
        if self.levels:
            opt += f",levels={vector_to_num_list(self.levels)}"
        if self.line_style:
            opt += f",linestyles=[{string_literal(self.line_style)}]"
        if self.line_width > 0.0:
            opt += f",linewidths=[{format_number(self.line_width)}]"
        return opt

    def options_label(self) -> str:
        opt = ""
        if self.no_inline:
            opt += ",inline=False"
        else:
            opt += ",inline=True"
        if self.number_format:
            opt += f",fmt={string_literal(self.number_format)}"
        if self.fontsize_labels > 0.0:
            opt += f",fontsize={format_number(self.fontsize_labels)}"
        return opt

    def options_colorbar(self) -> str:
        if self.number_format:
            return f",format={string_literal(self.number_format)}"
        return ""

    def options_selected(self) -> str:
        opt = (
            f",levels=[{format_number(self.selected_value)}]"
            f",colors=[{string_literal(self.selected_color)}]"
        )
        if self.selected_linewidth > 0.0:
            opt += f",linewidths=[{format_number(self.selected_linewidth)}]"
        return opt

    def colormap(self) -> str:
        """Return the colormap name: ``colormap_name`` or the one picked by ``colormap_index``."""
        if self.colormap_name:
            return self.colormap_name
        return COLORMAPS[self.colormap_index % len(COLORMAPS)]

    def get_buffer(self) -> str:
        return self.buffer

    def clear_buffer(self) -> None:
        """Forget everything drawn so far; configuration is kept."""
        self.buffer = ""

    @staticmethod
    def _grid_commands(x: Grid, y: Grid, z: Grid) -> str:
        check_same_shape(x=x, y=y, z=z)
        return matrix_to_array("x", x) + matrix_to_array("y", y) + matrix_to_array("z", z)

"""
Serialization of numeric data into Python script literals.

Every function returns text; callers append it to their buffer once all the
inputs of a draw call have been converted, so a failed conversion never
leaves a half-written statement behind.
"""

import math
from collections.abc import Sequence

import numpy as np

from plotpy.core.errors import SerializationError


def format_number(value: float) -> str:
    """
    Format a number as a Python literal.

    Integral values drop their fractional part and other values use the
    shortest representation that round-trips. Non-finite values are written
    with their numpy names.

    :param value: Number to format
    :type value: float
    :return: Python literal for the number
    :rtype: str
    :raises SerializationError: If the value is not a real number

    Example:
        >>> format_number(-1.0)
        '-1'
        >>> format_number(0.25)
        '0.25'
    """
    try:
        number = float(value)
    except (TypeError, ValueError) as error:
        raise SerializationError(f"Value is not a real number: {value!r}") from error

    if math.isnan(number):
        return "np.nan"
    if math.isinf(number):
        return "np.inf" if number > 0 else "-np.inf"
    if number.is_integer():
        return str(int(number))
    return repr(number)


def string_literal(text: str) -> str:
    """
    Convert text into a Python string literal, quotes included.

    The literal evaluates back to exactly ``text``, so quotes, backslashes
    and newlines survive; mathtext such as ``$\\alpha$`` is kept as is.

    :param text: Text to embed in the script
    :type text: str
    :return: String literal, e.g. ``"it's"`` or ``'C:\\\\'``
    :rtype: str
    """
    return repr(str(text))


def _dimension(values: object) -> int:
    try:
        return np.ndim(values)
    except ValueError:
        # inhomogeneous nested sequences
        return -1


def _join_numbers(values: Sequence[float]) -> str:
    return ",".join(format_number(value) for value in values)


def vector_to_num_list(values: Sequence[float]) -> str:
    """
    Convert numbers into a bare Python list literal, e.g. ``[0.25,0.5,1]``.

    :param values: Numbers to convert
    :type values: Sequence[float]
    :return: List literal
    :rtype: str
    """
    return f"[{_join_numbers(values)}]"


def vector_to_str_list(values: Sequence[str]) -> str:
    """
    Convert strings into a quoted Python list literal, e.g. ``['red','blue']``.

    :param values: Strings to convert
    :type values: Sequence[str]
    :return: List literal
    :rtype: str
    """
    return "[" + ",".join(string_literal(value) for value in values) + "]"


def vector_to_array(name: str, values: Sequence[float]) -> str:
    """
    Build the statement assigning a 1-D numpy array to ``name``.

    :param name: Variable name in the script
    :type name: str
    :param values: Numbers to serialize
    :type values: Sequence[float]
    :return: Newline-terminated assignment statement
    :rtype: str
    :raises SerializationError: If the values are not one-dimensional

    Example:
        >>> vector_to_array("x", [1.0, 2.5])
        'x=np.array([1,2.5],dtype=float)\\n'
    """
    if _dimension(values) != 1:
        raise SerializationError(f"'{name}' must be one-dimensional")

    return f"{name}=np.array({vector_to_num_list(values)},dtype=float)\n"


def matrix_to_array(name: str, rows: Sequence[Sequence[float]]) -> str:
    """
    Build the statement assigning a 2-D numpy array to ``name``.

    Each row is written as its own bracketed list and the nested list is
    wrapped in ``np.array`` so the drawing calls receive a numeric matrix.

    :param name: Variable name in the script
    :type name: str
    :param rows: Rows of numbers, all with the same length
    :type rows: Sequence[Sequence[float]]
    :return: Newline-terminated assignment statement
    :rtype: str
    :raises SerializationError: If the rows do not all have the same length

    Example:
        >>> matrix_to_array("z", [[1.0, 2.0], [3.0, 4.0]])
        'z=np.array([[1,2],[3,4]],dtype=float)\\n'
    """
    column_count = None
    serialized_rows = []
    for row_index, row in enumerate(rows):
        if _dimension(row) != 1:
            raise SerializationError(f"Row {row_index} of '{name}' is not a sequence of numbers")
        if column_count is None:
            column_count = len(row)
        elif len(row) != column_count:
            raise SerializationError(
                f"All rows of '{name}' must have the same length: "
                f"row 0 has {column_count} values but row {row_index} has {len(row)}"
            )
        serialized_rows.append(vector_to_num_list(row))

    return f"{name}=np.array([{','.join(serialized_rows)}],dtype=float)\n"


def grid_shape(name: str, rows: Sequence[Sequence[float]]) -> tuple[int, int]:
    """
    Return the ``(rows, columns)`` shape of a rectangular grid.

    :param name: Grid name used in error messages
    :type name: str
    :param rows: Grid rows
    :type rows: Sequence[Sequence[float]]
    :return: Number of rows and columns
    :rtype: tuple[int, int]
    :raises SerializationError: If the grid is ragged
    """
    if any(_dimension(row) != 1 for row in rows):
        raise SerializationError(f"'{name}' must be a sequence of rows of numbers")
    row_lengths = {len(row) for row in rows}
    if len(row_lengths) > 1:
        raise SerializationError(f"All rows of '{name}' must have the same length")
    column_count = row_lengths.pop() if row_lengths else 0
    return len(rows), column_count


def check_same_shape(**grids: Sequence[Sequence[float]]) -> tuple[int, int]:
    """
    Check that all named grids share one rectangular shape.

    :param grids: Grids keyed by their script names
    :return: The common ``(rows, columns)`` shape
    :rtype: tuple[int, int]
    :raises SerializationError: If a grid is ragged or the shapes differ

    Example:
        >>> check_same_shape(x=[[0, 1]], y=[[0, 0]], z=[[1, 2]])
        (1, 2)
    """
    shapes = {name: grid_shape(name, rows) for name, rows in grids.items()}
    distinct_shapes = set(shapes.values())
    if len(distinct_shapes) > 1:
        described = ", ".join(f"{name}={rows}x{cols}" for name, (rows, cols) in shapes.items())
        raise SerializationError(f"Grids must have the same shape: {described}")
    return distinct_shapes.pop() if distinct_shapes else (0, 0)

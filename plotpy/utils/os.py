"""Filesystem helpers for plotpy."""

from pathlib import Path


def create_directory(directory_path: str | Path) -> Path:
    """Create a directory at the specified path if it doesn't already exist.

    Creates all intermediate directories as needed. If the directory already
    exists, this function does nothing.

    :param directory_path: The path to the directory that should be created
    :type directory_path: str | Path
    :return: The resolved directory path
    :rtype: Path
    :raises ValueError: If directory_path is None
    :raises OSError: If the directory cannot be created

    Example:
        >>> create_directory("/tmp/plotpy/figures")
        PosixPath('/tmp/plotpy/figures')
    """
    if directory_path is None:
        raise ValueError("Directory path cannot be None")

    absolute_path = Path(directory_path).resolve()
    absolute_path.mkdir(parents=True, exist_ok=True)
    return absolute_path


def sibling_path(file_path: str | Path, extension: str) -> Path:
    """Return the path next to ``file_path`` with the same stem and a new extension.

    :param file_path: Reference file, e.g. ``/tmp/fig.svg``
    :type file_path: str | Path
    :param extension: New extension including the leading dot, e.g. ``.py``
    :type extension: str
    :return: Path with the extension replaced (``/tmp/fig.py``)
    :rtype: Path
    :raises ValueError: If the extension does not start with a dot

    Example:
        >>> sibling_path("/tmp/fig.svg", ".log")
        PosixPath('/tmp/fig.log')
    """
    if not extension.startswith("."):
        raise ValueError(f"Extension must start with a dot: {extension!r}")

    return Path(file_path).with_suffix(extension)

"""
Execution of generated scripts by an external Python interpreter.

The interpreter is started once per call, runs the script to completion and
its combined stdout/stderr is handed back to the caller. Any output at all
is treated as a failure by the figure pipeline, so the script header keeps
matplotlib quiet by selecting the non-interactive backend.
"""

import subprocess
from pathlib import Path

from plotpy.configs.config import RendererConfig
from plotpy.core.errors import PlotFileError
from plotpy.utils.logging_config import get_logger
from plotpy.utils.os import create_directory

logger = get_logger(__name__)

PYTHON_HEADER = """### file generated by plotpy
import numpy as np
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import matplotlib.ticker as tck
EXTRA_ARTISTS = []
def add_to_ea(obj):
    if obj is not None: EXTRA_ARTISTS.append(obj)
"""


def write_script(commands: str, script_path: Path, encoding: str = "utf-8") -> Path:
    """
    Write the script header followed by the commands.

    :param commands: Script statements
    :type commands: str
    :param script_path: Destination of the script; missing directories are created
    :type script_path: Path
    :param encoding: Text encoding of the script file
    :type encoding: str
    :return: Resolved path of the written script
    :rtype: Path
    :raises PlotFileError: If the directory or the file cannot be written
    """
    try:
        directory = create_directory(Path(script_path).parent)
        resolved_path = directory / Path(script_path).name
        resolved_path.write_text(PYTHON_HEADER + commands, encoding=encoding)
    except OSError as error:
        raise PlotFileError(f"cannot write script file {script_path}: {error}") from error

    logger.debug("Wrote %d characters to %s", len(commands), resolved_path)
    return resolved_path


def run_script(script_path: Path, config: RendererConfig) -> str:
    """
    Run a script with the configured interpreter and wait for it to finish.

    The exit status is only logged: callers decide from the output alone.
    An interpreter that cannot be started is reported through the returned
    text as well.

    :param script_path: Script to execute, also fixes the working directory
    :type script_path: Path
    :param config: Renderer settings
    :type config: RendererConfig
    :return: Combined stdout and stderr of the interpreter
    :rtype: str
    """
    command = [config.python_command, str(script_path)]
    logger.debug("Running %s", " ".join(command))

    try:
        result = subprocess.run(
            command,
            cwd=str(Path(script_path).parent),
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            encoding=config.encoding,
            errors="replace",
            check=False,
        )
    except OSError as error:
        logger.error("Cannot start %s: %s", config.python_command, error)
        return f"cannot start '{config.python_command}': {error}\n"

    if result.returncode != 0:
        logger.debug("%s exited with status %d", config.python_command, result.returncode)
    return result.stdout or ""


def call_python3(
    commands: str, script_path: Path, config: RendererConfig | None = None
) -> str:
    """
    Write the commands to a script file and execute it.

    :param commands: Script statements, without the header
    :type commands: str
    :param script_path: Where to write the script
    :type script_path: Path
    :param config: Renderer settings, defaults to ``RendererConfig()``
    :type config: RendererConfig | None
    :return: Combined output of the interpreter; empty on success
    :rtype: str
    :raises PlotFileError: If the script cannot be written
    """
    config = config or RendererConfig()
    resolved_path = write_script(commands, script_path, config.encoding)
    return run_script(resolved_path, config)

"""Dispatch of generated scripts to the external renderer."""

from plotpy.renderer.python_runner import (
    PYTHON_HEADER,
    call_python3,
    run_script,
    write_script,
)

__all__ = ["PYTHON_HEADER", "call_python3", "run_script", "write_script"]

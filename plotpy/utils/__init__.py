"""
Utility modules for plotpy.

Import directly from specific modules to avoid circular dependencies.

Example:
    from plotpy.utils.logging_config import get_logger
    from plotpy.utils.os import sibling_path
"""

from plotpy.utils.logging_config import get_logger, setup_logger

__all__ = [
    "setup_logger",
    "get_logger",
]

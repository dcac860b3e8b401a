"""Default values of the renderer configuration."""

DEFAULT_PYTHON_COMMAND = "python3"
DEFAULT_ENCODING = "utf-8"
DEFAULT_LOG_LEVEL = "INFO"

# File extensions of the artifacts written next to a figure
SCRIPT_EXTENSION = ".py"
LOG_EXTENSION = ".log"

# Section (INI) or key (JSON/YAML) holding the renderer options
RENDERER_SECTION = "renderer"

from pathlib import Path

# Option defaults (overrideable via config file and CLI flags)
DEFAULT_ROOT_DIR = Path(".")
DEFAULT_TRUE_TEXT = "si tiene"
DEFAULT_FALSE_TEXT = "no tiene"

# Species marker files: <species><suffix>
MARKER_SUFFIX = ".txt"

PROG_NAME = "dicotodir"

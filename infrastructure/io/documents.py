"""Key document loading."""

import json
from pathlib import Path
from typing import Any

from infrastructure.io.fs import ensure_exists


def load_key_document(path: Path) -> Any:
    """
    Read and parse a JSON key document.

    The parsed value is returned as-is; shape checks happen during traversal
    so that malformed entries can be skipped instead of rejecting the file.

    Args:
        path: Path to the JSON file

    Returns:
        Parsed JSON value (normally a dict of category -> list of species)

    Raises:
        FileNotFoundError: If file does not exist
        ValueError: If the file is not valid JSON (message includes line and column)
    """
    ensure_exists(path, "key file")

    try:
        with path.open("r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Could not read JSON file {path} (line {e.lineno}, column {e.colno}): {e.msg}") from e

"""I/O utilities: filesystem operations and key document loading."""

from infrastructure.io.documents import load_key_document
from infrastructure.io.fs import ensure_directory, ensure_exists, marker_path, write_marker

__all__ = [
    "ensure_exists",
    "ensure_directory",
    "marker_path",
    "write_marker",
    "load_key_document",
]

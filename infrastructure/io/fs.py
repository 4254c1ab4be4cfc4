"""Filesystem utility functions."""

import errno
from pathlib import Path

from infrastructure.constants import MARKER_SUFFIX


def ensure_exists(path: Path, what: str) -> None:
    """
    Check that a path exists, raise FileNotFoundError if not.

    Args:
        path: Path to check
        what: Description of what this path represents (for error message)

    Raises:
        FileNotFoundError: If path does not exist
    """
    if not path.exists():
        raise FileNotFoundError(f"Missing {what} at: {path}")


def ensure_directory(path: Path) -> bool:
    """
    Create a single directory level, tolerating one that already exists.

    Parents are not created. Any error other than "already exists" propagates
    as OSError, including names the OS cannot represent (embedded NUL).

    Returns:
        True if the directory was created, False if the path already existed
    """
    try:
        path.mkdir()
    except FileExistsError:
        return False
    except ValueError as e:
        raise OSError(errno.EINVAL, f"Invalid directory name: {e}", str(path)) from e
    return True


def marker_path(directory: Path, species_name: str) -> Path:
    return directory / f"{species_name}{MARKER_SUFFIX}"


def write_marker(directory: Path, species_name: str) -> Path:
    """Create (or truncate) the empty marker file for a species and return its path."""
    path = marker_path(directory, species_name)
    with path.open("w", encoding="utf-8"):
        pass
    return path

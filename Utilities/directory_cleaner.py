"""
Directory cleaning for the per-record cache.

``clear_directory`` empties a directory without removing the directory
itself. Deletion is post-order (children before parents) and best effort:
every entry is attempted, and failures are reported together once the walk
is complete.
"""

import logging
import os
from pathlib import Path
from typing import List, Tuple, Union

logger = logging.getLogger(__name__)


def clear_directory(directory_path: Union[str, Path]) -> int:
    """
    Delete everything inside *directory_path*.

    Args:
        directory_path: Directory to empty

    Returns:
        Number of files and directories deleted

    Raises:
        IOError: If the path is not an existing directory, or if any entry
            could not be listed or deleted
    """
    directory = Path(directory_path)
    if not directory.is_dir():
        raise IOError(f"The specified path is not a valid directory: {directory}")

    failures: List[Tuple[Path, OSError]] = []
    deleted = 0
    try:
        children = list(directory.iterdir())
    except OSError as e:
        raise IOError(f"Failed to list contents of directory: {directory}") from e

    for child in children:
        deleted += _delete_recursively(child, failures)

    if failures:
        path, error = failures[0]
        raise IOError(
            f"Failed to delete {len(failures)} entr{'y' if len(failures) == 1 else 'ies'} "
            f"under {directory}; first failure: {path} ({error})"
        )

    logger.info(f"Cleared directory {directory} ({deleted} entries deleted)")
    return deleted


def _delete_recursively(path: Path, failures: List[Tuple[Path, OSError]]) -> int:
    deleted = 0
    # Symlinked directories are unlinked, never followed.
    if path.is_dir() and not path.is_symlink():
        try:
            children = list(path.iterdir())
        except OSError as e:
            failures.append((path, e))
            return deleted
        for child in children:
            deleted += _delete_recursively(child, failures)
        try:
            os.rmdir(path)
            deleted += 1
        except OSError as e:
            failures.append((path, e))
    else:
        try:
            path.unlink()
            deleted += 1
        except OSError as e:
            failures.append((path, e))
    return deleted

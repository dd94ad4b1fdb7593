"""
Recursive listing of the local log directory.
"""
import os
from pathlib import Path
from typing import List

from loguru import logger

from ..exceptions import DirectoryUnreadableError


def _raise_unreadable(error: OSError) -> None:
    raise DirectoryUnreadableError(f"Cannot traverse {error.filename}: {error.strerror}") from error


def list_files(root: str, verbose: bool = False) -> List[str]:
    """
    List every regular file under root, recursively.

    Paths are relative to root and use '/' as separator. Order follows the
    filesystem and callers must not rely on it.

    Args:
        root: Directory to scan
        verbose: Log every path found

    Returns:
        List of relative file paths

    Raises:
        DirectoryUnreadableError: If root is missing or any directory below it
            cannot be read
    """
    root_path = Path(root)
    if not root_path.is_dir():
        raise DirectoryUnreadableError(f"Log directory does not exist or is not a directory: {root}")

    files = []
    for dirpath, _dirnames, filenames in os.walk(root_path, onerror=_raise_unreadable):
        for filename in filenames:
            full_path = Path(dirpath) / filename
            if not full_path.is_file():
                continue
            files.append(full_path.relative_to(root_path).as_posix())

    logger.debug(f"Scanned {root}: {len(files)} files")
    if verbose:
        for path in files:
            logger.debug(f"  scanned: {path}")

    return files

"""File utilities for temppath.

This module provides the filesystem primitives used to materialize temporary
paths: parent directory creation, directory creation and empty file creation.
"""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def normalize_extension(extension: str) -> str:
    """Ensure a non-empty extension starts with a dot.

    Args:
        extension: Extension with or without its leading dot

    Returns:
        The extension with a leading dot, or an empty string if it was empty
    """
    if extension and not extension.startswith("."):
        return f".{extension}"
    return extension


def ensure_parent_directory(path: str) -> Path:
    """Create the parent directory of ``path`` if it does not exist yet.

    Args:
        path: Path whose parent should exist

    Returns:
        The parent directory
    """
    parent = Path(path).parent
    parent.mkdir(parents=True, exist_ok=True)
    return parent


def create_directory(path: str) -> None:
    """Create a single directory; its parent must already exist.

    Raises:
        FileExistsError: If the path already exists
        OSError: For any other filesystem failure
    """
    Path(path).mkdir()
    logger.debug("Created temporary directory: %s", path)


def create_empty_file(path: str) -> None:
    """Create an empty file at ``path``, truncating any existing file."""
    Path(path).write_text("")
    logger.debug("Created temporary file: %s", path)

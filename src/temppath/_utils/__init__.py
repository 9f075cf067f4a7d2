"""Utility modules for temppath.

This package contains the filesystem helpers shared by the blocking and
asynchronous creation functions.
"""

from .file_utils import (
    create_directory,
    create_empty_file,
    ensure_parent_directory,
    normalize_extension,
)

__all__ = [
    "create_directory",
    "create_empty_file",
    "ensure_parent_directory",
    "normalize_extension",
]

"""Utilities for generating temporary file and directory paths."""

import logging
import os
import uuid

from .config import get_temp_root
from .exceptions import InvalidArgumentError, OutOfRangeError

logger = logging.getLogger(__name__)


def get_temp_path(
    tmpdir: str | os.PathLike[str] | None = None, max_len: int | float | None = None
) -> str:
    """Generate a unique temporary path.

    The name is a random UUID without hyphens, so each call returns a path
    different from previous calls. Nothing is created on disk; the path can be
    used for either a file or a directory.

    Args:
        tmpdir: Root directory for the path. If omitted or empty, the system's
            temporary directory is used (see ``get_temp_root``).
        max_len: Maximum length of the generated name. If omitted, the full
            32-character name is kept.

    Returns:
        The generated temporary path

    Raises:
        InvalidArgumentError: If ``tmpdir`` is not a string or path-like, or
            ``max_len`` is not a whole number
        OutOfRangeError: If ``max_len`` is less than or equal to zero
    """
    if tmpdir and not isinstance(tmpdir, (str, os.PathLike)):
        raise InvalidArgumentError(
            f"Expected type is 'str', received '{type(tmpdir).__name__}'"
        )

    if max_len is not None:
        if isinstance(max_len, float) and max_len.is_integer():
            max_len = int(max_len)
        if isinstance(max_len, bool) or not isinstance(max_len, int):
            raise InvalidArgumentError(
                f"Expected type is 'int' for max_len, received '{type(max_len).__name__}'"
            )
        if max_len <= 0:
            raise OutOfRangeError(
                f"Maximum length must be a positive number, received {max_len}"
            )

    root = os.fspath(tmpdir) if tmpdir else ""
    if not root:
        root = get_temp_root()

    unique_id = uuid.uuid4().hex
    if max_len is not None:
        unique_id = unique_id[:max_len]

    temp_path = os.path.normpath(os.path.join(root, unique_id))
    logger.debug("Generated temporary path: %s", temp_path)
    return temp_path

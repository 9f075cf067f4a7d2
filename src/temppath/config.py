"""Configuration defaults and temporary root directory lookup."""

import logging
import os
import tempfile

logger = logging.getLogger(__name__)

DEFAULT_EXTENSION = ".tmp"
DEFAULT_MAX_NAME_LENGTH = 32

UNIX_TEMP_ENV_VAR = "TMPDIR"  # Unix-like and macOS
WINDOWS_TEMP_ENV_VARS = ("TMP", "TEMP")
FALLBACK_DIR_NAME = "tmp"


def get_temp_root() -> str:
    """
    Determine the root directory for temporary paths.

    The lookup order is:
        1. ``$TMPDIR`` (Unix-like and macOS systems)
        2. ``$TMP`` or ``$TEMP`` (Windows systems)
        3. ``tempfile.gettempdir()``
        4. A ``tmp`` directory inside the current working directory

    Empty environment values are treated as unset. The environment is read on
    every call, so changes made at runtime are honoured.

    Returns:
        str: The temporary root directory. Its existence is not checked.
    """
    env_root = os.environ.get(UNIX_TEMP_ENV_VAR)
    if env_root:
        logger.debug("Using temp root from %s: %s", UNIX_TEMP_ENV_VAR, env_root)
        return env_root

    for name in WINDOWS_TEMP_ENV_VARS:
        env_root = os.environ.get(name)
        if env_root:
            logger.debug("Using temp root from %s: %s", name, env_root)
            return env_root

    try:
        return tempfile.gettempdir()
    except FileNotFoundError as e:
        fallback = os.path.join(os.getcwd(), FALLBACK_DIR_NAME)
        logger.warning(
            "No usable system temporary directory (%s). Falling back to %s",
            e,
            fallback,
        )
        return fallback

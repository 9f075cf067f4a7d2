"""temppath - Generate and create unique temporary file and directory paths.

This package generates collision-resistant temporary paths from random UUIDs,
and optionally creates them as directories or empty files, either blocking,
as a coroutine, or with a completion callback.

Example:
    ```python
    from temppath import create_temp_path_sync, get_temp_path

    # Just a path, nothing is created
    path = get_temp_path()

    # A short name under a custom root
    path = get_temp_path("/var/cache/myapp", 8)

    # Create a temporary directory under the system temp dir
    directory = create_temp_path_sync()

    # Create an empty file ending with ".json"
    filename = create_temp_path_sync({"as_file": True, "extension": "json"})
    ```

Callback and coroutine forms:
    ```python
    from temppath import acreate_temp_path, create_temp_path

    def on_created(err, path):
        if err is not None:
            print(f"Failed: {err}")
        else:
            print(f"Created {path}")

    create_temp_path({"as_file": True}, on_created)

    path = await acreate_temp_path("/tmp/work")
    ```

Logging:
    To enable debug logging in your application:
    ```python
    import logging
    logging.getLogger('temppath').setLevel(logging.DEBUG)
    ```
"""

import logging

from .arguments import ResolvedArguments, resolve_arguments
from .config import get_temp_root
from .exceptions import (
    CreationFailedError,
    InvalidArgumentError,
    OutOfRangeError,
    TempPathError,
)
from .materializer import acreate_temp_path, create_temp_path, create_temp_path_sync
from .temp_path_utils import get_temp_path
from .types import TempPathCallback, TempPathOptions

# Configure module-level logger
logger = logging.getLogger(__name__)
# Use NullHandler by default - consuming applications configure as needed
logger.addHandler(logging.NullHandler())

# Get version from package metadata (single source of truth in pyproject.toml)
try:
    from importlib.metadata import version

    __version__ = version("temppath")
except Exception:
    # Fallback for development environments where package isn't installed
    __version__ = "0.0.0.dev"

__all__ = [
    # Path generation
    "get_temp_path",
    "get_temp_root",
    # Creation
    "create_temp_path",
    "acreate_temp_path",
    "create_temp_path_sync",
    "resolve_arguments",
    "ResolvedArguments",
    # Types
    "TempPathOptions",
    "TempPathCallback",
    # Errors
    "TempPathError",
    "InvalidArgumentError",
    "OutOfRangeError",
    "CreationFailedError",
]

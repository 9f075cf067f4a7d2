"""Creation of temporary directories and files.

Three entry points share the same steps:

- ``create_temp_path``: non-blocking, reports completion through a callback
- ``acreate_temp_path``: coroutine form of the same operation
- ``create_temp_path_sync``: blocking, returns the path or raises

Argument errors are always raised immediately. Filesystem errors are passed
to the callback, raised from the coroutine, or wrapped in
``CreationFailedError`` by the blocking form.
"""

import asyncio
import functools
import logging
import threading
from typing import Any

from ._utils.file_utils import (
    create_directory,
    create_empty_file,
    ensure_parent_directory,
    normalize_extension,
)
from .arguments import ResolvedArguments, resolve_arguments
from .exceptions import CreationFailedError
from .temp_path_utils import get_temp_path
from .types import TempPathCallback

logger = logging.getLogger(__name__)

# In-flight callback tasks; the event loop only keeps weak references
_pending_tasks: set[asyncio.Task[str]] = set()


def _target_path(resolved: ResolvedArguments) -> str:
    """Generate the final path: the resolved path plus the extension for files."""
    options = resolved.options
    temp_path = get_temp_path(resolved.tmpdir, options.max_name_length)
    if options.as_file:
        return temp_path + normalize_extension(options.extension)
    return temp_path


async def _materialize(target: str, as_file: bool) -> str:
    # One filesystem call at a time, each off the event loop thread
    await asyncio.to_thread(ensure_parent_directory, target)
    if as_file:
        await asyncio.to_thread(create_empty_file, target)
    else:
        await asyncio.to_thread(create_directory, target)
    return target


def _deliver(callback: TempPathCallback, task: "asyncio.Task[str]") -> None:
    _pending_tasks.discard(task)

    if task.cancelled():
        logger.debug("Temporary path creation was cancelled")
        callback(asyncio.CancelledError(), None)
        return

    error = task.exception()
    if error is not None:
        logger.debug("Temporary path creation failed: %s", error)
        callback(error, None)
        return

    callback(None, task.result())


def _create(target: str, as_file: bool) -> str:
    ensure_parent_directory(target)
    if as_file:
        create_empty_file(target)
    else:
        create_directory(target)
    return target


def _run_in_thread(
    target: str,
    as_file: bool,
    callback: TempPathCallback,
    returned: threading.Event,
) -> None:
    try:
        result = _create(target, as_file)
    except Exception as e:
        logger.debug("Temporary path creation failed: %s", e)
        returned.wait()
        callback(e, None)
    else:
        returned.wait()
        callback(None, result)


def create_temp_path(tmpdir: Any = None, options: Any = None, callback: Any = None) -> None:
    """
    Asynchronously create a temporary directory or file and report it through a callback.

    Accepted call forms::

        create_temp_path(callback)
        create_temp_path(tmpdir, callback)
        create_temp_path(options, callback)
        create_temp_path(tmpdir, options, callback)

    The callback is invoked exactly once as ``callback(None, path)`` on success or
    ``callback(error, None)`` on failure, where ``error`` is the underlying ``OSError``.
    When called from a running event loop the work runs as a task on that loop and
    the callback fires on a later loop iteration. Without a running loop the work
    runs in a dedicated worker thread and the callback fires from that thread,
    never before this function has returned.

    Parameters:
        tmpdir: Root directory. If omitted or empty, the system's temporary directory is used.
        options: ``TempPathOptions`` or a mapping with ``as_file``, ``extension`` and
            ``max_name_length`` keys.
        callback: Function receiving ``(error, result_path)``.

    Raises:
        InvalidArgumentError: If no callback is given or an argument has the wrong type.
        OutOfRangeError: If ``max_name_length`` is less than or equal to zero.
    """
    resolved = resolve_arguments(tmpdir, options, callback, require_callback=True)
    target = _target_path(resolved)
    as_file = resolved.options.as_file

    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        loop = None

    if loop is None:
        logger.debug("No running event loop, creating %s in a worker thread", target)
        # The worker holds the callback until this function has returned
        returned = threading.Event()
        worker = threading.Thread(
            target=_run_in_thread,
            args=(target, as_file, resolved.callback, returned),
            name="temppath-create",
        )
        worker.start()
        returned.set()
        return

    task = loop.create_task(_materialize(target, as_file))
    _pending_tasks.add(task)
    task.add_done_callback(functools.partial(_deliver, resolved.callback))


async def acreate_temp_path(tmpdir: Any = None, options: Any = None) -> str:
    """Create a temporary directory or file without blocking the event loop.

    Accepts the same ``(tmpdir, options)`` forms as ``create_temp_path_sync``,
    including ``acreate_temp_path(options)``.

    Args:
        tmpdir: Root directory. If omitted or empty, the system's temporary
            directory is used.
        options: ``TempPathOptions`` or a mapping of option keys

    Returns:
        The path of the created directory or file

    Raises:
        InvalidArgumentError: If an argument has the wrong type
        OutOfRangeError: If ``max_name_length`` is less than or equal to zero
        OSError: If the filesystem operation fails
    """
    resolved = resolve_arguments(tmpdir, options, require_callback=False)
    return await _materialize(_target_path(resolved), resolved.options.as_file)


def create_temp_path_sync(tmpdir: Any = None, options: Any = None) -> str:
    """Synchronously create a temporary directory or file.

    Args:
        tmpdir: Root directory, or the options record when called as
            ``create_temp_path_sync(options)``. If omitted or empty, the
            system's temporary directory is used.
        options: ``TempPathOptions`` or a mapping of option keys

    Returns:
        The path of the created directory or file

    Raises:
        InvalidArgumentError: If an argument has the wrong type
        OutOfRangeError: If ``max_name_length`` is less than or equal to zero
        CreationFailedError: If the directory or file could not be created
    """
    resolved = resolve_arguments(tmpdir, options, require_callback=False)
    target = _target_path(resolved)
    as_file = resolved.options.as_file
    kind = "file" if as_file else "directory"

    try:
        _create(target, as_file)
    except OSError as e:
        raise CreationFailedError(
            f"Failed to create temporary {kind}: {target}",
            kind=kind,
            path=target,
            cause=e,
        ) from e

    return target

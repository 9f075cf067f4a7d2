"""Argument resolution for the temporary path creation functions.

The creation functions accept a flexible positional argument list, mirroring
the original JavaScript API::

    create_temp_path(callback)
    create_temp_path(tmpdir, callback)
    create_temp_path(options, callback)
    create_temp_path(tmpdir, options, callback)

    create_temp_path_sync()
    create_temp_path_sync(tmpdir)
    create_temp_path_sync(options)
    create_temp_path_sync(tmpdir, options)

``resolve_arguments`` inspects the call-site shapes once and produces a
normalized ``ResolvedArguments``. Nothing downstream looks at the raw
arguments again.
"""

import logging
from collections.abc import Mapping
from typing import Any, NamedTuple

from pydantic import ValidationError

from .exceptions import InvalidArgumentError
from .types import TempPathCallback, TempPathOptions

logger = logging.getLogger(__name__)


class ResolvedArguments(NamedTuple):
    """Normalized arguments for a creation call."""

    tmpdir: Any
    options: TempPathOptions
    callback: TempPathCallback | None


def _is_record(value: Any) -> bool:
    return isinstance(value, (Mapping, TempPathOptions))


def _build_options(options: Any) -> TempPathOptions:
    """
    Validate a caller-supplied options record into ``TempPathOptions``.

    Parameters:
        options: A ``TempPathOptions`` instance or a mapping of option keys.

    Returns:
        TempPathOptions: The validated, immutable options.

    Raises:
        InvalidArgumentError: If ``options`` is not a record or any field has the wrong type.
    """
    if isinstance(options, TempPathOptions):
        return options

    if not isinstance(options, Mapping):
        raise InvalidArgumentError(
            f"Expected options to be a mapping, received '{type(options).__name__}'"
        )

    try:
        return TempPathOptions.model_validate(dict(options))
    except ValidationError as e:
        fields = ", ".join(
            ".".join(str(part) for part in error["loc"]) for error in e.errors()
        )
        raise InvalidArgumentError(f"Invalid temporary path options: {fields}") from e


def resolve_arguments(
    tmpdir: Any = None,
    options: Any = None,
    callback: Any = None,
    *,
    require_callback: bool,
) -> ResolvedArguments:
    """Disambiguate positionally overloaded creation arguments.

    The first matching rule wins:

    1. ``tmpdir`` is an options record: it becomes ``options``. For the
       callback form the second argument must be callable and becomes the
       callback; for the blocking form the second argument must be absent.
    2. Callback form only: ``tmpdir`` is set and the second argument is
       callable, so the second argument is the callback.
    3. Callback form only: ``tmpdir`` itself is callable and nothing else was
       passed, so it is the callback.
    4. Otherwise missing options default to an empty record.

    Args:
        tmpdir: Root directory, options record or callback
        options: Options record or callback
        callback: Completion callback
        require_callback: True for the callback form, False for the blocking form

    Returns:
        The normalized arguments

    Raises:
        InvalidArgumentError: If no callable callback is present for the
            callback form, a record is left in the root position, or the
            options are malformed
    """
    if require_callback:
        if _is_record(tmpdir) and callable(options) and callback is None:
            tmpdir, options, callback = None, tmpdir, options
        elif tmpdir and callable(options) and callback is None:
            tmpdir, options, callback = tmpdir, {}, options
        elif callable(tmpdir) and options is None and callback is None:
            tmpdir, options, callback = None, {}, tmpdir
    elif _is_record(tmpdir) and options is None:
        tmpdir, options = None, tmpdir

    if options is None:
        options = {}

    # Even an empty record must not be mistaken for "no root"
    if _is_record(tmpdir):
        raise InvalidArgumentError(
            f"Expected tmpdir to be a path, received '{type(tmpdir).__name__}'"
        )

    if require_callback and not callable(callback):
        raise InvalidArgumentError(
            f"Expected a callable callback, received '{type(callback).__name__}'"
        )

    resolved = ResolvedArguments(tmpdir, _build_options(options), callback)
    logger.debug(
        "Resolved arguments: tmpdir=%r, options=%r", resolved.tmpdir, resolved.options
    )
    return resolved

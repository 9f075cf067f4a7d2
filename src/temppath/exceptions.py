"""Exception classes for temppath.

These exceptions provide a consistent error hierarchy for path generation
and creation. Argument errors also subclass the matching builtin, so
``except TypeError`` and ``except ValueError`` keep working.
"""

from __future__ import annotations

from typing import Literal


class TempPathError(Exception):
    """Base exception for all temppath errors."""

    pass


class InvalidArgumentError(TempPathError, TypeError):
    """A parameter has the wrong shape or type."""

    pass


class OutOfRangeError(TempPathError, ValueError):
    """A numeric parameter is outside its allowed range."""

    pass


class CreationFailedError(TempPathError, RuntimeError):
    """Raised when the filesystem refuses to create a temporary path.

    The original filesystem error is kept in ``cause`` (and chained as
    ``__cause__``) for diagnostics.

    Attributes:
        kind: Either ``"file"`` or ``"directory"``, whichever was being created
        path: The path that was being created
        cause: The underlying ``OSError``

    Example:
        ```python
        from temppath import CreationFailedError, create_temp_path_sync

        try:
            path = create_temp_path_sync("/read-only/dir")
        except CreationFailedError as e:
            print(f"Could not create {e.kind}: {e.cause}")
        ```
    """

    def __init__(
        self,
        message: str,
        *,
        kind: Literal["file", "directory"],
        path: str | None = None,
        cause: BaseException | None = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.path = path
        self.cause = cause

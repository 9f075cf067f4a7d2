"""Type definitions for temppath."""

from collections.abc import Callable, Mapping
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from typing_extensions import TypeAlias

from .config import DEFAULT_EXTENSION, DEFAULT_MAX_NAME_LENGTH


class TempPathOptions(BaseModel):
    """Options to configure temporary file or directory creation.

    Values are validated strictly: ``"5"`` is not accepted as a length and
    ``1`` is not accepted as a flag. Whole-number floats such as ``8.0`` are
    accepted as lengths. The camelCase keys used by the original JavaScript
    API (``asFile``, ``ext``, ``maxLen``) are accepted as aliases. Unknown
    keys are ignored.
    """

    model_config = ConfigDict(strict=True, frozen=True, extra="ignore")

    as_file: bool = Field(
        default=False,
        validation_alias=AliasChoices("as_file", "asFile"),
    )
    # Ignored unless as_file is set
    extension: str = Field(
        default=DEFAULT_EXTENSION,
        validation_alias=AliasChoices("extension", "ext"),
    )
    max_name_length: int = Field(
        default=DEFAULT_MAX_NAME_LENGTH,
        validation_alias=AliasChoices("max_name_length", "maxNameLength", "maxLen", "max_len"),
    )

    @field_validator("max_name_length", mode="before")
    @classmethod
    def coerce_whole_float(cls, value: Any) -> Any:
        # Other floats fall through to the strict int check and are rejected
        if isinstance(value, float) and value.is_integer():
            return int(value)
        return value


TempPathCallback: TypeAlias = Callable[[BaseException | None, str | None], Any]
"""Called as ``callback(error, result_path)``; ``error`` is ``None`` on success."""

OptionsLike: TypeAlias = TempPathOptions | Mapping[str, Any]

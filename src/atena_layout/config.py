"""Layout settings.

The two layout tunables (fold width and default honorific) plus the
address book encoding, with environment variable overrides.
"""

from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from atena_layout.core.errors import AtenaValidationError
from atena_layout.core.folding import DEFAULT_MAX_LINE_LENGTH
from atena_layout.models.enums import DEFAULT_HONORIFIC
from atena_layout.models.errors import PACKAGE_NAME

MAX_LINE_LENGTH_ENV = "ATENA_MAX_LINE_LENGTH"
DEFAULT_HONORIFIC_ENV = "ATENA_DEFAULT_HONORIFIC"
ENCODING_ENV = "ATENA_ENCODING"

# Shift_JIS superset used by Windows exports
DEFAULT_ENCODING = "cp932"


class LayoutSettings(BaseModel):
    """Tunables for the layout engine.

    Example:
        >>> settings = LayoutSettings(max_line_length=16)
        >>> settings.default_honorific
        '様'
    """

    model_config = ConfigDict(frozen=True)

    max_line_length: int = Field(
        default=DEFAULT_MAX_LINE_LENGTH,
        gt=0,
        description="Maximum characters per printed address line",
    )
    default_honorific: str = Field(
        default=DEFAULT_HONORIFIC,
        description="Honorific used when a record leaves it blank",
    )
    encoding: str = Field(
        default=DEFAULT_ENCODING,
        description="Text encoding of address book files",
    )

    @field_validator("default_honorific", "encoding")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value

    @classmethod
    def create(cls, **values: object) -> LayoutSettings:
        """Validate settings, wrapping failures in AtenaValidationError."""
        try:
            return cls.model_validate(values)
        except ValidationError as e:
            raise AtenaValidationError.from_validation_error(
                PACKAGE_NAME, e, {"settings": sorted(values)}
            ) from e

    @classmethod
    def from_env(cls) -> LayoutSettings:
        """Build settings from ATENA_* environment variables, falling back to defaults."""
        values: dict[str, object] = {}
        max_line_length = os.getenv(MAX_LINE_LENGTH_ENV)
        if max_line_length:
            values["max_line_length"] = max_line_length
        honorific = os.getenv(DEFAULT_HONORIFIC_ENV)
        if honorific:
            values["default_honorific"] = honorific
        encoding = os.getenv(ENCODING_ENV)
        if encoding:
            values["encoding"] = encoding
        return cls.create(**values)

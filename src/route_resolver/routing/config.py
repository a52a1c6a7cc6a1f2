"""Route compiler configuration model."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .escaping import SPECIAL_CHARACTERS
from .patterns import SENTINEL


class CompilerConfig(BaseModel):
    """Pydantic configuration for route template compilation"""

    model_config = ConfigDict(
        str_strip_whitespace=True,
        validate_assignment=True,
        extra="forbid",
    )

    separator: str = Field(
        default="/",
        min_length=1,
        max_length=1,
        description="Path segment separator used for joining and matching",
    )
    optional_leading_separator: bool = Field(
        default=True, description="Match routes with or without a leading separator"
    )
    optional_trailing_separator: bool = Field(
        default=True,
        description="Match routes with or without a trailing separator",
    )

    @field_validator("separator")
    @classmethod
    def validate_separator(cls, v: str) -> str:
        """Ensure the separator can appear literally in a matcher pattern"""
        if v in SPECIAL_CHARACTERS or v == SENTINEL:
            raise ValueError(f"Separator {v!r} is reserved in route patterns")
        return v

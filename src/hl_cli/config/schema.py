"""Pydantic model for the highlighter configuration."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from hl_cli.core.binding import FieldColorBinding, parse_binding
from hl_cli.core.size import DEFAULT_RED_SIZE, DEFAULT_YELLOW_SIZE, parse_size


class Config(BaseModel):
    """Top-level configuration.

    Bindings are written as ``FIELD:COLOR`` strings and parsed on
    validation; sizes accept byte counts or strings like ``"100MB"``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    bindings: tuple[FieldColorBinding, ...] = Field(
        default=(),
        alias="fields",
        description="Field bindings in priority order; the first one for a field wins",
    )
    delimiter: str = Field(default=" ", min_length=1, description="Field delimiter")
    skip: str | None = Field(
        default=None, description="Substring to skip to before splitting fields"
    )
    yellow_size: int = Field(
        default=DEFAULT_YELLOW_SIZE, ge=0, description="Size color: yellow above this"
    )
    red_size: int = Field(
        default=DEFAULT_RED_SIZE, ge=0, description="Size color: red above this"
    )

    @field_validator("bindings", mode="before")
    @classmethod
    def parse_bindings(cls, v: Any) -> tuple[FieldColorBinding, ...]:
        """Parse ``FIELD:COLOR`` strings into bindings."""
        if v is None:
            return ()
        if isinstance(v, str):
            v = [v]
        return tuple(
            item if isinstance(item, FieldColorBinding) else parse_binding(str(item))
            for item in v
        )

    @field_validator("yellow_size", "red_size", mode="before")
    @classmethod
    def parse_sizes(cls, v: Any) -> Any:
        """Parse human-readable byte sizes."""
        if isinstance(v, str):
            return parse_size(v.strip())
        return v

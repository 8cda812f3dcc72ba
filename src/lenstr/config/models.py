"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, lenstr.toml only contains overrides.
An empty (or missing) file is a valid configuration.
"""

from __future__ import annotations

import codecs

from pydantic import BaseModel, Field, field_validator


class FormatConfig(BaseModel):
    """[format] section — scratch buffer for ``lenstr format``."""

    model_config = {"frozen": True}

    buffer_size: int = Field(default=100, ge=1)


class PromptConfig(BaseModel):
    """[prompt] section — interactive input for ``lenstr demo``."""

    model_config = {"frozen": True}

    buffer_size: int = Field(default=100, ge=1)
    marker: str = "> "


class MemoryConfig(BaseModel):
    """[memory] section.

    ``max_length`` bounds the characters a single allocation may request;
    anything larger fails with ALLOCATION_FAILED. None means unbounded.
    """

    model_config = {"frozen": True}

    max_length: int | None = Field(default=None, ge=0)


class OutputConfig(BaseModel):
    """[output] section — how CLI text maps to and from raw bytes."""

    model_config = {"frozen": True}

    encoding: str = "utf-8"
    errors: str = "backslashreplace"

    @field_validator("encoding")
    @classmethod
    def _known_codec(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as exc:
            msg = f"unknown text encoding: {value}"
            raise ValueError(msg) from exc
        return value

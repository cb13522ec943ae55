"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, offspring.toml only contains
overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from offspring.domain.classes import DEFAULT_EXCLUDED_FIELDS
from offspring.domain.unions import DEFAULT_DELIMITER


class TypesConfig(BaseModel):
    """[types] section."""

    model_config = {"frozen": True}

    union_delimiter: str = DEFAULT_DELIMITER
    excluded_fields: list[str] = Field(
        default_factory=lambda: sorted(DEFAULT_EXCLUDED_FIELDS),
    )

    @field_validator("union_delimiter")
    @classmethod
    def _delimiter_not_empty(cls, value: str) -> str:
        if not value:
            msg = "union_delimiter must not be empty"
            raise ValueError(msg)
        return value


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    autoload: bool = False


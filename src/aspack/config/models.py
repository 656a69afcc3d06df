"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, aspack.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class ValidationConfig(BaseModel):
    """[validation] section."""

    model_config = {"frozen": True}

    strict: bool = False


class FormatConfig(BaseModel):
    """[format] section."""

    model_config = {"frozen": True}

    indent: int = Field(default=2, ge=0)

"""
Base Pydantic models for ccfilter.

Two flavours are needed: frozen strict records for traced invocations, and
lax config sections that accept whatever TOML or Python sequences produce.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ImmutableModel(BaseModel):
    """Frozen, strictly typed record. Unknown fields are rejected."""

    model_config = ConfigDict(frozen=True, strict=True, extra="forbid")


class ConfigBaseModel(BaseModel):
    """Config section: tuples coerce to lists, unknown TOML keys are ignored."""

    model_config = ConfigDict(strict=False, validate_assignment=True, extra="ignore")

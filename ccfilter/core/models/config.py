"""
Configuration models.

Provides Pydantic models for the filter rule document and logging settings.
"""

from __future__ import annotations

from typing import Literal

from .base import ConfigBaseModel

LogLevel = Literal["debug", "info", "warning", "error"]

# Rule arrays in the order they are looked up and compiled
RULE_NAMES: tuple[str, ...] = ("compilers", "source_files", "cancel_parameters")


class FilterRulesConfig(ConfigBaseModel):
    """The ``[filter]`` group: three required arrays of regex patterns."""

    compilers: list[str]
    source_files: list[str]
    cancel_parameters: list[str]


class LoggingConfig(ConfigBaseModel):
    """Logging configuration section."""

    level: LogLevel = "warning"
    console: bool = True
    file: bool = False

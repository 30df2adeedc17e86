"""
Pydantic models for ccfilter.

Typed, validated models for the rule document, settings and invocations.
"""

from .base import ConfigBaseModel, ImmutableModel
from .config import RULE_NAMES, FilterRulesConfig, LoggingConfig, LogLevel
from .invocation import Invocation

__all__ = [
    "RULE_NAMES",
    "ConfigBaseModel",
    "FilterRulesConfig",
    "ImmutableModel",
    "Invocation",
    "LogLevel",
    "LoggingConfig",
]

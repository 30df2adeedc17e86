"""Filters for classifying traced compiler invocations."""

from .paths import resolve_source_path
from .patterns import PatternSet, compile_patterns, translate_extended
from .rules import build_filter, load_filter, read_filter_from_file
from .source import SourceFileFilter

__all__ = [
    "PatternSet",
    "SourceFileFilter",
    "build_filter",
    "compile_patterns",
    "load_filter",
    "read_filter_from_file",
    "resolve_source_path",
    "translate_extended",
]

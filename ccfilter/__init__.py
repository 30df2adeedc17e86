"""
ccfilter - compiler invocation filter for build observation tools.

Given a traced process (argv and working directory), decides whether it is
a compiler call and returns the absolute path of the source file it
compiles, or None.

Usage:
    from ccfilter import load_filter

    source_filter = load_filter(".ccfilter.toml")
    source_filter.classify(["gcc", "-c", "foo.c"], "/home/u")  # "/home/u/foo.c"
"""

import logging

from .core.exceptions import (
    CcFilterException,
    ConfigFileError,
    ConfigValidationError,
    FilterConfigError,
    PatternCompileError,
)
from .core.fatal import exit_on_fatal, fatal
from .core.models.invocation import Invocation
from .filters import (
    PatternSet,
    SourceFileFilter,
    build_filter,
    compile_patterns,
    load_filter,
    read_filter_from_file,
    resolve_source_path,
)
from .services.logging import configure_logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CcFilterException",
    "ConfigFileError",
    "ConfigValidationError",
    "FilterConfigError",
    "Invocation",
    "PatternCompileError",
    "PatternSet",
    "SourceFileFilter",
    "build_filter",
    "compile_patterns",
    "configure_logging",
    "exit_on_fatal",
    "fatal",
    "load_filter",
    "read_filter_from_file",
    "resolve_source_path",
]

"""
Filter construction from configuration documents.

The document must hold a ``filter`` group with three arrays of regex
strings. Anything else is a configuration error; no partially built
filter is ever returned.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ..config import find_document, find_key_line, load_config_document
from ..core.exceptions import ConfigValidationError
from ..core.models.config import RULE_NAMES, FilterRulesConfig
from .patterns import compile_patterns
from .source import SourceFileFilter

FILTER_GROUP = "filter"

_log = logging.getLogger(__name__)


def _validate_rules(
    group: Mapping[str, Any],
    source: str | None,
    text: str | None,
) -> FilterRulesConfig:
    """Validate the three rule arrays, reporting the first bad member."""
    try:
        return FilterRulesConfig.model_validate(dict(group))
    except ValidationError as e:
        err = e.errors()[0]
        name = str(err["loc"][0])
        where = f" in file {source}" if source else ""
        if err["type"] == "missing":
            line = find_key_line(text, FILTER_GROUP) if text else None
            message = f"could not find values for '{name}'{where}"
        else:
            line = find_key_line(text, name) if text else None
            message = f"value for '{name}' shall be array of strings{where}"
        if line is not None:
            message += f" at line {line}"
        raise ConfigValidationError(message, key=name, file_path=source, line=line, cause=e) from e


def build_filter(
    document: Mapping[str, Any],
    source: str | None = None,
    text: str | None = None,
    logger: logging.Logger | None = None,
) -> SourceFileFilter:
    """
    Build a SourceFileFilter from a parsed configuration document.

    Args:
        document: Mapping holding the ``filter`` group
        source: Name of the file the document came from, for diagnostics
        text: Raw document text, used to report line numbers
        logger: Optional logger passed on to the filter

    Returns:
        SourceFileFilter ready to classify invocations

    Raises:
        ConfigValidationError: Missing group or member, or wrong member type
        PatternCompileError: A pattern is not a valid regular expression
    """
    log = logger or _log

    if not isinstance(document, Mapping):
        where = f" in file {source}" if source else ""
        raise ConfigValidationError(
            f"configuration document shall be a table{where}", file_path=source
        )

    group = document.get(FILTER_GROUP)
    if group is None:
        where = f" in file {source}" if source else ""
        raise ConfigValidationError(
            f"found no filter group{where}", key=FILTER_GROUP, file_path=source
        )
    if not isinstance(group, Mapping):
        line = find_key_line(text, FILTER_GROUP) if text else None
        raise ConfigValidationError(
            f"'{FILTER_GROUP}' shall be a group of rule arrays",
            key=FILTER_GROUP,
            file_path=source,
            line=line,
        )

    rules = _validate_rules(group, source, text)

    pattern_sets = {name: compile_patterns(getattr(rules, name), name) for name in RULE_NAMES}
    result = SourceFileFilter(**pattern_sets, logger=logger)
    log.debug(
        "Built filter from %s: %d compiler, %d source file, %d cancel patterns",
        source or "<document>",
        len(result.compilers),
        len(result.source_files),
        len(result.cancel_parameters),
    )
    return result


def read_filter_from_file(config_path: Path | str, logger: logging.Logger | None = None) -> SourceFileFilter:
    """
    Load a filter TOML file and build the filter it describes.

    Raises:
        ConfigFileError: The file cannot be read or parsed
        ConfigValidationError, PatternCompileError: As for build_filter()
    """
    document, text = load_config_document(config_path)
    return build_filter(document, source=str(config_path), text=text, logger=logger)


def load_filter(
    config_path: Path | str | None = None,
    start_dir: str | None = None,
    logger: logging.Logger | None = None,
) -> SourceFileFilter:
    """
    Build the filter from the explicit, environment-given or discovered file.

    Lookup order: config_path, $CCFILTER_CONFIG, then .ccfilter.toml or a
    pyproject.toml with [tool.ccfilter] in start_dir or any parent.
    """
    path = find_document(config_path, start_dir)
    (logger or _log).debug("Loading filter configuration from %s", path)
    return read_filter_from_file(path, logger=logger)

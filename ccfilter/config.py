"""Configuration document loading for ccfilter."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

try:
    import tomllib
except ImportError:
    import tomli as tomllib

from .core.exceptions import ConfigFileError
from .core.settings import extract_document, resolve_config_path


def load_config_document(config_path: Path | str) -> tuple[dict[str, Any], str]:
    """
    Read and parse a filter TOML file.

    Args:
        config_path: Path to .ccfilter.toml or a pyproject.toml with [tool.ccfilter]

    Returns:
        Tuple of (document, raw_text); raw_text is kept for line lookups

    Raises:
        ConfigFileError: If the file cannot be read or is not valid TOML
    """
    path = Path(config_path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigFileError(
            f"failed to read config file: {e}", file_path=str(path), cause=e
        ) from e

    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        # The decoder message carries "(at line N, column M)"
        raise ConfigFileError(
            f"failed to parse config file: {e}", file_path=str(path), cause=e
        ) from e

    return extract_document(data, path), text


def find_document(config_path: Path | str | None = None, start_dir: str | None = None) -> Path:
    """Locate the filter document or fail."""
    path = resolve_config_path(config_path, start_dir)
    if path is None:
        raise ConfigFileError(
            "found no filter configuration (.ccfilter.toml, [tool.ccfilter] or $CCFILTER_CONFIG)",
            context={"start_dir": start_dir or str(Path.cwd())},
        )
    return path


def find_key_line(text: str, key: str) -> int | None:
    """1-based line where key is assigned (or opened as a table), if any."""
    pattern = re.compile(
        rf"^[ \t]*(?:\[[ \t]*(?:tool\.ccfilter\.)?{re.escape(key)}[ \t]*\]"
        rf"|(?:[\w.]+\.)?[\"']?{re.escape(key)}[\"']?[ \t]*=)",
        re.MULTILINE,
    )
    m = pattern.search(text)
    if m is None:
        return None
    return text.count("\n", 0, m.start()) + 1

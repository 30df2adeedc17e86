"""
Shared pytest fixtures for ccfilter tests.

- write_config: writes a filter TOML file into tmp_path
- source_filter: the gcc / .c / -E filter used by most classifier tests
- clean_env: removes CCFILTER_* variables so discovery tests are isolated
"""

from collections.abc import Callable
from pathlib import Path

import pytest

from ccfilter.filters import build_filter

GCC_DOCUMENT = {
    "filter": {
        "compilers": ["^gcc$"],
        "source_files": [r"\.c$"],
        "cancel_parameters": ["^-E$"],
    }
}

GCC_TOML = """\
[filter]
compilers = ['^gcc$']
source_files = ['\\.c$']
cancel_parameters = ['^-E$']
"""


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the caller's CCFILTER_* environment out of the tests."""
    for var in ("CCFILTER_CONFIG", "CCFILTER_LOGGING__LEVEL", "CCFILTER_LOGGING__CONSOLE"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper writing TOML text to tmp_path/<name>."""

    def _write(text: str, name: str = ".ccfilter.toml") -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text)
        return path

    return _write


@pytest.fixture
def source_filter():
    return build_filter(GCC_DOCUMENT)


@pytest.fixture
def gcc_config(write_config: Callable[..., Path]) -> Path:
    """A .ccfilter.toml holding the gcc / .c / -E rules."""
    return write_config(GCC_TOML)

"""
Fail-fast handling of configuration errors.

Filter construction raises; the host program's entry point turns those
errors into an immediate exit with a one-line diagnostic on stderr:

    @exit_on_fatal
    def main():
        source_filter = load_filter()
        ...
"""

from __future__ import annotations

import functools
import logging
import sys
from collections.abc import Callable
from typing import Any, NoReturn, TypeVar

from .exceptions import FilterConfigError

F = TypeVar("F", bound=Callable[..., Any])

PROG_NAME = "ccfilter"


def fatal(exc: FilterConfigError, logger: logging.Logger | None = None) -> NoReturn:
    """Report a configuration error and terminate the process."""
    if logger is not None:
        logger.error("%s", exc)
    print(f"{PROG_NAME}: {exc}", file=sys.stderr)
    raise SystemExit(exc.exit_code)


def exit_on_fatal(f: F | None = None, *, logger: logging.Logger | None = None) -> Any:
    """Decorator translating FilterConfigError into a process exit.

    Usable bare (``@exit_on_fatal``) or with a logger
    (``@exit_on_fatal(logger=log)``).
    """

    def decorate(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return func(*args, **kwargs)
            except FilterConfigError as e:
                fatal(e, logger)

        return wrapper  # type: ignore[return-value]

    if f is not None:
        return decorate(f)
    return decorate

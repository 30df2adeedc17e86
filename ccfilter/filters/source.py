"""
Source-file filter for observed compiler invocations.

Decides whether a traced process is a compiler call, which argument is the
source file being compiled, and whether the call is cancelled (link-only,
preprocess-only and similar invocations).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from ..core.models.invocation import Invocation
from .paths import resolve_source_path
from .patterns import PatternSet

_log = logging.getLogger(__name__)


class SourceFileFilter:
    """
    Classifies invocations using three pattern sets.

    - compilers: must match the first argument for the call to be considered
    - source_files: the first matching argument is the source file
    - cancel_parameters: any matching argument voids the whole invocation

    Instances are read-only after construction and may be shared between
    threads.
    """

    def __init__(
        self,
        compilers: PatternSet,
        source_files: PatternSet,
        cancel_parameters: PatternSet,
        logger: logging.Logger | None = None,
    ) -> None:
        self.compilers = compilers
        self.source_files = source_files
        self.cancel_parameters = cancel_parameters
        self.logger = logger or _log

    def source_file(self, invocation: Invocation) -> str | None:
        """
        Find the source file compiled by an invocation.

        Args:
            invocation: The observed process invocation

        Returns:
            Absolute path of the source file, or None when the invocation is
            not a compiler call, names no source file, or was cancelled.
        """
        program = invocation.program
        if program is None or not self.compilers.match(program):
            return None

        result: str | None = None
        for arg in invocation.command:
            # An argument claimed as the source file is not tested for cancel
            if result is None and self.source_files.match(arg):
                result = resolve_source_path(arg, invocation.cwd)
            elif self.cancel_parameters.match(arg):
                self.logger.debug("Invocation of %s cancelled by %r", program, arg)
                result = None
                break
        return result

    def classify(self, command: Sequence[str], cwd: str) -> str | None:
        """Shorthand for source_file() on a raw argv and working directory."""
        return self.source_file(Invocation(command=tuple(command), cwd=cwd))

    def collect(self, records: Iterable[Invocation | Mapping[str, Any]]) -> list[str]:
        """
        Run the filter over a stream of invocations.

        Args:
            records: Invocations or process dicts with "command" and "cwd"

        Returns:
            Source file paths of the accepted invocations, in input order
        """
        sources: list[str] = []
        for record in records:
            invocation = record if isinstance(record, Invocation) else Invocation.from_process(record)
            source = self.source_file(invocation)
            if source is not None:
                sources.append(source)

        self.logger.debug("Collected %d source files", len(sources))
        return sources

"""
Invocation model.

One observed program execution as delivered by the process tracer:
its argument vector and the directory it was started in.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import field_validator

from .base import ImmutableModel


class Invocation(ImmutableModel):
    """An observed process invocation.

    ``command[0]`` is the program name or path as it was executed.
    """

    command: tuple[str, ...] = ()
    cwd: str = ""

    @field_validator("command", mode="before")
    @classmethod
    def coerce_command(cls, v: Any) -> Any:
        """Accept any list-like argv, as tracers emit JSON arrays."""
        if isinstance(v, list):
            return tuple(v)
        return v

    @property
    def program(self) -> str | None:
        return self.command[0] if self.command else None

    @classmethod
    def from_process(cls, record: Mapping[str, Any]) -> Invocation:
        """Build an invocation from a process record.

        Args:
            record: Process dict with ``command`` (or ``argv``) and ``cwd`` keys

        Returns:
            Invocation with missing fields left empty
        """
        command = record.get("command")
        if command is None:
            command = record.get("argv") or ()
        return cls(command=command, cwd=record.get("cwd") or "")

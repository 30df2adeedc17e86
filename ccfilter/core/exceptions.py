"""
Custom exception hierarchy for ccfilter.

Configuration problems are raised as typed exceptions from filter
construction and only turned into a process exit at the top level
(see ``ccfilter.core.fatal``).
"""

from __future__ import annotations


class CcFilterException(Exception):
    """
    Base exception for all ccfilter errors.

    Attributes:
        message: Human-readable error description
        context: Additional debugging context (file paths, rule names, etc.)
        exit_code: Suggested process exit code (default: 1)
        recoverable: Whether retry/recovery may be possible
    """

    exit_code: int = 1
    recoverable: bool = True

    def __init__(
        self,
        message: str,
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.message = message
        self.context = context or {}
        if cause is not None:
            self.__cause__ = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class FilterConfigError(CcFilterException):
    """
    Base class for filter configuration errors.

    A filter built from an invalid configuration would misclassify every
    invocation, so none of these are recoverable.
    """

    recoverable: bool = False


class ConfigFileError(FilterConfigError):
    """
    Error locating, reading or parsing a configuration file.

    Raised for TOML syntax errors, missing files, permission errors, etc.
    """

    def __init__(
        self,
        message: str,
        *,
        file_path: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if file_path:
            ctx["file_path"] = file_path
        super().__init__(message, context=ctx, cause=cause)
        self.file_path = file_path


class ConfigValidationError(FilterConfigError, ValueError):
    """
    Missing or mistyped configuration value.

    Raised when the ``filter`` group or one of its rule arrays is absent,
    or when a rule array is not an array of strings.
    """

    def __init__(
        self,
        message: str,
        *,
        key: str | None = None,
        file_path: str | None = None,
        line: int | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if key:
            ctx["key"] = key
        if file_path:
            ctx["file_path"] = file_path
        if line is not None:
            ctx["line"] = line
        super().__init__(message, context=ctx, cause=cause)
        self.key = key
        self.file_path = file_path
        self.line = line


class PatternCompileError(FilterConfigError, ValueError):
    """
    A rule pattern is not a valid regular expression.

    The message carries the regex engine's own syntax error.
    """

    def __init__(
        self,
        message: str,
        *,
        rule: str | None = None,
        index: int | None = None,
        pattern: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if rule:
            ctx["rule"] = rule
        if index is not None:
            ctx["index"] = index
        if pattern is not None:
            ctx["pattern"] = pattern
        super().__init__(message, context=ctx, cause=cause)
        self.rule = rule
        self.index = index
        self.pattern = pattern

"""Core data models and exception types for the setenv runtime."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path
from typing import Iterable, Optional

from .._messages import format_default_message


class SetenvError(RuntimeError):
    """Base class for recoverable setenv failures."""

    default_message = "setenv failure"

    def __init__(self, *, detail: Optional[str] = None) -> None:
        """Initialise the exception with an optional detail string."""
        self.detail = detail
        message = format_default_message(self.default_message, detail)
        super().__init__(message)


class LineValidationError(SetenvError):
    """Raised when a line has an invalid key or an empty value."""

    default_message = "Invalid line"

    @classmethod
    def invalid_key(cls, key: str) -> "LineValidationError":
        """Factory when the key is outside the [A-Z0-9_] character class."""
        return cls(detail=f"Invalid key {key}. Skipping.")

    @classmethod
    def empty_value(cls, key: str) -> "LineValidationError":
        """Factory when the value after the first '=' is empty."""
        return cls(
            detail=f"Invalid value for {key}: The value cannot be empty. Skipping."
        )

    @classmethod
    def nul_in_value(cls, key: str) -> "LineValidationError":
        """Factory when the value holds a NUL byte, which no environment accepts."""
        return cls(
            detail=f"Invalid value for {key}: The value cannot contain a NUL byte. Skipping."
        )


class PathExpansionError(SetenvError):
    """Raised when a path-like value cannot be canonicalized."""

    default_message = "Path expansion failed"

    def __init__(
        self, *, detail: Optional[str] = None, value: str = "", reason: str = ""
    ) -> None:
        super().__init__(detail=detail)
        self.value = value
        self.reason = reason

    @classmethod
    def unresolvable(cls, *, value: str, reason: str) -> "PathExpansionError":
        """Build an error describing why the value could not be resolved."""
        return cls(detail=f"{value}: {reason}", value=value, reason=reason)


class SetenvAbort(SystemExit):
    """Base class for failures that end the whole invocation."""

    default_message = "setenv aborted"

    def __init__(self, *, detail: Optional[str] = None, code: int = 1) -> None:
        """Initialise the abort with a user-facing detail string."""
        self.detail = detail
        self.exit_code = code
        message = format_default_message(self.default_message, detail)
        super().__init__(message)
        self.code = code


class MissingCapabilityAbort(SetenvAbort):
    """Raised when commands required on the host are unavailable."""

    default_message = "Missing required commands"

    @classmethod
    def missing_commands(cls, commands: Iterable[str]) -> "MissingCapabilityAbort":
        """Factory listing every missing command, not only the first."""
        names = " ".join(commands)
        return cls(
            detail=f"The following commands are required but were not found: {names}"
        )


class VerbosityAbort(SetenvAbort):
    """Raised when --verbosity receives an unknown level."""

    default_message = "Unsupported verbosity"

    @classmethod
    def unknown_level(cls, value: str) -> "VerbosityAbort":
        """Factory when the level name is not recognised."""
        return cls(
            detail=f"Unknown log level provided for --verbosity option: {value}."
        )


class EnvFileNotFoundAbort(SetenvAbort):
    """Raised when the env file does not reference an existing regular file."""

    default_message = "Env file not found"

    @classmethod
    def not_found(cls, path: Path) -> "EnvFileNotFoundAbort":
        """Factory for a missing env file."""
        return cls(
            detail=f"Invalid value for <filename> argument: file {path} not found.",
            code=os.EX_NOINPUT,
        )


class EnvFileEmptyAbort(SetenvAbort):
    """Raised when the env file exists but has zero length."""

    default_message = "Env file is empty"

    @classmethod
    def empty(cls, path: Path) -> "EnvFileEmptyAbort":
        """Factory for a zero-byte env file."""
        return cls(
            detail=f"Invalid value for <filename> argument: file {path} is empty.",
            code=os.EX_DATAERR,
        )


class EnvFileReadAbort(SetenvAbort):
    """Raised when reading the env file fails part way through."""

    default_message = "Env file read failed"

    @classmethod
    def read_failed(cls, path: Path, exc: Exception) -> "EnvFileReadAbort":
        """Factory wrapping the underlying I/O or decode error."""
        return cls(detail=f"Failed to read {path}. ({exc})", code=os.EX_IOERR)


class Verbosity(IntEnum):
    """Log levels, ordered so that a higher value emits more messages."""

    NONE = 0
    INFO = 1
    WARNING = 2
    ERROR = 3

    @classmethod
    def parse(cls, name: str) -> "Verbosity":
        """Return the level for a lowercase CLI name (case-sensitive)."""
        if name not in VERBOSITY_CHOICES:
            raise VerbosityAbort.unknown_level(name)
        return cls[name.upper()]


VERBOSITY_CHOICES: tuple[str, ...] = ("none", "info", "warning", "error")


@dataclass(frozen=True)
class LoaderConfig:
    """Immutable configuration built once from the command line."""

    env_file: Path
    verbosity: Verbosity = Verbosity.NONE
    log_exports: bool = False
    resolver: str = "native"


@dataclass(frozen=True)
class EnvLine:
    """A raw line read from the env file."""

    text: str
    lineno: int


@dataclass(frozen=True)
class KeyValuePair:
    """A validated key and value derived from a single line."""

    key: str
    value: str
    lineno: int


@dataclass(frozen=True)
class SkippedLine:
    """A line that was rejected during validation or expansion."""

    lineno: int
    reason: str


@dataclass
class ExportResult:
    """Outcome of loading one env file."""

    exported: dict[str, str] = field(default_factory=dict)
    skipped: list[SkippedLine] = field(default_factory=list)
    count: int = 0

    def record_export(self, pair: KeyValuePair) -> None:
        """Remember a successful export; a repeated key keeps the last value."""
        self.exported[pair.key] = pair.value
        self.count += 1

    def record_skip(self, lineno: int, reason: str) -> None:
        """Remember a skipped line and why."""
        self.skipped.append(SkippedLine(lineno=lineno, reason=reason))


__all__ = [
    "SetenvError",
    "LineValidationError",
    "PathExpansionError",
    "SetenvAbort",
    "MissingCapabilityAbort",
    "VerbosityAbort",
    "EnvFileNotFoundAbort",
    "EnvFileEmptyAbort",
    "EnvFileReadAbort",
    "Verbosity",
    "VERBOSITY_CHOICES",
    "LoaderConfig",
    "EnvLine",
    "KeyValuePair",
    "SkippedLine",
    "ExportResult",
]

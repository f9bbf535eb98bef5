"""Host capability checks run before any file processing."""

from __future__ import annotations

import shutil
from typing import Iterable

from .config import REALPATH_COMMAND
from .models import LoaderConfig, MissingCapabilityAbort


def command_exists(name: str) -> bool:
    """Return True when *name* resolves to an executable on PATH."""
    return shutil.which(name) is not None


def required_commands(config: LoaderConfig) -> tuple[str, ...]:
    """Return the external commands the configured resolver depends on.

    Pattern matching and field splitting are done in-process, so only the
    realpath resolver adds a requirement.
    """
    if config.resolver == "realpath":
        return (REALPATH_COMMAND,)
    return ()


def find_missing_commands(required: Iterable[str]) -> list[str]:
    """Return every command from *required* that is not available."""
    return [name for name in required if not command_exists(name)]


def check_capabilities(required: Iterable[str]) -> None:
    """Raise MissingCapabilityAbort listing all unavailable commands."""
    missing = find_missing_commands(required)
    if missing:
        raise MissingCapabilityAbort.missing_commands(missing)


__all__ = [
    "command_exists",
    "required_commands",
    "find_missing_commands",
    "check_capabilities",
]

"""Configuration helpers and constants for the setenv runtime."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any, Optional

from setenv_tools.utils.config_loader import detect_repo_root, load_json_config

from .models import Verbosity

CONFIG_CANDIDATES = ("setenv.config.json", ".setenv.config.json")
DEFAULT_ENV_FILE = "./dev.env"
DEFAULT_VERBOSITY = "none"
VERBOSITY_ENV_VAR = "SETENV_VERBOSITY"
LOG_TAG = "setenv"

KEY_PATTERN = re.compile(r"^[A-Z0-9_]+\Z")
COMMENT_PATTERN = re.compile(r"^\s*#")
PATH_LIKE_PATTERN = re.compile(r"^(~|\.\.?(/|\Z))")

RESOLVER_CHOICES: tuple[str, ...] = ("native", "realpath")
DEFAULT_RESOLVER = "native"
REALPATH_COMMAND = "realpath"

_EMPTY_CONFIG: dict[str, Any] = {}


def load_repo_config(repo_root: Optional[Path] = None) -> dict[str, Any]:
    """Load the optional setenv configuration file.

    Returns an empty dict if no config file exists; raises on parse errors.
    """
    root = repo_root if repo_root is not None else detect_repo_root()
    try:
        return load_json_config(root, CONFIG_CANDIDATES)
    except FileNotFoundError:
        return _EMPTY_CONFIG


def _coerce_env_file(config: dict[str, Any], initial: str) -> str:
    raw = config.get("env_file")
    if isinstance(raw, str) and raw:
        return raw
    return initial


def _coerce_verbosity(config: dict[str, Any], initial: str) -> str:
    raw = config.get("verbosity")
    if isinstance(raw, str) and raw:
        return raw
    return initial


def resolve_default_env_file(config: dict[str, Any]) -> str:
    """Return the env file used when no <filename> argument is given."""
    return _coerce_env_file(config, DEFAULT_ENV_FILE)


def resolve_default_verbosity(config: dict[str, Any]) -> Verbosity:
    """Resolve the starting verbosity before command-line options apply.

    ``SETENV_VERBOSITY`` takes precedence over the config file.

    Raises:
        VerbosityAbort: If the configured name is not a known level
    """
    candidate = os.environ.get(VERBOSITY_ENV_VAR)
    if not candidate:
        candidate = _coerce_verbosity(config, DEFAULT_VERBOSITY)
    return Verbosity.parse(candidate)


__all__ = [
    "CONFIG_CANDIDATES",
    "DEFAULT_ENV_FILE",
    "DEFAULT_VERBOSITY",
    "VERBOSITY_ENV_VAR",
    "LOG_TAG",
    "KEY_PATTERN",
    "COMMENT_PATTERN",
    "PATH_LIKE_PATTERN",
    "RESOLVER_CHOICES",
    "DEFAULT_RESOLVER",
    "REALPATH_COMMAND",
    "load_repo_config",
    "resolve_default_env_file",
    "resolve_default_verbosity",
]

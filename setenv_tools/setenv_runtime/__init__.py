"""Public API for the setenv runtime package."""

from __future__ import annotations

from .capabilities import check_capabilities, command_exists, required_commands
from .expansion import canonicalize, expand_value, looks_like_path
from .loader import load_env, validate_env_file
from .logger import Logger
from .models import (
    EnvFileEmptyAbort,
    EnvFileNotFoundAbort,
    EnvFileReadAbort,
    ExportResult,
    LineValidationError,
    LoaderConfig,
    MissingCapabilityAbort,
    PathExpansionError,
    SetenvAbort,
    SetenvError,
    Verbosity,
    VerbosityAbort,
)
from .parsing import iter_env_lines, parse_line
from .workflow import build_config, main, parse_args, render_exports, run

__all__ = [
    # ---- models ----
    "EnvFileEmptyAbort",
    "EnvFileNotFoundAbort",
    "EnvFileReadAbort",
    "ExportResult",
    "LineValidationError",
    "LoaderConfig",
    "MissingCapabilityAbort",
    "PathExpansionError",
    "SetenvAbort",
    "SetenvError",
    "Verbosity",
    "VerbosityAbort",
    # ---- capabilities ----
    "check_capabilities",
    "command_exists",
    "required_commands",
    # ---- expansion ----
    "canonicalize",
    "expand_value",
    "looks_like_path",
    # ---- loader ----
    "load_env",
    "validate_env_file",
    # ---- logger ----
    "Logger",
    # ---- parsing ----
    "iter_env_lines",
    "parse_line",
    # ---- workflow ----
    "build_config",
    "main",
    "parse_args",
    "render_exports",
    "run",
]

"""Re-exports setenv runtime helpers for import convenience.

This module re-exports the public symbols from setenv_runtime, allowing
consumers to import from either location:
    - setenv_tools.setenv (shorter import path)
    - setenv_tools.setenv_runtime (canonical location)

Usage:
    from setenv_tools.setenv import LoaderConfig, load_env
    from setenv_tools.setenv_runtime import LoaderConfig, load_env  # Canonical
"""

from __future__ import annotations

from .setenv_runtime import (
    ExportResult,
    LoaderConfig,
    Logger,
    Verbosity,
    load_env,
    main,
    parse_args,
    render_exports,
)

__all__ = [
    "ExportResult",
    "LoaderConfig",
    "Logger",
    "Verbosity",
    "load_env",
    "main",
    "parse_args",
    "render_exports",
]

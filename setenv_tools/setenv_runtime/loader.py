"""Load env file definitions into an environment mapping."""

from __future__ import annotations

import os
from pathlib import Path
from typing import MutableMapping, Optional

from .capabilities import check_capabilities, required_commands
from .expansion import expand_value
from .logger import Logger
from .models import (
    EnvFileEmptyAbort,
    EnvFileNotFoundAbort,
    EnvFileReadAbort,
    ExportResult,
    KeyValuePair,
    LineValidationError,
    LoaderConfig,
    PathExpansionError,
)
from .parsing import iter_env_lines, parse_line


def validate_env_file(path: Path) -> None:
    """Ensure *path* is an existing, non-empty regular file.

    Raises:
        EnvFileNotFoundAbort: If the path is missing or not a regular file
        EnvFileEmptyAbort: If the file has zero length
    """
    if not path.is_file():
        raise EnvFileNotFoundAbort.not_found(path)
    if path.stat().st_size == 0:
        raise EnvFileEmptyAbort.empty(path)


def _expand_pair(pair: KeyValuePair, resolver: str) -> KeyValuePair:
    value = expand_value(pair.value, resolver)
    if value == pair.value:
        return pair
    return KeyValuePair(key=pair.key, value=value, lineno=pair.lineno)


def load_env(
    config: LoaderConfig,
    environ: Optional[MutableMapping[str, str]] = None,
    logger: Optional[Logger] = None,
) -> ExportResult:
    """Export every valid definition in the configured env file.

    Malformed keys, empty values and unresolvable paths are logged as
    warnings and skipped. Variables exported before a fatal read error are
    left in place.

    Args:
        config: Loader configuration
        environ: Mapping to export into (defaults to os.environ)
        logger: Logger to report through (defaults to one at config.verbosity)

    Returns:
        ExportResult with the exported pairs, skipped lines and count

    Raises:
        MissingCapabilityAbort: If a command the resolver needs is unavailable
        EnvFileNotFoundAbort: If the env file does not exist
        EnvFileEmptyAbort: If the env file is empty
        EnvFileReadAbort: If reading the env file fails
    """
    target = environ if environ is not None else os.environ
    log = logger if logger is not None else Logger(config.verbosity)

    check_capabilities(required_commands(config))
    validate_env_file(config.env_file)

    log.info(f"Loading environment variables from {config.env_file}")
    if config.log_exports:
        log.info("Verbose mode is enabled, exported variables will be logged.")

    result = ExportResult()
    lines = iter_env_lines(config.env_file)
    while True:
        # only reading the file is fatal; per-line failures are handled below
        try:
            line = next(lines)
        except StopIteration:
            break
        except (OSError, UnicodeDecodeError) as exc:
            raise EnvFileReadAbort.read_failed(config.env_file, exc) from exc

        try:
            pair = parse_line(line)
        except LineValidationError as exc:
            log.warning(str(exc.detail))
            result.record_skip(line.lineno, str(exc.detail))
            continue
        if pair is None:
            continue
        try:
            pair = _expand_pair(pair, config.resolver)
        except PathExpansionError as exc:
            message = (
                f"Unable to expand path {exc.value} for {pair.key}: {exc.reason}. Skipping."
            )
            log.warning(message)
            result.record_skip(line.lineno, message)
            continue

        target[pair.key] = pair.value
        result.record_export(pair)
        if config.log_exports:
            log.info(f"Exported variable: {pair.key}={pair.value}")

    log.info(f"Done! Exported {result.count} variable(s).")
    return result


__all__ = ["validate_env_file", "load_env"]

"""Expansion of relative-path-looking values into absolute paths."""

from __future__ import annotations

import errno
import os
from typing import Callable

from .config import PATH_LIKE_PATTERN, REALPATH_COMMAND
from .models import PathExpansionError
from .process import run_command

_TRAILING_COMPONENTS = ("", ".", "..")


def looks_like_path(value: str) -> bool:
    """Return True for values starting with '~', or '.'/'..' then '/' or end."""
    return PATH_LIKE_PATTERN.match(value) is not None


def _expand_home(value: str) -> str:
    expanded = os.path.expanduser(value)
    if expanded.startswith("~"):
        raise PathExpansionError.unresolvable(
            value=value, reason="home directory could not be determined"
        )
    return expanded


def _realpath_missing_leaf(absolute: str) -> str:
    """Resolve *absolute* requiring every component but the last to exist."""
    head, tail = os.path.split(absolute.rstrip(os.sep) or os.sep)
    if tail in _TRAILING_COMPONENTS or absolute.endswith(os.sep):
        return os.path.realpath(absolute, strict=True)
    parent = os.path.realpath(head, strict=True)
    if not os.path.isdir(parent):
        raise NotADirectoryError(errno.ENOTDIR, os.strerror(errno.ENOTDIR), head)
    return os.path.realpath(os.path.join(parent, tail))


def resolve_native(value: str) -> str:
    """Canonicalize *value* in-process with realpath(1) semantics.

    Raises:
        PathExpansionError: If a parent component is missing or unreadable
    """
    expanded = _expand_home(value)
    try:
        absolute = os.path.join(os.getcwd(), expanded)
        return _realpath_missing_leaf(absolute)
    except OSError as exc:
        reason = exc.strerror if exc.strerror else str(exc)
        raise PathExpansionError.unresolvable(value=value, reason=reason) from exc


def resolve_external(value: str) -> str:
    """Canonicalize *value* by running the host realpath command.

    Raises:
        PathExpansionError: If realpath cannot be started or exits non-zero
    """
    expanded = _expand_home(value)
    try:
        result = run_command([REALPATH_COMMAND, "--", expanded])
    except OSError as exc:
        reason = exc.strerror if exc.strerror else str(exc)
        raise PathExpansionError.unresolvable(value=value, reason=reason) from exc
    if not result.ok:
        reason = result.stderr.strip()
        if not reason:
            reason = f"exit status {result.returncode}"
        raise PathExpansionError.unresolvable(value=value, reason=reason)
    return result.stdout.rstrip("\n")


RESOLVERS: dict[str, Callable[[str], str]] = {
    "native": resolve_native,
    "realpath": resolve_external,
}


def canonicalize(value: str, resolver: str = "native") -> str:
    """Return the canonical absolute path for a path-like *value*."""
    try:
        resolve = RESOLVERS[resolver]
    except KeyError as exc:
        msg = f"unknown resolver: {resolver}"
        raise ValueError(msg) from exc
    return resolve(value)


def expand_value(value: str, resolver: str = "native") -> str:
    """Canonicalize path-like values and return all others unchanged."""
    if not looks_like_path(value):
        return value
    return canonicalize(value, resolver)


__all__ = [
    "looks_like_path",
    "resolve_native",
    "resolve_external",
    "RESOLVERS",
    "canonicalize",
    "expand_value",
]

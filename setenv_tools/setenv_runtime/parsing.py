"""Line reading and validation for env files."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, Optional

from .config import COMMENT_PATTERN, KEY_PATTERN
from .models import EnvLine, KeyValuePair, LineValidationError


def iter_env_lines(path: Path) -> Iterator[EnvLine]:
    """Yield each line of *path* with its 1-based line number.

    Only a trailing "\\n" or "\\r\\n" is stripped; a lone "\\r" stays part of
    the line. Read errors propagate to the caller.
    """
    with path.open("r", encoding="utf-8", newline="\n") as handle:
        for lineno, raw in enumerate(handle, start=1):
            yield EnvLine(text=_strip_line_ending(raw), lineno=lineno)


def _strip_line_ending(raw: str) -> str:
    if raw.endswith("\r\n"):
        return raw[:-2]
    if raw.endswith("\n"):
        return raw[:-1]
    return raw


def is_ignored(text: str) -> bool:
    """Return True for empty lines and comment lines."""
    return not text or COMMENT_PATTERN.match(text) is not None


def split_line(text: str) -> tuple[str, str]:
    """Split on the first '='; a line without '=' yields an empty value."""
    key, _, value = text.partition("=")
    return key, value


def is_valid_key(key: str) -> bool:
    """Return True when *key* consists only of A-Z, 0-9 and underscores."""
    return KEY_PATTERN.match(key) is not None


def parse_line(line: EnvLine) -> Optional[KeyValuePair]:
    """Parse one line into a key-value pair.

    Returns:
        The pair, or None for blank and comment lines

    Raises:
        LineValidationError: If the key is malformed or the value is empty
    """
    if is_ignored(line.text):
        return None
    key, value = split_line(line.text)
    if not is_valid_key(key):
        raise LineValidationError.invalid_key(key)
    # whitespace-only counts as empty; non-empty values are exported untrimmed
    if not value.strip():
        raise LineValidationError.empty_value(key)
    if "\0" in value:
        raise LineValidationError.nul_in_value(key)
    return KeyValuePair(key=key, value=value, lineno=line.lineno)


__all__ = [
    "iter_env_lines",
    "is_ignored",
    "split_line",
    "is_valid_key",
    "parse_line",
]

"""Verbosity-filtered message output for the setenv runtime."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from .config import LOG_TAG
from .models import Verbosity


class Logger:
    """Write tagged messages to stdout and stderr based on the verbosity.

    A message at level L is emitted only when L is at or below the configured
    verbosity. INFO goes to stdout; WARNING and ERROR go to stdout and stderr.
    """

    def __init__(
        self,
        verbosity: Verbosity,
        *,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
        stdout_prefix: str = "",
        tag: str = LOG_TAG,
    ) -> None:
        self.verbosity = verbosity
        self._stdout = stdout
        self._stderr = stderr
        self.stdout_prefix = stdout_prefix
        self.tag = tag

    @property
    def stdout(self) -> TextIO:
        """Resolve stdout lazily so pytest capture sees the current stream."""
        if self._stdout is not None:
            return self._stdout
        return sys.stdout

    @property
    def stderr(self) -> TextIO:
        """Resolve stderr lazily so pytest capture sees the current stream."""
        if self._stderr is not None:
            return self._stderr
        return sys.stderr

    def enabled_for(self, level: Verbosity) -> bool:
        """Return True when a message at *level* would be written."""
        return Verbosity.NONE < level <= self.verbosity

    def format(self, level: Verbosity, message: str) -> str:
        """Render a message line without the stdout prefix."""
        return f"[{self.tag}] [{level.name}] {message}"

    def log(self, level: Verbosity, message: str) -> None:
        """Emit *message* at *level* if the verbosity allows it."""
        if not self.enabled_for(level):
            return
        line = self.format(level, message)
        print(f"{self.stdout_prefix}{line}", file=self.stdout)
        if level >= Verbosity.WARNING:
            print(line, file=self.stderr)

    def info(self, message: str) -> None:
        """Log an information message to stdout."""
        self.log(Verbosity.INFO, message)

    def warning(self, message: str) -> None:
        """Log a warning message to stdout and stderr."""
        self.log(Verbosity.WARNING, message)

    def error(self, message: str) -> None:
        """Log an error message to stdout and stderr."""
        self.log(Verbosity.ERROR, message)


__all__ = ["Logger"]

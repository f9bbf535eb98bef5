"""Process helpers for the setenv runtime."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from typing import Iterable


@dataclass
class CommandResult:
    """Captured output from a completed subprocess invocation."""

    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        """Return True when the process exited successfully."""
        return self.returncode == 0


def run_command(args: Iterable[str]) -> CommandResult:
    """Run a command in the current environment and capture its output.

    A non-zero exit is reported through the result, not raised. OSError from
    starting the process propagates.
    """
    process = subprocess.run(
        list(args),
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
        check=False,
    )
    return CommandResult(
        returncode=process.returncode,
        stdout=process.stdout,
        stderr=process.stderr,
    )


__all__ = ["CommandResult", "run_command"]

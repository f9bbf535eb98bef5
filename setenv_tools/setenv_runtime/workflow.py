"""Command-line entry point for exporting env file definitions."""

from __future__ import annotations

import argparse
import shlex
import sys
from pathlib import Path
from typing import Any, Iterable, Mapping, Optional, TextIO

from setenv_tools.utils.config_loader import ConfigLoadError

from .config import (
    DEFAULT_RESOLVER,
    RESOLVER_CHOICES,
    load_repo_config,
    resolve_default_env_file,
    resolve_default_verbosity,
)
from .loader import load_env
from .logger import Logger
from .models import (
    VERBOSITY_CHOICES,
    EnvFileNotFoundAbort,
    LoaderConfig,
    SetenvAbort,
    Verbosity,
)

SHELL_COMMENT_PREFIX = "# "


class _VerbosityAction(argparse.Action):
    """Apply --verbosity=<level>, aborting on unknown names."""

    def __call__(self, parser, namespace, values, option_string=None):
        namespace.verbosity = Verbosity.parse(str(values))


class _VerboseAction(argparse.Action):
    """Apply -v/--verbose: ERROR verbosity plus per-variable export logging."""

    def __init__(self, option_strings, dest, **kwargs):
        super().__init__(option_strings, dest, nargs=0, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        namespace.verbosity = Verbosity.ERROR
        namespace.log_exports = True


def parse_args(
    argv: Optional[Iterable[str]] = None,
    *,
    repo_config: Optional[dict[str, Any]] = None,
) -> argparse.Namespace:
    """Parse command-line arguments for the setenv CLI.

    Options are applied in order, so -v overrides an earlier --verbosity and
    a later --verbosity changes the level again.
    """
    config = repo_config if repo_config is not None else load_repo_config()
    parser = argparse.ArgumentParser(
        prog="setenv",
        description=(
            "Print export statements for the KEY=VALUE definitions in an env "
            'file. Use as: eval "$(setenv [options] [filename])"'
        ),
    )
    parser.add_argument(
        "--verbosity",
        action=_VerbosityAction,
        metavar="{" + ",".join(VERBOSITY_CHOICES) + "}",
        help="Verbosity of log messages (initial: none)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action=_VerboseAction,
        help="Alias for --verbosity=error that also logs every exported variable.",
    )
    parser.add_argument(
        "--resolver",
        choices=RESOLVER_CHOICES,
        help=f"How relative paths are made absolute (initial: {DEFAULT_RESOLVER})",
    )
    parser.add_argument(
        "filename",
        nargs="?",
        help="Env file to load (initial: ./dev.env)",
    )
    parser.set_defaults(
        verbosity=resolve_default_verbosity(config),
        log_exports=False,
        resolver=DEFAULT_RESOLVER,
        default_env_file=resolve_default_env_file(config),
    )
    parsed_args = list(argv) if argv is not None else None
    return parser.parse_args(parsed_args)


def build_config(args: argparse.Namespace) -> LoaderConfig:
    """Convert parsed CLI arguments into the immutable loader configuration.

    Raises:
        EnvFileNotFoundAbort: If an explicit <filename> is not a regular file
    """
    if args.filename is not None:
        env_file = Path(args.filename)
        if not env_file.is_file():
            raise EnvFileNotFoundAbort.not_found(env_file)
    else:
        env_file = Path(args.default_env_file)
    return LoaderConfig(
        env_file=env_file,
        verbosity=args.verbosity,
        log_exports=args.log_exports,
        resolver=args.resolver,
    )


def render_exports(exported: Mapping[str, str]) -> list[str]:
    """Return one shell-quoted export statement per variable."""
    return [f"export {key}={shlex.quote(value)}" for key, value in exported.items()]


def run(config: LoaderConfig, stdout: Optional[TextIO] = None) -> int:
    """Load *config* and write export statements to stdout."""
    out = stdout if stdout is not None else sys.stdout
    logger = Logger(config.verbosity, stdout=stdout, stdout_prefix=SHELL_COMMENT_PREFIX)
    exported: dict[str, str] = {}
    load_env(config, environ=exported, logger=logger)
    for statement in render_exports(exported):
        print(statement, file=out)
    return 0


def main(argv: Optional[Iterable[str]] = None) -> int:
    """Entry point for the setenv CLI."""
    try:
        args = parse_args(argv)
        config = build_config(args)
        return run(config)
    except KeyboardInterrupt:
        print("\n[info] Received Ctrl-C. Aborting setenv cleanly.", file=sys.stderr)
        return 130
    except SetenvAbort as exc:
        if exc.detail:
            print(f"[error] {exc.detail}", file=sys.stderr)
        return exc.exit_code
    except ConfigLoadError as exc:
        print(f"[error] {exc}", file=sys.stderr)
        return 1


__all__ = [
    "SHELL_COMMENT_PREFIX",
    "parse_args",
    "build_config",
    "render_exports",
    "run",
    "main",
]


if __name__ == "__main__":
    sys.exit(main())

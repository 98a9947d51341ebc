"""Command-line interface.

Usage::

    gyatt init <project-name>
    gyatt add-dependency <htmx|alpine|toastify>
    sudo gyatt setup
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from enum import IntEnum

from pydantic import ValidationError

from gyatt import __version__
from gyatt.config import Config
from gyatt.errors import PrivilegeError, ScaffoldError, UnknownDependencyError
from gyatt.installer import ToolInstaller
from gyatt.scaffolder.generator import ProjectGenerator, ScaffoldResult
from gyatt.scaffolder.manifest import known_dependencies
from gyatt.utils import (
    console,
    print_error,
    print_success,
    print_summary_table,
    print_warning,
)


class ExitCode(IntEnum):
    OK = 0
    FAILED = 1
    USAGE = 2
    NOT_PRIVILEGED = 3


def print_help() -> None:
    """Print the command summary."""
    deps = "|".join(known_dependencies())
    console.print("[bold]gyatt[/bold] -- scaffold a Go + templ + htmx project\n")
    console.print("  Initialize a new project:  gyatt init <project-name>")
    console.print(f"  Add a static dependency:   gyatt add-dependency <{deps}>")
    console.print("  Install templ/tailwindcss: sudo gyatt setup")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gyatt",
        description="Scaffold a Go + templ + htmx web project",
        add_help=True,
        allow_abbrev=False,
        exit_on_error=False,
    )
    parser.add_argument("--version", action="version", version=f"gyatt {__version__}")
    parser.add_argument("command", nargs="?", default=None)
    parser.add_argument("args", nargs="*", default=[])
    return parser


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def _report(result: ScaffoldResult) -> ExitCode:
    if not result.ok:
        return ExitCode.FAILED
    if result.written:
        print_summary_table(
            {str(path): "written" for path in result.written},
            title=result.operation,
        )
    print_success(f"{result.operation}: done")
    return ExitCode.OK


def cmd_init(args: list[str], config: Config) -> ExitCode:
    if len(args) != 1:
        print_help()
        return ExitCode.USAGE
    generator = ProjectGenerator(config)
    result = asyncio.run(generator.init_project(args[0]))
    return _report(result)


def cmd_add_dependency(args: list[str], config: Config) -> ExitCode:
    if len(args) != 1:
        print_help()
        return ExitCode.USAGE
    generator = ProjectGenerator(config)
    try:
        result = asyncio.run(generator.add_dependency(args[0]))
    except UnknownDependencyError as exc:
        print_warning(str(exc))
        print_help()
        return ExitCode.USAGE
    return _report(result)


def cmd_setup(args: list[str], config: Config) -> ExitCode:
    installer = ToolInstaller(config)
    try:
        installed = installer.install()
    except PrivilegeError as exc:
        print_error(str(exc))
        return ExitCode.NOT_PRIVILEGED
    except ScaffoldError as exc:
        print_error(str(exc))
        return ExitCode.FAILED
    for path in installed:
        print_success(f"Installed {path}")
    return ExitCode.OK


COMMANDS = {
    "init": cmd_init,
    "add-dependency": cmd_add_dependency,
    "setup": cmd_setup,
}


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def _dispatch(argv: list[str] | None, config: Config) -> ExitCode:
    try:
        ns, unparsed = _build_parser().parse_known_args(argv)
    except argparse.ArgumentError as exc:
        # e.g. "-hello", which argparse reads as -h with a stray value
        print_warning(str(exc))
        print_help()
        return ExitCode.USAGE

    handler = COMMANDS.get(ns.command) if ns.command else None
    if handler is None:
        print_help()
        return ExitCode.OK
    if unparsed:
        # project and dependency names never start with a dash
        print_warning(f"unrecognized arguments: {' '.join(unparsed)}")
        print_help()
        return ExitCode.USAGE
    return handler(ns.args, config)


def run(argv: list[str] | None = None, config: Config | None = None) -> int:
    """Dispatch *argv* and return the process exit status."""
    if config is None:
        try:
            config = Config.from_env()
        except ValidationError as exc:
            print_error(f"invalid configuration: {exc}")
            return int(ExitCode.FAILED)
    code = _dispatch(argv, config)

    if config.legacy_exit_codes:
        return ExitCode.OK
    return int(code)


def main() -> None:
    """CLI entry point for ``gyatt`` and ``python -m gyatt``."""
    code = run()
    if code:
        sys.exit(code)

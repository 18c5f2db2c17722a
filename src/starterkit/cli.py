"""Command line interface for starter-kit."""

from __future__ import annotations

import argparse
import logging
from typing import Iterable, Sequence

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from .catalog import FRAMEWORKS, Framework, find_framework
from .config import Settings
from .directory import OverridePolicy
from .errors import OperationCancelled
from .prompts import Prompter, SelectionFlow
from .scaffold import Delegated, ProjectScaffolder

LOGGER = logging.getLogger("starterkit")


def _override_value(value: str) -> OverridePolicy:
    try:
        policy = OverridePolicy.from_value(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc
    return policy or OverridePolicy.OVERWRITE


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="starter-kit",
        description="Scaffold a new project from a bundled template or an external generator",
    )
    parser.add_argument("target_dir", nargs="?", help="Directory the project is created in")
    parser.add_argument(
        "-t",
        "--template",
        "--tempalte",
        dest="template",
        help="Template id to use instead of choosing a framework and variant",
    )
    parser.add_argument(
        "--override",
        nargs="?",
        const="yes",
        type=_override_value,
        metavar="{yes,no,ignore}",
        help="Answer the non-empty directory question up front (default: yes)",
    )
    parser.add_argument(
        "--list",
        nargs="?",
        const="",
        metavar="FRAMEWORK",
        help="List the available templates, optionally for one framework, and exit",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def _configure_logging(console: Console, verbose: bool) -> None:
    handler = RichHandler(console=console, show_time=False, show_path=False)
    LOGGER.handlers[:] = [handler]
    LOGGER.setLevel(logging.DEBUG if verbose else logging.INFO)
    LOGGER.propagate = False


def _render_catalog(console: Console, frameworks: Iterable[Framework]) -> None:
    table = Table(title="Templates")
    table.add_column("Framework")
    table.add_column("Template")
    table.add_column("Description")
    for framework in frameworks:
        for variant in framework.variants:
            table.add_row(
                f"[{framework.color}]{framework.display}[/]",
                f"[{variant.color}]{variant.name}[/]",
                variant.custom_command or variant.display,
            )
    console.print(table)


def _run(args: argparse.Namespace, console: Console, settings: Settings) -> int:
    flow = SelectionFlow(Prompter(console), settings.cwd)
    choice = flow.run(args.target_dir, args.template, args.override)

    scaffolder = ProjectScaffolder(settings)
    if not scaffolder.delegates(choice.template):
        console.print(f"\n[magenta]Scaffolding project in {choice.root_dir}...[/magenta]")
    outcome = scaffolder.create(choice)

    if isinstance(outcome, Delegated):
        return outcome.status

    console.print("\n[green]Done![/green] Let's get started:")
    console.print(Panel("\n".join(outcome.next_steps), expand=False))
    return 0


def main(argv: Sequence[str] | None = None, *, console: Console | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    console = console or Console()
    _configure_logging(console, args.verbose)

    if args.list is not None:
        frameworks = FRAMEWORKS
        if args.list:
            framework = find_framework(args.list)
            if framework is None:
                parser.error(f"unknown framework '{args.list}'")
            frameworks = (framework,)
        _render_catalog(console, frameworks)
        return 0

    settings = Settings.from_env()
    try:
        return _run(args, console, settings)
    except OperationCancelled as cancelled:
        LOGGER.warning(str(cancelled))
        return 0
    except Exception as exc:  # noqa: BLE001
        LOGGER.error("%s", exc)
        LOGGER.debug("traceback", exc_info=True)
        return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

"""Interactive question flow that gathers a :class:`ResolvedChoice`."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Sequence

from rich.console import Console
from rich.prompt import Prompt
from rich.text import Text

from .catalog import FRAMEWORKS, Framework, all_template_ids
from .config import ResolvedChoice
from .directory import DirectoryState, OverridePolicy, classify
from .errors import OperationCancelled
from .naming import DEFAULT_TARGET_DIR, format_target_dir, is_valid_package_name, to_valid_package_name

__all__ = ["Choice", "Prompter", "SelectionFlow"]


LOGGER = logging.getLogger(__name__)

INVALID_PACKAGE_NAME = "Invalid package.json name"


@dataclass(frozen=True, slots=True)
class Choice:
    """One entry of a select question."""

    title: str
    value: Any
    style: str = "default"


class Prompter:
    """Render text and select questions on a rich console.

    ``KeyboardInterrupt`` and ``EOFError`` while waiting for input are turned
    into :class:`OperationCancelled`.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def text(
        self,
        message: str,
        *,
        default: str = "",
        validate: Callable[[str], bool | str] | None = None,
    ) -> str:
        while True:
            try:
                answer = Prompt.ask(message, default=default, console=self.console)
            except (KeyboardInterrupt, EOFError) as exc:
                raise OperationCancelled() from exc

            if validate is None:
                return answer
            verdict = validate(answer)
            if verdict is True:
                return answer
            self.console.print(f"[red]{verdict or 'Invalid value'}[/red]")

    def select(self, message: str, choices: Sequence[Choice], *, initial: int = 0) -> Any:
        self.console.print(message)
        for index, choice in enumerate(choices, start=1):
            line = Text(f"  {index}. ")
            line.append(choice.title, style=choice.style)
            self.console.print(line)

        options = [str(index) for index in range(1, len(choices) + 1)]
        try:
            answer = Prompt.ask(
                "Enter a number",
                choices=options,
                default=options[initial],
                show_choices=False,
                console=self.console,
            )
        except (KeyboardInterrupt, EOFError) as exc:
            raise OperationCancelled() from exc
        return choices[int(answer) - 1].value


def _validate_package_name(value: str) -> bool | str:
    return is_valid_package_name(value) or INVALID_PACKAGE_NAME


class SelectionFlow:
    """Ask the questions that are not answered by command line arguments.

    Each step returns its result and the next step receives it explicitly; the
    destination is never kept in shared mutable state.
    """

    def __init__(self, prompter: Prompter, cwd: str | Path) -> None:
        self.prompter = prompter
        self.cwd = Path(cwd)

    def run(
        self,
        target_dir: str | None = None,
        template: str | None = None,
        override: OverridePolicy | None = None,
    ) -> ResolvedChoice:
        target = self.ask_target_dir(format_target_dir(target_dir))
        root_dir = self.cwd / target
        project_name = self.project_name(target)

        policy = self.ask_override(target, root_dir, override)
        package_name = self.ask_package_name(project_name)
        template_id = self.ask_template(template)

        return ResolvedChoice(
            target_dir=target,
            root_dir=root_dir,
            package_name=package_name,
            template=template_id,
            override=policy,
        )

    def project_name(self, target: str) -> str:
        """Return the name the project is known by; ``.`` means the current directory."""

        if target == ".":
            return self.cwd.resolve().name
        return target

    def ask_target_dir(self, target_dir: str | None) -> str:
        if target_dir:
            return target_dir
        answer = self.prompter.text("Project name:", default=DEFAULT_TARGET_DIR)
        return format_target_dir(answer) or DEFAULT_TARGET_DIR

    def ask_override(
        self,
        target: str,
        root_dir: Path,
        override: OverridePolicy | None,
    ) -> OverridePolicy | None:
        if classify(root_dir) is not DirectoryState.NON_EMPTY:
            return None

        if override is None:
            message = (
                "Current directory is not empty. Continue?"
                if target == "."
                else f"Target directory {target} is not empty. Continue?"
            )
            override = self.prompter.select(
                message,
                [
                    Choice("Remove existing files and continue", OverridePolicy.OVERWRITE),
                    Choice("Cancel operation", OverridePolicy.ABORT),
                    Choice("Ignore files and continue", OverridePolicy.IGNORE),
                ],
            )

        if override is OverridePolicy.ABORT:
            raise OperationCancelled()
        return override

    def ask_package_name(self, project_name: str) -> str:
        if is_valid_package_name(project_name):
            return project_name
        return self.prompter.text(
            "Package name:",
            default=to_valid_package_name(project_name),
            validate=_validate_package_name,
        )

    def ask_template(self, template: str | None) -> str:
        templates = all_template_ids()
        if template and template in templates:
            return template

        if template:
            LOGGER.debug("unknown template %r", template)
            message = f'"{template}" isn\'t a valid template. Please choose from below: '
        else:
            message = "Select a framework:"

        framework: Framework = self.prompter.select(
            message,
            [Choice(f.display or f.name, f, f.color) for f in FRAMEWORKS],
        )
        return self.prompter.select(
            "Select a variant:",
            [Choice(v.display or v.name, v.name, v.color) for v in framework.variants],
        )

"""Project scaffolding engine."""

from __future__ import annotations

import json
import logging
import os
import re
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Union

from . import directory
from .catalog import find_variant, split_swc
from .config import ResolvedChoice, Settings
from .errors import TemplateNotFoundError
from .package_manager import install_instructions, resolve_custom_command, run_custom_command

__all__ = [
    "Created",
    "Delegated",
    "ProjectScaffolder",
    "RENAME_FILES",
    "ScaffoldOutcome",
    "setup_react_swc",
]


LOGGER = logging.getLogger(__name__)

RENAME_FILES: dict[str, str] = {
    "_gitignore": ".gitignore",
}

PACKAGE_JSON = "package.json"

_REACT_PLUGIN_DEPENDENCY = re.compile(r'"@vitejs/plugin-react": ".+?"')
_REACT_SWC_PLUGIN_DEPENDENCY = '"@vitejs/plugin-react-swc": "^3.5.0"'
_REACT_PLUGIN = "@vitejs/plugin-react"
_REACT_SWC_PLUGIN = "@vitejs/plugin-react-swc"


@dataclass(frozen=True, slots=True)
class Delegated:
    """Terminal outcome: an external generator ran in place of a local template."""

    command: str
    args: tuple[str, ...]
    status: int


@dataclass(frozen=True, slots=True)
class Created:
    """Terminal outcome: a local template was copied into ``root_dir``."""

    root_dir: Path
    package_name: str
    next_steps: tuple[str, ...] = field(default_factory=tuple)


ScaffoldOutcome = Union[Delegated, Created]


def _edit_file(path: Path, callback: Callable[[str], str]) -> None:
    content = path.read_text(encoding="utf-8")
    path.write_text(callback(content), encoding="utf-8")


def _copy(source: Path, destination: Path) -> None:
    if source.is_dir():
        shutil.copytree(source, destination, dirs_exist_ok=True)
    else:
        shutil.copyfile(source, destination)


def setup_react_swc(root: str | Path, *, typescript: bool) -> None:
    """Swap the Babel based React plugin for the SWC one in a copied template.

    Both edits are plain text substitutions; a template that does not contain
    the expected text is left unchanged.
    """

    root = Path(root)
    _edit_file(
        root / PACKAGE_JSON,
        lambda content: _REACT_PLUGIN_DEPENDENCY.sub(
            lambda _: _REACT_SWC_PLUGIN_DEPENDENCY, content, count=1
        ),
    )
    config_name = f"vite.config.{'ts' if typescript else 'js'}"
    _edit_file(
        root / config_name,
        lambda content: content.replace(_REACT_PLUGIN, _REACT_SWC_PLUGIN, 1),
    )


@dataclass(slots=True)
class ProjectScaffolder:
    """Turn a :class:`~starterkit.config.ResolvedChoice` into files on disk.

    The run either delegates to an external generator and reports its exit
    status, or copies a bundled template and reports the next steps. Nothing
    else happens after a delegated run.
    """

    settings: Settings
    runner: Callable[[str, list[str]], int] = run_custom_command

    def create(self, choice: ResolvedChoice) -> ScaffoldOutcome:
        """Scaffold ``choice`` and return the terminal outcome."""

        directory.reconcile(choice.root_dir, choice.override)

        template, is_react_swc = split_swc(choice.template)
        variant = find_variant(template)

        if variant is not None and variant.custom_command:
            return self._delegate(variant.custom_command, choice)

        return self._copy_local(choice, template, is_react_swc)

    def delegates(self, template: str) -> bool:
        """Return ``True`` when ``template`` hands off to an external generator."""

        variant = find_variant(split_swc(template)[0])
        return variant is not None and variant.is_delegated

    def template_dir(self, template: str) -> Path:
        return self.settings.templates_root / f"template-{template}"

    def _delegate(self, custom_command: str, choice: ResolvedChoice) -> Delegated:
        command, args = resolve_custom_command(
            custom_command, choice.target_dir, self.settings.package_manager
        )
        LOGGER.info("Delegating to %s %s", command, " ".join(args))
        status = self.runner(command, args)
        return Delegated(command=command, args=tuple(args), status=status)

    def _copy_local(self, choice: ResolvedChoice, template: str, is_react_swc: bool) -> Created:
        template_dir = self.template_dir(template)
        if not template_dir.is_dir():
            raise TemplateNotFoundError(f"template directory {template_dir} does not exist")

        root_dir = choice.root_dir
        LOGGER.debug("copying %s into %s", template_dir, root_dir)

        for entry in sorted(template_dir.iterdir()):
            if entry.name == PACKAGE_JSON:
                continue
            _copy(entry, root_dir / RENAME_FILES.get(entry.name, entry.name))

        self._write_package_json(template_dir / PACKAGE_JSON, root_dir, choice.package_name)

        if is_react_swc:
            setup_react_swc(root_dir, typescript=template.endswith("-ts"))

        return Created(
            root_dir=root_dir,
            package_name=choice.package_name,
            next_steps=tuple(
                install_instructions(self.settings.package_manager, self._cd_path(root_dir))
            ),
        )

    def _write_package_json(self, source: Path, root_dir: Path, package_name: str) -> None:
        pkg = json.loads(source.read_text(encoding="utf-8"))
        pkg["name"] = package_name
        destination = root_dir / RENAME_FILES.get(PACKAGE_JSON, PACKAGE_JSON)
        destination.write_text(json.dumps(pkg, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")

    def _cd_path(self, root_dir: Path) -> str | None:
        cwd = self.settings.cwd.resolve()
        root = root_dir.resolve()
        if root == cwd:
            return None
        return os.path.relpath(root, cwd)

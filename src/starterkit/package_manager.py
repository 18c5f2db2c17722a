"""Detect the invoking package manager and rewrite commands for it."""

from __future__ import annotations

import logging
import re
import shutil
import subprocess
from dataclasses import dataclass
from typing import Sequence

from .catalog import TARGET_DIR_TOKEN

__all__ = [
    "DEFAULT_PACKAGE_MANAGER",
    "PackageManagerInfo",
    "install_instructions",
    "resolve_custom_command",
    "run_custom_command",
]


LOGGER = logging.getLogger(__name__)

DEFAULT_PACKAGE_MANAGER = "npm"

_NPM_CREATE = re.compile(r"^npm create ")
_NPM_EXEC = re.compile(r"^npm exec")
_VERSION_PIN = "@latest"


@dataclass(frozen=True, slots=True)
class PackageManagerInfo:
    """Name and version of the package manager that launched the tool."""

    name: str = DEFAULT_PACKAGE_MANAGER
    version: str | None = None

    @classmethod
    def from_user_agent(cls, user_agent: str | None) -> "PackageManagerInfo":
        """Parse an ``npm_config_user_agent`` value such as ``pnpm/8.0.0 npm/? node/v20``.

        Missing or blank values fall back to :data:`DEFAULT_PACKAGE_MANAGER`.
        """

        if not user_agent or not user_agent.strip():
            return cls()

        spec = user_agent.split(" ")[0]
        name, _, version = spec.partition("/")
        return cls(name=name or DEFAULT_PACKAGE_MANAGER, version=version or None)

    @property
    def is_classic_yarn(self) -> bool:
        """``True`` for Yarn 1.x, whose ``create`` command rejects version pins."""

        return self.name == "yarn" and bool(self.version) and self.version.startswith("1.")


def _rewrite_create(manager: PackageManagerInfo) -> str:
    # `bun create` resolves its own templates; `bun x` runs the create-* package directly
    if manager.name == "bun":
        return "bun x create-"
    return f"{manager.name} create "


def _rewrite_exec(manager: PackageManagerInfo) -> str:
    if manager.name == "pnpm":
        return "pnpm exec"
    if manager.name == "yarn" and not manager.is_classic_yarn:
        return "yarn dlx"
    if manager.name == "bun":
        return "bun x"
    return "npm exec"


def resolve_custom_command(
    template: str,
    target_dir: str,
    manager: PackageManagerInfo,
) -> tuple[str, list[str]]:
    """Rewrite a generic ``npm create``/``npm exec`` command for ``manager``.

    Returns the executable and its arguments. ``TARGET_DIR`` is substituted
    after splitting, so a destination containing spaces stays one argument.
    The destination is inserted verbatim and is not shell-escaped.
    """

    command = _NPM_CREATE.sub(lambda _: _rewrite_create(manager), template, count=1)
    if manager.is_classic_yarn:
        command = command.replace(_VERSION_PIN, "", 1)
    command = _NPM_EXEC.sub(lambda _: _rewrite_exec(manager), command, count=1)

    executable, *args = command.split(" ")
    args = [arg.replace(TARGET_DIR_TOKEN, target_dir, 1) for arg in args]
    return executable, args


def run_custom_command(command: str, args: Sequence[str]) -> int:
    """Run ``command`` with inherited stdio and return its exit status.

    A child terminated by a signal reports no usable status and maps to ``0``.
    """

    executable = shutil.which(command) or command
    LOGGER.debug("running %s %s", executable, " ".join(args))
    completed = subprocess.run([executable, *args], check=False)
    if completed.returncode < 0:
        return 0
    return completed.returncode


def install_instructions(manager: PackageManagerInfo, cd_path: str | None = None) -> list[str]:
    """Return the shell commands a user runs next inside the new project."""

    steps = [f"cd {cd_path}"] if cd_path else []
    if manager.name == "yarn":
        steps.extend(["yarn", "yarn dev"])
    elif manager.name == "pnpm":
        steps.extend(["pnpm i", "pnpm dev"])
    else:
        steps.extend([f"{manager.name} install", f"{manager.name} run dev"])
    return steps

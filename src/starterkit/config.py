"""Configuration shared by the selection flow, the scaffolder and the CLI."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping

from .directory import OverridePolicy
from .package_manager import PackageManagerInfo

__all__ = [
    "BUNDLED_TEMPLATES",
    "ResolvedChoice",
    "Settings",
    "TEMPLATES_ENV",
    "USER_AGENT_ENV",
]


USER_AGENT_ENV = "npm_config_user_agent"
TEMPLATES_ENV = "STARTER_KIT_TEMPLATES"
BUNDLED_TEMPLATES = Path(__file__).resolve().parent / "templates"


@dataclass(slots=True)
class Settings:
    """Process-wide inputs that do not come from the prompts.

    Attributes
    ----------
    cwd:
        The directory the tool was invoked from. Relative destinations are
        resolved against it and the ``cd`` hint is computed relative to it.
    templates_root:
        Directory holding one ``template-<id>`` folder per local variant.
    package_manager:
        The package manager detected from the user agent.
    """

    cwd: Path
    templates_root: Path = BUNDLED_TEMPLATES
    package_manager: PackageManagerInfo = field(default_factory=PackageManagerInfo)

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        *,
        cwd: str | Path | None = None,
    ) -> "Settings":
        """Build :class:`Settings` from environment variables.

        Parameters
        ----------
        environ:
            Mapping to read from. Defaults to :data:`os.environ`.
        cwd:
            Override the invocation directory. Defaults to :func:`Path.cwd`.
        """

        env = os.environ if environ is None else environ
        templates = env.get(TEMPLATES_ENV)
        return cls(
            cwd=Path(cwd) if cwd is not None else Path.cwd(),
            templates_root=Path(templates).expanduser() if templates else BUNDLED_TEMPLATES,
            package_manager=PackageManagerInfo.from_user_agent(env.get(USER_AGENT_ENV)),
        )


@dataclass(slots=True)
class ResolvedChoice:
    """Everything the scaffolder needs, once every question is answered.

    Attributes
    ----------
    target_dir:
        The destination exactly as given by the user, after trimming. It is
        substituted into delegated commands.
    root_dir:
        Absolute path of the destination.
    package_name:
        Value written to the ``name`` field of ``package.json``.
    template:
        The selected template id, possibly carrying the ``-swc`` marker.
    override:
        Policy applied when the destination already has content.
    """

    target_dir: str
    root_dir: Path
    package_name: str
    template: str
    override: OverridePolicy | None = None

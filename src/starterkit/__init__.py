"""Scaffold new front-end projects from bundled templates.

The package exposes a static catalog of frameworks and their variants, helpers
for validating ``package.json`` names, the destination directory reconciler,
the package manager aware command rewriting used by delegated templates, and
the scaffolder that ties them together behind the command line interface.
"""

from __future__ import annotations

from .catalog import FRAMEWORKS, Framework, Variant, all_template_ids, find_variant
from .config import ResolvedChoice, Settings
from .directory import DirectoryState, OverridePolicy, classify, empty_dir
from .errors import OperationCancelled, StarterKitError, TemplateNotFoundError
from .naming import is_valid_package_name, to_valid_package_name
from .package_manager import PackageManagerInfo, resolve_custom_command
from .scaffold import Created, Delegated, ProjectScaffolder

__all__ = [
    "Created",
    "Delegated",
    "DirectoryState",
    "FRAMEWORKS",
    "Framework",
    "OperationCancelled",
    "OverridePolicy",
    "PackageManagerInfo",
    "ProjectScaffolder",
    "ResolvedChoice",
    "Settings",
    "StarterKitError",
    "TemplateNotFoundError",
    "Variant",
    "all_template_ids",
    "classify",
    "empty_dir",
    "find_variant",
    "is_valid_package_name",
    "resolve_custom_command",
    "to_valid_package_name",
]

__version__ = "0.1.0"

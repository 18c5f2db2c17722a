"""Inspect and prepare the destination directory of a scaffold."""

from __future__ import annotations

import logging
import shutil
from enum import Enum
from pathlib import Path

from .errors import OperationCancelled

__all__ = [
    "DirectoryState",
    "OverridePolicy",
    "VCS_DIRECTORY",
    "classify",
    "empty_dir",
    "is_empty",
    "reconcile",
]


LOGGER = logging.getLogger(__name__)

VCS_DIRECTORY = ".git"


class DirectoryState(str, Enum):
    """Classification of a destination path."""

    ABSENT = "absent"
    EMPTY_EQUIVALENT = "empty-equivalent"
    NON_EMPTY = "non-empty"


class OverridePolicy(str, Enum):
    """How to treat a destination directory that already has content."""

    OVERWRITE = "yes"
    ABORT = "no"
    IGNORE = "ignore"

    @classmethod
    def from_value(cls, value: str | bool | None) -> "OverridePolicy | None":
        """Parse a CLI or prompt answer. ``True`` (a bare flag) means overwrite."""

        if value is None or value is False:
            return None
        if value is True:
            return cls.OVERWRITE
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as exc:
            choices = ", ".join(policy.value for policy in cls)
            raise ValueError(f"invalid override '{value}'. Expected one of: {choices}") from exc


def is_empty(path: str | Path) -> bool:
    """Return ``True`` when ``path`` holds nothing but, at most, a ``.git`` directory."""

    entries = [entry.name for entry in Path(path).iterdir()]
    return len(entries) == 0 or entries == [VCS_DIRECTORY]


def classify(path: str | Path) -> DirectoryState:
    path = Path(path)
    if not path.exists():
        return DirectoryState.ABSENT
    if is_empty(path):
        return DirectoryState.EMPTY_EQUIVALENT
    return DirectoryState.NON_EMPTY


def empty_dir(path: str | Path) -> None:
    """Delete every entry of ``path`` except the ``.git`` directory.

    Missing paths are ignored. Entries are removed in name order; the first one
    that cannot be removed stops the cleanup and its :class:`OSError`
    propagates, leaving the remaining entries in place.
    """

    path = Path(path)
    if not path.exists():
        return

    for entry in sorted(path.iterdir()):
        if entry.name == VCS_DIRECTORY:
            continue
        LOGGER.debug("removing %s", entry)
        if entry.is_dir() and not entry.is_symlink():
            shutil.rmtree(entry)
        else:
            entry.unlink()


def reconcile(path: str | Path, policy: OverridePolicy | None) -> DirectoryState:
    """Apply ``policy`` to ``path`` and make sure the directory exists afterwards.

    The policy only matters for a non-empty directory. Returns the state the
    directory was in before reconciliation.
    """

    path = Path(path)
    state = classify(path)

    if state is DirectoryState.NON_EMPTY:
        if policy is OverridePolicy.ABORT:
            raise OperationCancelled()
        if policy is OverridePolicy.OVERWRITE:
            LOGGER.debug("emptying %s", path)
            empty_dir(path)
        else:
            LOGGER.debug("keeping existing files in %s", path)

    path.mkdir(parents=True, exist_ok=True)
    return state

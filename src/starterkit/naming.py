"""Package name and target directory normalisation utilities."""

from __future__ import annotations

import re

__all__ = [
    "DEFAULT_TARGET_DIR",
    "format_target_dir",
    "is_valid_package_name",
    "to_valid_package_name",
]


DEFAULT_TARGET_DIR = "your-project"

_PACKAGE_NAME = re.compile(r"(?:@[a-z\d\-*~][a-z\d\-*._~]*/)?[a-z\d\-~][a-z\d\-._~]*", re.ASCII)
_WHITESPACE = re.compile(r"\s+")
_LEADING_DOT_OR_UNDERSCORE = re.compile(r"^[._]")
_INVALID_CHARACTERS = re.compile(r"[^a-z\d\-~]+", re.ASCII)
_TRAILING_SLASHES = re.compile(r"/+$")


def format_target_dir(value: str | None) -> str | None:
    """Trim ``value`` and drop any trailing slashes.

    Blank input returns ``None`` so callers can fall back to
    :data:`DEFAULT_TARGET_DIR`.
    """

    if value is None:
        return None
    formatted = _TRAILING_SLASHES.sub("", value.strip())
    return formatted or None


def is_valid_package_name(name: str) -> bool:
    """Return ``True`` when ``name`` is usable as the ``name`` of a ``package.json``.

    An optional ``@scope/`` prefix is allowed. Both segments accept lowercase
    letters, digits, ``-`` and ``~`` (the scope also ``*``) as their first
    character, and additionally ``.`` and ``_`` afterwards.
    """

    return _PACKAGE_NAME.fullmatch(name) is not None


def to_valid_package_name(name: str) -> str:
    """Return a package name derived from ``name``.

    The conversion is lossy and idempotent. Input that has nothing usable left
    after sanitising falls back to :data:`DEFAULT_TARGET_DIR`.
    """

    candidate = name.strip().lower()
    candidate = _WHITESPACE.sub("-", candidate)
    candidate = _LEADING_DOT_OR_UNDERSCORE.sub("", candidate, count=1)
    candidate = _INVALID_CHARACTERS.sub("-", candidate)

    if not candidate:
        return DEFAULT_TARGET_DIR

    return candidate

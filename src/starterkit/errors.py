"""Custom exception types raised while scaffolding a project."""

from __future__ import annotations

__all__ = ["OperationCancelled", "StarterKitError", "TemplateNotFoundError"]


class StarterKitError(RuntimeError):
    """Base class for errors raised by starter-kit."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class OperationCancelled(StarterKitError):
    """Raised when the user aborts the prompt sequence or the overwrite question."""

    def __init__(self, message: str = "Operation cancelled") -> None:
        super().__init__(message)


class TemplateNotFoundError(StarterKitError):
    """Raised when a local template directory is missing from the templates root."""

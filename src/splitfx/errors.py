"""Custom exception types raised while scaffolding a project."""

from __future__ import annotations


class ScaffoldError(RuntimeError):
    """Raised when a scaffold run cannot continue."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class PreconditionError(ScaffoldError):
    """Raised before any side effect, e.g. when the target already exists."""


class RetrievalError(ScaffoldError):
    """Raised when the template could not be materialised."""


__all__ = ["PreconditionError", "RetrievalError", "ScaffoldError"]

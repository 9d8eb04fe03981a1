"""Domain error types."""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """A required argument was missing or unusable.

    Raised for programming-error conditions only: adding a missing coat to
    storage, or building/handling a guest event without a storage reference.
    """

    def __init__(self, argument: str, message: str | None = None) -> None:
        self.argument = argument
        super().__init__(message or f"{argument} must not be None")

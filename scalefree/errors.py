"""Exception hierarchy for scale-free graph generation."""

from __future__ import annotations

from typing import Optional


class ScaleFreeError(Exception):
    """Base class for every error raised by this package."""


class InvalidConfiguration(ScaleFreeError, ValueError):
    """Raised at construction time when generator parameters are invalid."""


class CollaboratorFailure(ScaleFreeError):
    """
    Raised when the sink or vertex factory fails during generation.

    The original exception is chained as ``__cause__``.  Whatever was
    written to the sink before the failure is left in place.
    """

    def __init__(
        self,
        message: str,
        *,
        step: Optional[int] = None,
        operation: str = "",
    ) -> None:
        super().__init__(message)
        self.step = step
        self.operation = operation

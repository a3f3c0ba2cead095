"""Failure taxonomy for the synthesis engine.

Only NoImageData reaches the caller. Everything else is caught where the
external call is made and turned into a degraded but valid plan.
"""

from __future__ import annotations


class SynthesisError(Exception):
    """Base class for engine errors."""


class NoImageData(SynthesisError):
    """An image was referenced but no base64 payload could be obtained."""

    def __init__(
        self,
        message: str = "We could not prepare the photo for analysis. "
        "Please choose a different image.",
    ) -> None:
        super().__init__(message)


class ExternalServiceFailure(SynthesisError):
    """Room classifier or vision annotation call failed."""

    def __init__(self, service: str, message: str, *, status: int | None = None) -> None:
        super().__init__(message)
        self.service = service
        self.status = status


class GenerativeModelFailure(SynthesisError):
    """Caption or plan model failed after bounded retries, or returned unusable text."""

    def __init__(self, message: str, *, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


class ClassifierRequestError(SynthesisError):
    """Room classifier service cannot answer; ``status`` is the HTTP status to reply with."""

    def __init__(self, message: str, *, status: int) -> None:
        super().__init__(message)
        self.status = status

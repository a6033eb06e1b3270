"""Custom exception hierarchy for the Ghanabuild estimator."""

from __future__ import annotations


class GhanabuildError(Exception):
    """Base exception for all Ghanabuild errors."""


class CatalogError(GhanabuildError):
    """Raised when a rate catalog cannot be loaded or validated."""


class EstimationError(GhanabuildError):
    """Raised when cost estimation fails."""


class InvalidInputError(EstimationError):
    """Raised when a project request has unusable numeric fields.

    ``details`` holds one human-readable message per offending field so
    callers can show the whole list at once.
    """

    def __init__(self, message: str, details: list[str] | None = None) -> None:
        super().__init__(message)
        self.details = list(details or [])

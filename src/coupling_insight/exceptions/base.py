"""Root of the Coupling Insight exception hierarchy."""

from typing import Any, Mapping, Optional


class CouplingInsightError(Exception):
    """Base exception for all Coupling Insight errors.

    ``details`` holds short context values shown after the message, e.g.
    ``Repository unavailable: o/r (reason=not found, status=404)``.
    """

    def __init__(self, message: str, details: Optional[Mapping[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = dict(details or {})

    def __str__(self) -> str:
        if not self.details:
            return self.message
        context = ", ".join(f"{key}={value}" for key, value in self.details.items())
        return f"{self.message} ({context})"

"""Fetch-layer exceptions: repository listing and change-set detail."""

from typing import Optional

from .base import CouplingInsightError


class RemoteError(CouplingInsightError):
    """Base class for errors raised while talking to a repository host."""

    pass


class RepositoryUnavailableError(RemoteError):
    """Raised when a repository cannot be read.

    Covers a missing owner or repo, authentication failures, exhausted rate
    limits and transport errors. Callers do not distinguish between them.
    """

    def __init__(
        self,
        owner: str,
        repo: str,
        reason: str,
        status_code: Optional[int] = None,
    ):
        details = {"reason": reason}
        if status_code is not None:
            details["status"] = str(status_code)

        super().__init__(f"Repository unavailable: {owner}/{repo}", details=details)
        self.owner = owner
        self.repo = repo
        self.reason = reason
        self.status_code = status_code

"""Repository source interface."""

from abc import ABC, abstractmethod

from ..history.models import ChangeSet, ChangeSetRef


class RepositorySource(ABC):
    """Abstract source of change-set history for a hosted repository.

    Every method raises RepositoryUnavailableError when the repository cannot
    be read.
    """

    @abstractmethod
    def list_change_sets(self, owner: str, repo: str, limit: int = -1) -> list[ChangeSetRef]:
        """List commits, newest first.

        Args:
            owner: Repository owner (user or organisation)
            repo: Repository name
            limit: Maximum refs to return; <= 0 fetches every page
        """

    @abstractmethod
    def get_change_set_detail(self, owner: str, repo: str, change_set_id: str) -> ChangeSet:
        """Fetch one change-set with its touched file paths."""

    @abstractmethod
    def list_merged_pull_requests(self, owner: str, repo: str) -> list[str]:
        """Merge-commit SHAs of every merged pull request."""

    def close(self) -> None:
        """Release any held resources."""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

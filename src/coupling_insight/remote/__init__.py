"""Remote repository sources."""

from .base import RepositorySource
from .github import GitHubSource

__all__ = ["RepositorySource", "GitHubSource"]

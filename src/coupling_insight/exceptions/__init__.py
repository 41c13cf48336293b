"""Exception hierarchy for Coupling Insight."""

from .base import CouplingInsightError
from .config import ConfigurationError, InvalidConfigError
from .remote import RemoteError, RepositoryUnavailableError

__all__ = [
    "CouplingInsightError",
    "RemoteError",
    "RepositoryUnavailableError",
    "ConfigurationError",
    "InvalidConfigError",
]

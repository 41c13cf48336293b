"""
Coupling Insight - developer coupling from repository history

Finds the pairs of contributors who most often modify the same files, and
the files that recur most often across merged pull requests.
"""

__version__ = "0.1.0"

from .analysis import (
    NoCouplingFound,
    NoPullRequests,
    RankedFiles,
    RepositoryNotFound,
    TiedCouples,
    UniqueCouple,
)
from .api import analyze
from .history import build_contribution_table, compute_best_couples, rank_pr_files

__all__ = [
    "analyze",
    "build_contribution_table",
    "compute_best_couples",
    "rank_pr_files",
    "RepositoryNotFound",
    "NoCouplingFound",
    "UniqueCouple",
    "TiedCouples",
    "NoPullRequests",
    "RankedFiles",
]

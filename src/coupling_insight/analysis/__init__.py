"""Analysis engine and its outcome types."""

from .engine import ProgressCallback, analyze_coupling, analyze_pr_files
from .outcomes import (
    CouplingOutcome,
    FrequencyOutcome,
    NoCouplingFound,
    NoPullRequests,
    RankedFiles,
    RepositoryNotFound,
    TiedCouples,
    UniqueCouple,
    couple_outcome,
)

__all__ = [
    "analyze_coupling",
    "analyze_pr_files",
    "ProgressCallback",
    "CouplingOutcome",
    "FrequencyOutcome",
    "RepositoryNotFound",
    "NoCouplingFound",
    "UniqueCouple",
    "TiedCouples",
    "NoPullRequests",
    "RankedFiles",
    "couple_outcome",
]

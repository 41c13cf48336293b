"""Change-set history analysis: contributions, coupling and file frequency."""

from .contributions import build_contribution_table
from .coupling import compute_best_couples, overlap_score
from .frequency import count_file_occurrences, rank_files, rank_pr_files
from .models import AuthorCouple, ChangeSet, ChangeSetRef, ContributionTable, FileFrequency

__all__ = [
    "AuthorCouple",
    "ChangeSet",
    "ChangeSetRef",
    "ContributionTable",
    "FileFrequency",
    "build_contribution_table",
    "compute_best_couples",
    "overlap_score",
    "count_file_occurrences",
    "rank_files",
    "rank_pr_files",
]

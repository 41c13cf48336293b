"""Rank the files that recur most often across merged pull requests."""

from collections.abc import Iterable

from .models import ChangeSet, FileFrequency

DEFAULT_TOP = 5


def count_file_occurrences(change_sets: Iterable[ChangeSet]) -> dict[str, int]:
    """Count file-list entries per path across all change-sets.

    Entries are counted as listed: a path that appears twice in one
    change-set's file list adds two. Keys keep first-discovery order.
    """
    occurrences: dict[str, int] = {}
    for change_set in change_sets:
        for path in change_set.files:
            occurrences[path] = occurrences.get(path, 0) + 1
    return occurrences


def rank_files(occurrences: dict[str, int], top: int = DEFAULT_TOP) -> list[FileFrequency]:
    """Top ``top`` paths by count, descending.

    sorted() is stable, so equal counts keep first-discovery order.
    """
    if top < 1:
        return []
    ranked = sorted(occurrences.items(), key=lambda item: item[1], reverse=True)
    return [FileFrequency(path, count) for path, count in ranked[:top]]


def rank_pr_files(change_sets: Iterable[ChangeSet], top: int = DEFAULT_TOP) -> list[FileFrequency]:
    """Most frequently touched files across the given change-sets."""
    return rank_files(count_file_occurrences(change_sets), top=top)

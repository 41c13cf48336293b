"""Aggregate per-author, per-file contribution counts."""

from collections.abc import Iterable

from .models import ChangeSet, ContributionTable


def build_contribution_table(change_sets: Iterable[ChangeSet]) -> ContributionTable:
    """Count how often each author touched each file.

    Every author gets an entry, even one whose change-sets touched no files.
    A path listed twice in one change-set counts twice. Outer keys keep the
    order in which authors were first seen.

    Change-sets without an author are skipped; callers normally filter them
    out before fetching details.
    """
    table: ContributionTable = {}

    for change_set in change_sets:
        if change_set.author is None:
            continue
        files = table.setdefault(change_set.author, {})
        for path in change_set.files:
            files[path] = files.get(path, 0) + 1

    return table

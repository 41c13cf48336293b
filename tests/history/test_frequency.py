"""Tests for the pull-request file frequency ranking."""

from coupling_insight.history.frequency import (
    count_file_occurrences,
    rank_files,
    rank_pr_files,
)
from coupling_insight.history.models import FileFrequency


class TestCountFileOccurrences:
    """Test count_file_occurrences function."""

    def test_counts_across_change_sets(self, make_change_sets):
        change_sets = make_change_sets([(None, ["a.js", "b.js"]), (None, ["a.js"])])
        assert count_file_occurrences(change_sets) == {"a.js": 2, "b.js": 1}

    def test_raw_entries_not_deduplicated(self, make_change_sets):
        change_sets = make_change_sets([(None, ["a.js", "a.js"])])
        assert count_file_occurrences(change_sets) == {"a.js": 2}

    def test_first_discovery_order(self, make_change_sets):
        change_sets = make_change_sets([(None, ["z", "y"]), (None, ["x", "z"])])
        assert list(count_file_occurrences(change_sets)) == ["z", "y", "x"]


class TestRankFiles:
    """Test rank_files and rank_pr_files."""

    def test_pull_request_scenario(self, make_change_sets):
        change_sets = make_change_sets(
            [
                (None, ["a.js", "b.js"]),
                (None, ["a.js"]),
                (None, ["a.js", "b.js", "c.js"]),
            ]
        )
        assert rank_pr_files(change_sets) == [
            FileFrequency("a.js", 3),
            FileFrequency("b.js", 2),
            FileFrequency("c.js", 1),
        ]

    def test_empty_input(self):
        assert rank_pr_files([]) == []

    def test_truncates_to_five(self):
        occurrences = {f"f{i}": i for i in range(1, 9)}
        ranked = rank_files(occurrences)

        assert len(ranked) == 5
        assert [f.path for f in ranked] == ["f8", "f7", "f6", "f5", "f4"]

    def test_shorter_list_not_padded(self):
        assert len(rank_files({"a": 1, "b": 1})) == 2

    def test_sorted_descending(self):
        ranked = rank_files({"a": 1, "b": 7, "c": 3, "d": 7, "e": 2, "f": 5})
        counts = [f.count for f in ranked]
        assert counts == sorted(counts, reverse=True)

    def test_ties_keep_first_discovery_order(self):
        occurrences = {"late": 1, "b": 2, "a": 2, "c": 2, "d": 2, "e": 2, "f": 2}
        ranked = rank_files(occurrences)
        assert [f.path for f in ranked] == ["b", "a", "c", "d", "e"]

    def test_custom_top(self):
        assert rank_files({"a": 3, "b": 2, "c": 1}, top=2) == [
            FileFrequency("a", 3),
            FileFrequency("b", 2),
        ]

    def test_non_positive_top(self):
        assert rank_files({"a": 1}, top=0) == []

"""Tests for overlap scoring and best-couple selection."""

from itertools import combinations

import pytest

from coupling_insight.history.coupling import compute_best_couples, overlap_score
from coupling_insight.history.models import AuthorCouple


def brute_force_scores(table):
    """Recompute every pair's score directly from the definition."""
    scores = {}
    for a, b in combinations(table, 2):
        shared = set(table[a]) & set(table[b])
        scores[(a, b)] = sum(min(table[a][f], table[b][f]) for f in shared)
    return scores


class TestOverlapScore:
    """Test overlap_score function."""

    def test_no_shared_files(self):
        assert overlap_score({"a": 3}, {"b": 4}) == 0

    def test_min_of_counts(self):
        assert overlap_score({"a": 3}, {"a": 2}) == 2

    def test_sums_over_shared_files(self):
        assert overlap_score({"a": 3, "b": 1, "c": 7}, {"a": 1, "b": 4, "d": 9}) == 2

    def test_symmetric(self):
        x = {"a": 3, "b": 1, "c": 2}
        y = {"a": 5, "c": 1}
        assert overlap_score(x, y) == overlap_score(y, x)

    def test_empty_mapping(self):
        assert overlap_score({}, {"a": 1}) == 0
        assert overlap_score({}, {}) == 0


class TestComputeBestCouples:
    """Test compute_best_couples function."""

    def test_empty_table(self):
        assert compute_best_couples({}) == []

    def test_single_author(self):
        assert compute_best_couples({"alice": {"a.js": 4}}) == []

    def test_unique_maximum(self):
        """X and Y share a.js (3 vs 2), Z shares nothing."""
        table = {
            "X": {"a.js": 3, "x.js": 1},
            "Y": {"a.js": 2},
            "Z": {"z.js": 5},
        }
        assert compute_best_couples(table) == [AuthorCouple("X", "Y", 2)]

    def test_no_common_files(self):
        table = {"X": {"a.js": 1}, "Y": {"b.js": 2}, "Z": {"c.js": 3}}
        assert compute_best_couples(table) == []

    def test_tied_maxima_on_different_files(self):
        table = {
            "X": {"a.js": 5},
            "Y": {"a.js": 5, "b.js": 5},
            "Z": {"b.js": 6},
        }
        result = compute_best_couples(table)

        assert result == [AuthorCouple("X", "Y", 5), AuthorCouple("Y", "Z", 5)]

    def test_higher_score_replaces_earlier_ties(self):
        table = {
            "A": {"f": 1},
            "B": {"f": 1, "g": 4},
            "C": {"f": 1},
            "D": {"g": 3},
        }
        # (A,B)=1, (A,C)=1, (B,C)=1, (B,D)=3
        assert compute_best_couples(table) == [AuthorCouple("B", "D", 3)]

    def test_pairs_follow_author_order(self):
        table = {"Z": {"f": 1}, "A": {"f": 1}, "M": {"f": 1}}
        pairs = [c.pair for c in compute_best_couples(table)]
        assert pairs == [("Z", "A"), ("Z", "M"), ("A", "M")]

    def test_deterministic(self):
        table = {"a": {"x": 2, "y": 1}, "b": {"x": 1, "y": 2}, "c": {"x": 2, "y": 1}}
        assert compute_best_couples(table) == compute_best_couples(dict(table))

    def test_authors_with_empty_mappings(self):
        table = {"a": {}, "b": {"f": 1}, "c": {"f": 2}}
        assert compute_best_couples(table) == [AuthorCouple("b", "c", 1)]

    @pytest.mark.parametrize(
        "table",
        [
            {"a": {"f": 1, "g": 2}, "b": {"g": 2, "h": 1}, "c": {"f": 3, "h": 1}},
            {"a": {"f": 2}, "b": {"f": 2}, "c": {"f": 2}, "d": {"g": 9}},
            {"p": {"x": 1}, "q": {"y": 1}, "r": {"x": 4, "y": 4}, "s": {"x": 1, "y": 1}},
            {"solo": {"x": 10}},
        ],
    )
    def test_matches_brute_force(self, table):
        """All and only the maximal pairs, scores recomputed from the definition."""
        scores = brute_force_scores(table)
        best = max(scores.values(), default=0)
        expected = [pair for pair, score in scores.items() if score == best and score > 0]

        result = compute_best_couples(table)

        assert [c.pair for c in result] == expected
        assert all(c.score == scores[c.pair] for c in result)

    def test_never_returns_non_positive_scores(self):
        table = {"a": {"x": 1}, "b": {"y": 1}, "c": {"x": 1}}
        assert all(c.score > 0 for c in compute_best_couples(table))

    def test_no_duplicate_or_reversed_pairs(self):
        table = {"a": {"x": 1}, "b": {"x": 1}, "c": {"x": 1}, "d": {"x": 1}}
        pairs = [c.pair for c in compute_best_couples(table)]
        unordered = {frozenset(p) for p in pairs}

        assert len(pairs) == 6
        assert len(unordered) == len(pairs)
        assert all(a != b for a, b in pairs)

"""Tests for the public analyze() entry point."""

import pytest

from coupling_insight import analyze
from coupling_insight.analysis.outcomes import NoPullRequests, RankedFiles, UniqueCouple


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.chdir(tmp_path)


class TestAnalyze:
    def test_coupling_mode(self, source_factory, coupled_commits):
        outcome = analyze("o", "r", source=source_factory(commits=coupled_commits))
        assert outcome == UniqueCouple("alice", "bob", 2)

    def test_commit_limit_override(self, source_factory, coupled_commits):
        source = source_factory(commits=coupled_commits)
        analyze("o", "r", source=source, commit_limit=3)
        assert source.detail_requests == ["c1", "c2", "c3"]

    def test_pr_files_mode(self, source_factory):
        source = source_factory(commits=[("m", "a", ["x", "y"])], pulls=["m"])
        outcome = analyze("o", "r", mode="pr-files", source=source, top_files=1)

        assert isinstance(outcome, RankedFiles)
        assert [f.path for f in outcome.files] == ["x"]

    def test_no_pull_requests(self, source_factory):
        assert analyze("o", "r", mode="pr-files", source=source_factory()) == NoPullRequests()

    def test_injected_source_left_open(self, source_factory):
        source = source_factory()
        analyze("o", "r", source=source)
        assert not source.closed

    def test_unknown_mode(self, source_factory):
        with pytest.raises(ValueError, match="Unknown mode"):
            analyze("o", "r", mode="blame", source=source_factory())

    def test_progress_forwarded(self, source_factory, coupled_commits, progress):
        analyze("o", "r", source=source_factory(commits=coupled_commits), progress=progress)
        assert progress.advanced == 6

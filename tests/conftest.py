"""Shared test fixtures for Coupling Insight."""

import pytest

from coupling_insight.exceptions import RepositoryUnavailableError
from coupling_insight.history.models import ChangeSet, ChangeSetRef
from coupling_insight.remote.base import RepositorySource


class InMemorySource(RepositorySource):
    """RepositorySource over fixed data.

    commits: list of (sha, author, files) tuples, newest first
    pulls: list of merge-commit SHAs (each must also appear in commits)
    """

    def __init__(self, commits=None, pulls=None, unavailable=False, failing_details=()):
        self.commits = commits or []
        self.pulls = pulls or []
        self.unavailable = unavailable
        self.failing_details = set(failing_details)
        self.detail_requests = []
        self.closed = False

    def list_change_sets(self, owner, repo, limit=-1):
        self._check(owner, repo)
        refs = [ChangeSetRef(id=sha, author=author) for sha, author, _ in self.commits]
        return refs[:limit] if limit > 0 else refs

    def get_change_set_detail(self, owner, repo, change_set_id):
        self._check(owner, repo)
        self.detail_requests.append(change_set_id)
        if change_set_id in self.failing_details:
            raise RepositoryUnavailableError(owner, repo, "server error", 500)
        for sha, author, files in self.commits:
            if sha == change_set_id:
                return ChangeSet(id=sha, author=author, files=list(files))
        raise RepositoryUnavailableError(owner, repo, "not found", 404)

    def list_merged_pull_requests(self, owner, repo):
        self._check(owner, repo)
        return list(self.pulls)

    def close(self):
        self.closed = True

    def _check(self, owner, repo):
        if self.unavailable:
            raise RepositoryUnavailableError(owner, repo, "not found", 404)


class RecordingProgress:
    """ProgressCallback that remembers what it was told."""

    def __init__(self):
        self.total = None
        self.advanced = 0
        self.stopped = False

    def start(self, total):
        self.total = total

    def advance(self):
        self.advanced += 1

    def stop(self):
        self.stopped = True


@pytest.fixture
def source_factory():
    """Build an InMemorySource: source_factory(commits=[...], pulls=[...])."""
    return InMemorySource


@pytest.fixture
def progress():
    return RecordingProgress()


@pytest.fixture
def make_change_sets():
    """Create change-sets from (author, files) tuples."""

    def _make(data):
        return [
            ChangeSet(id=f"{i:040x}", author=author, files=list(files))
            for i, (author, files) in enumerate(data)
        ]

    return _make


@pytest.fixture
def coupled_commits():
    """alice and bob share a.js (3 vs 2 commits); carol works alone; one unattributed commit."""
    return [
        ("c1", "alice", ["a.js", "x.js"]),
        ("c2", "bob", ["a.js"]),
        ("c3", "alice", ["a.js"]),
        ("c4", None, ["a.js", "b.js"]),
        ("c5", "carol", ["c.js"]),
        ("c6", "alice", ["a.js"]),
        ("c7", "bob", ["a.js", "y.js"]),
    ]

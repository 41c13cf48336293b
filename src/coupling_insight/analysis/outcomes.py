"""Result values returned by the analysis engine.

Each analysis ends in exactly one outcome. Callers branch on the type (or
the ``kind`` string in JSON output); nothing here raises.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

from ..history.models import AuthorCouple, FileFrequency


@dataclass(frozen=True)
class RepositoryNotFound:
    """The repository listing could not be fetched."""

    owner: str
    repo: str
    reason: str = ""
    kind: str = field(default="repository_not_found", init=False)

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, "owner": self.owner, "repo": self.repo, "reason": self.reason}


@dataclass(frozen=True)
class NoCouplingFound:
    """No two authors share a file in the analyzed change-sets."""

    authors_analyzed: int = 0
    change_sets_analyzed: int = 0
    kind: str = field(default="no_coupling_found", init=False)

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "authors_analyzed": self.authors_analyzed,
            "change_sets_analyzed": self.change_sets_analyzed,
        }


@dataclass(frozen=True)
class UniqueCouple:
    """A single author pair holds the maximum overlap score."""

    author_a: str
    author_b: str
    score: int
    kind: str = field(default="unique_couple", init=False)

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "author_a": self.author_a,
            "author_b": self.author_b,
            "score": self.score,
        }


@dataclass(frozen=True)
class TiedCouples:
    """Several author pairs share the maximum overlap score."""

    score: int
    pairs: list[tuple[str, str]]
    kind: str = field(default="tied_couples", init=False)

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "score": self.score,
            "pairs": [list(pair) for pair in self.pairs],
        }


@dataclass(frozen=True)
class NoPullRequests:
    """The repository exists but has no merged pull requests."""

    kind: str = field(default="no_pull_requests", init=False)

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind}


@dataclass(frozen=True)
class RankedFiles:
    """Files ordered by how many pull-request file lists include them."""

    files: list[FileFrequency]
    pull_requests_analyzed: int = 0
    kind: str = field(default="ranked_files", init=False)

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "pull_requests_analyzed": self.pull_requests_analyzed,
            "files": [{"path": f.path, "count": f.count} for f in self.files],
        }


CouplingOutcome = Union[RepositoryNotFound, NoCouplingFound, UniqueCouple, TiedCouples]
FrequencyOutcome = Union[RepositoryNotFound, NoPullRequests, RankedFiles]


def couple_outcome(
    couples: list[AuthorCouple],
    authors_analyzed: int = 0,
    change_sets_analyzed: int = 0,
) -> CouplingOutcome:
    """Wrap a compute_best_couples() result in the matching outcome."""
    if not couples:
        return NoCouplingFound(authors_analyzed, change_sets_analyzed)
    if len(couples) == 1:
        best = couples[0]
        return UniqueCouple(best.author_a, best.author_b, best.score)
    return TiedCouples(couples[0].score, [c.pair for c in couples])

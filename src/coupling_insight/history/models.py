"""Data models for change-set history analysis."""

from dataclasses import dataclass, field
from typing import Optional

# author -> file path -> number of change-sets touching it
ContributionTable = dict[str, dict[str, int]]


@dataclass(frozen=True)
class ChangeSetRef:
    id: str  # commit SHA
    author: Optional[str]  # account login, None when unresolvable


@dataclass
class ChangeSet:
    id: str
    author: Optional[str]
    files: list[str] = field(default_factory=list)  # touched paths, in diff order


@dataclass(frozen=True)
class AuthorCouple:
    author_a: str
    author_b: str
    score: int  # shared-file overlap, always > 0

    @property
    def pair(self) -> tuple[str, str]:
        return (self.author_a, self.author_b)


@dataclass(frozen=True)
class FileFrequency:
    path: str
    count: int

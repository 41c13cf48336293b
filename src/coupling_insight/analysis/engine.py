"""Analysis engine: fetch change-sets from a source and run the core.

Fetching is the only I/O. The contribution table and file counts are built
by the calling thread, one change-set at a time in listing order. With
``workers > 1`` the detail requests run on a bounded thread pool, but results
are still consumed in submission order, so the output matches a sequential
run exactly.

A failure while listing change-sets becomes a RepositoryNotFound outcome and
nothing is aggregated. A failure fetching a single change-set's detail is
not recoverable and propagates as RepositoryUnavailableError.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Iterator, Optional, Protocol

from ..exceptions import RepositoryUnavailableError
from ..history.contributions import build_contribution_table
from ..history.coupling import compute_best_couples
from ..history.frequency import DEFAULT_TOP, rank_pr_files
from ..history.models import ChangeSet, ChangeSetRef
from ..logging_config import get_logger
from ..remote.base import RepositorySource
from .outcomes import (
    CouplingOutcome,
    FrequencyOutcome,
    NoPullRequests,
    RankedFiles,
    RepositoryNotFound,
    couple_outcome,
)

logger = get_logger(__name__)


class ProgressCallback(Protocol):
    """Receives fetch progress. Implemented by the CLI's progress bar."""

    def start(self, total: int) -> None: ...

    def advance(self) -> None: ...

    def stop(self) -> None: ...


def analyze_coupling(
    source: RepositorySource,
    owner: str,
    repo: str,
    limit: int = -1,
    workers: int = 1,
    progress: Optional[ProgressCallback] = None,
) -> CouplingOutcome:
    """Find the most strongly coupled author pairs of a repository.

    Args:
        source: Where to read commits from
        owner: Repository owner
        repo: Repository name
        limit: Most recent commits to analyze (<= 0 = all)
        workers: Concurrent detail fetches (1 = sequential)
        progress: Optional progress callback

    Returns:
        RepositoryNotFound, NoCouplingFound, UniqueCouple or TiedCouples

    Raises:
        RepositoryUnavailableError: If a single commit's detail cannot be fetched
    """
    try:
        refs = source.list_change_sets(owner, repo, limit)
    except RepositoryUnavailableError as e:
        logger.warning("Cannot list commits of %s/%s: %s", owner, repo, e)
        return RepositoryNotFound(owner, repo, e.reason)

    attributed = [ref for ref in refs if ref.author is not None]
    logger.info(
        "Analyzing %d commits of %s/%s (%d without a resolvable author skipped)",
        len(attributed),
        owner,
        repo,
        len(refs) - len(attributed),
    )

    change_sets = _fetch_details(source, owner, repo, attributed, workers, progress)
    table = build_contribution_table(change_sets)
    couples = compute_best_couples(table)

    outcome = couple_outcome(couples, len(table), len(attributed))
    logger.info("Coupling analysis of %s/%s: %s", owner, repo, outcome.kind)
    return outcome


def analyze_pr_files(
    source: RepositorySource,
    owner: str,
    repo: str,
    top: int = DEFAULT_TOP,
    workers: int = 1,
    progress: Optional[ProgressCallback] = None,
) -> FrequencyOutcome:
    """Rank the files that appear most often in merged pull requests.

    Args:
        source: Where to read pull requests from
        owner: Repository owner
        repo: Repository name
        top: Number of files to return
        workers: Concurrent detail fetches (1 = sequential)
        progress: Optional progress callback

    Returns:
        RepositoryNotFound, NoPullRequests or RankedFiles

    Raises:
        RepositoryUnavailableError: If a merge commit's detail cannot be fetched
    """
    try:
        shas = source.list_merged_pull_requests(owner, repo)
    except RepositoryUnavailableError as e:
        logger.warning("Cannot list pull requests of %s/%s: %s", owner, repo, e)
        return RepositoryNotFound(owner, repo, e.reason)

    if not shas:
        logger.info("No merged pull requests in %s/%s", owner, repo)
        return NoPullRequests()

    refs = [ChangeSetRef(id=sha, author=None) for sha in shas]
    change_sets = _fetch_details(source, owner, repo, refs, workers, progress)
    ranked = rank_pr_files(change_sets, top=top)

    logger.info("Ranked %d files across %d pull requests", len(ranked), len(shas))
    return RankedFiles(ranked, pull_requests_analyzed=len(shas))


def _fetch_details(
    source: RepositorySource,
    owner: str,
    repo: str,
    refs: list[ChangeSetRef],
    workers: int,
    progress: Optional[ProgressCallback],
) -> list[ChangeSet]:
    """Fetch every ref's detail, in ref order.

    The listing's author wins over the detail's, so commits keep the
    attribution they were filtered on.
    """
    change_sets: list[ChangeSet] = []
    if progress is not None:
        progress.start(len(refs))

    try:
        for ref, detail in zip(refs, _iter_details(source, owner, repo, refs, workers)):
            change_sets.append(ChangeSet(id=ref.id, author=ref.author, files=detail.files))
            if progress is not None:
                progress.advance()
    finally:
        if progress is not None:
            progress.stop()

    return change_sets


def _iter_details(
    source: RepositorySource,
    owner: str,
    repo: str,
    refs: list[ChangeSetRef],
    workers: int,
) -> Iterator[ChangeSet]:
    if workers <= 1 or len(refs) < 2:
        for ref in refs:
            yield source.get_change_set_detail(owner, repo, ref.id)
        return

    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = [
            executor.submit(source.get_change_set_detail, owner, repo, ref.id) for ref in refs
        ]
        try:
            for future in futures:
                yield future.result()
        finally:
            for future in futures:
                future.cancel()

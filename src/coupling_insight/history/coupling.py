"""Find the author pairs whose work overlaps most.

Overlap between two authors:

    score(A, B) = sum over files touched by both of min(count_A, count_B)

Taking the minimum rewards sustained parallel editing of the same file over a
single large burst by one of the two. The best couples are every pair that
reaches the global maximum score; a maximum of zero means no coupling at all.
"""

from ..logging_config import get_logger
from .models import AuthorCouple, ContributionTable

logger = get_logger(__name__)


def overlap_score(files_a: dict[str, int], files_b: dict[str, int]) -> int:
    """Overlap score of two authors' file-count mappings. Symmetric."""
    if len(files_b) < len(files_a):
        files_a, files_b = files_b, files_a

    score = 0
    for path, count_a in files_a.items():
        count_b = files_b.get(path)
        if count_b is not None:
            score += min(count_a, count_b)
    return score


def compute_best_couples(table: ContributionTable) -> list[AuthorCouple]:
    """Return every author pair that achieves the maximum overlap score.

    Pairs are enumerated as (i, j) with i < j over the table's author order,
    so each unordered pair is visited once and the output order is stable.
    Ties are not broken. Pairs with zero overlap never qualify, so the result
    is empty when no two authors share a file.

    Args:
        table: Contribution table (author -> path -> count)

    Returns:
        AuthorCouple entries that all share the same, strictly positive score
    """
    authors = list(table)
    max_score = 0
    best: list[AuthorCouple] = []

    for i, author_a in enumerate(authors):
        files_a = table[author_a]
        for author_b in authors[i + 1 :]:
            score = overlap_score(files_a, table[author_b])
            if score == 0:
                continue
            if score > max_score:
                max_score = score
                best = [AuthorCouple(author_a, author_b, score)]
            elif score == max_score:
                best.append(AuthorCouple(author_a, author_b, score))

    logger.debug(
        "Compared %d author pairs, %d best couple(s) at score %d",
        len(authors) * (len(authors) - 1) // 2,
        len(best),
        max_score,
    )
    return best

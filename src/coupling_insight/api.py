"""Public API for Coupling Insight.

Example:
    >>> from coupling_insight import analyze
    >>>
    >>> outcome = analyze("octocat", "hello-world", commit_limit=100)
    >>> outcome.kind
    'unique_couple'
    >>>
    >>> outcome = analyze("octocat", "hello-world", mode="pr-files")
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal, Optional, Union

from .analysis import CouplingOutcome, FrequencyOutcome, ProgressCallback
from .analysis.engine import analyze_coupling, analyze_pr_files
from .config import load_config
from .logging_config import get_logger
from .remote import GitHubSource, RepositorySource

logger = get_logger(__name__)

Mode = Literal["coupling", "pr-files"]


def analyze(
    owner: str,
    repo: str,
    mode: Mode = "coupling",
    config_file: Optional[Path] = None,
    source: Optional[RepositorySource] = None,
    progress: Optional[ProgressCallback] = None,
    **overrides,
) -> Union[CouplingOutcome, FrequencyOutcome]:
    """Analyze a GitHub repository.

    Args:
        owner: Repository owner
        repo: Repository name
        mode: "coupling" for author coupling, "pr-files" for the file ranking
        config_file: Optional explicit config file path
        source: Repository source to use instead of GitHub
        progress: Optional progress callback
        **overrides: Configuration overrides (e.g. commit_limit=50, token="...")

    Returns:
        The analysis outcome

    Raises:
        CouplingInsightError: If configuration is invalid
        RepositoryUnavailableError: If a change-set detail cannot be fetched
        ValueError: If mode is unknown
    """
    if mode not in ("coupling", "pr-files"):
        raise ValueError(f"Unknown mode: {mode!r}. Choose from: coupling, pr-files")

    config = load_config(config_file=config_file, **overrides)
    logger.debug("Analyzing %s/%s (mode=%s)", owner, repo, mode)

    owned = source is None
    if source is None:
        source = GitHubSource.from_config(config)

    try:
        if mode == "pr-files":
            return analyze_pr_files(
                source,
                owner,
                repo,
                top=config.top_files,
                workers=config.workers,
                progress=progress,
            )
        return analyze_coupling(
            source,
            owner,
            repo,
            limit=config.commit_limit,
            workers=config.workers,
            progress=progress,
        )
    finally:
        if owned:
            source.close()

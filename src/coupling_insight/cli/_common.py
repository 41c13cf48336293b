"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

from rich.console import Console

from ..config import AnalysisConfig, load_config

console = Console()
err_console = Console(stderr=True)


def resolve_config(
    config: Optional[Path] = None,
    commit_limit: Optional[int] = None,
    top: Optional[int] = None,
    token: Optional[str] = None,
    workers: Optional[int] = None,
    verbose: bool = False,
    quiet: bool = False,
) -> AnalysisConfig:
    """Build configuration from CLI options. Unset options keep file/env values."""
    return load_config(
        config_file=config,
        commit_limit=commit_limit,
        top_files=top,
        token=token,
        workers=workers,
        verbose=verbose,
        quiet=quiet,
    )

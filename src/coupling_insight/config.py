"""Configuration loading and management for Coupling Insight.

Configuration sources are merged in priority order:
    1. Defaults (defined in AnalysisConfig)
    2. Global config (~/.coupling-insight.toml)
    3. Project config (./coupling-insight.toml)
    4. Explicit config file
    5. Environment variables (COUPLING_* prefix)
    6. CLI overrides (passed as kwargs)

GITHUB_TOKEN is consulted last, and only when no other source set a token.

Example:
    >>> config = load_config(commit_limit=50, verbose=True)
    >>> config.verbosity
    'verbose'
    >>> config.commit_limit
    50
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Callable, Iterator, Literal, Optional

from .exceptions import CouplingInsightError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]

# GitHub caps page size at 100
MAX_PER_PAGE = 100


@dataclass(frozen=True)
class AnalysisConfig:
    """Configuration for one analysis run.

    Attributes:
        Remote:
            api_url: Base URL of the GitHub REST API
            token: API token (None = unauthenticated, 60 requests/hour)
            per_page: Page size for list endpoints (1-100)
            timeout_seconds: Per-request timeout

        Analysis:
            commit_limit: Most recent commits to analyze (<= 0 = all)
            top_files: Number of files returned by the PR file ranking

        Performance:
            workers: Concurrent change-set detail fetches (1 = sequential)

        Output:
            verbosity: Logging verbosity level
    """

    # Remote
    api_url: str = "https://api.github.com"
    token: Optional[str] = None
    per_page: int = MAX_PER_PAGE
    timeout_seconds: float = 30.0

    # Analysis
    commit_limit: int = -1
    top_files: int = 5

    # Performance
    workers: int = 1

    # Output
    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not self.api_url.startswith(("http://", "https://")):
            raise InvalidConfigError("api_url", self.api_url, "must be an http(s) URL")
        if not 1 <= self.per_page <= MAX_PER_PAGE:
            raise InvalidConfigError(
                "per_page", self.per_page, f"must be between 1 and {MAX_PER_PAGE}"
            )
        if self.timeout_seconds <= 0:
            raise InvalidConfigError("timeout_seconds", self.timeout_seconds, "must be positive")
        if self.top_files < 1:
            raise InvalidConfigError("top_files", self.top_files, "must be at least 1")
        if self.workers < 1:
            raise InvalidConfigError("workers", self.workers, "must be at least 1")
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise InvalidConfigError(
                "verbosity", self.verbosity, "must be one of quiet, normal, verbose"
            )


# Environment variables are COUPLING_<FIELD>, e.g. COUPLING_COMMIT_LIMIT
ENV_PREFIX = "COUPLING_"

GLOBAL_CONFIG_NAME = ".coupling-insight.toml"
PROJECT_CONFIG_NAME = "coupling-insight.toml"


def load_config(config_file: Optional[Path] = None, **overrides) -> AnalysisConfig:
    """Build an AnalysisConfig from every configuration layer.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``None``
            values are ignored so unset CLI options keep lower-priority values.
            ``verbose`` / ``quiet`` booleans are translated to ``verbosity``.

    Returns:
        Validated AnalysisConfig instance

    Raises:
        CouplingInsightError: If a config file is missing or invalid
        InvalidConfigError: If a value fails validation
    """
    values: dict[str, Any] = {}

    for label, path in _config_files(config_file):
        values.update(_read_config_file(path, label))

    values.update(_env_values())
    values.update(_cli_values(overrides))

    if not values.get("token") and os.environ.get("GITHUB_TOKEN"):
        values["token"] = os.environ["GITHUB_TOKEN"]

    try:
        return AnalysisConfig(**values)
    except TypeError as e:
        raise CouplingInsightError(f"Invalid configuration: {e}")


def _config_files(explicit: Optional[Path]) -> Iterator[tuple[str, Path]]:
    """Existing config files, lowest priority first."""
    for label, path in (
        ("global config", Path.home() / GLOBAL_CONFIG_NAME),
        ("project config", Path.cwd() / PROJECT_CONFIG_NAME),
    ):
        if path.is_file():
            yield label, path

    if explicit is not None:
        if not explicit.exists():
            raise CouplingInsightError(f"Config file not found: {explicit}")
        yield "config file", explicit


def _read_config_file(path: Path, label: str) -> dict[str, Any]:
    try:
        # tomllib is stdlib from 3.11; tomli is the same parser for older versions
        import tomllib
    except ModuleNotFoundError:
        import tomli as tomllib  # type: ignore

    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise CouplingInsightError(f"Invalid {label} '{path}': {e}")


def _env_values() -> dict[str, Any]:
    """Values from COUPLING_* environment variables, converted per field."""
    values: dict[str, Any] = {}

    for config_field in fields(AnalysisConfig):
        env_key = ENV_PREFIX + config_field.name.upper()
        raw = os.environ.get(env_key)
        if raw is None:
            continue

        convert = _ENV_CONVERTERS.get(config_field.name, str)
        try:
            values[config_field.name] = convert(raw)
        except ValueError as e:
            raise CouplingInsightError(f"Invalid {env_key}: {e}")

    return values


# Fields not listed here are read as plain strings
_ENV_CONVERTERS: dict[str, Callable[[str], Any]] = {
    "per_page": int,
    "timeout_seconds": float,
    "commit_limit": int,
    "top_files": int,
    "workers": int,
}


def _cli_values(overrides: dict[str, Any]) -> dict[str, Any]:
    values = {key: value for key, value in overrides.items() if value is not None}

    verbose = values.pop("verbose", False)
    quiet = values.pop("quiet", False)
    if quiet:
        values["verbosity"] = "quiet"
    elif verbose:
        values["verbosity"] = "verbose"

    return values

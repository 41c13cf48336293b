"""Main analysis command."""

from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from ..analysis.engine import analyze_coupling, analyze_pr_files
from ..analysis.outcomes import RepositoryNotFound
from ..exceptions import CouplingInsightError
from ..logging_config import setup_logging
from ..remote import GitHubSource
from . import app
from ._common import console, err_console, resolve_config
from ._output import format_json, render_outcome
from .progress import FetchProgress, SilentProgress


def _version_callback(value: bool) -> None:
    if value:
        from .. import __version__

        console.print(
            f"[bold cyan]Coupling Insight[/bold cyan] version [green]{__version__}[/green]"
        )
        raise typer.Exit(0)


@app.command()
def analyze(
    owner: str = typer.Argument(..., help="Repository owner (user or organisation)"),
    repo: str = typer.Argument(..., help="Repository name"),
    number: Optional[int] = typer.Option(
        None,
        "-n",
        "--number",
        help="Number of past commits to analyze (default: all; 0 or less also means all). "
        "Ignored with -a",
    ),
    pr_files: bool = typer.Option(
        False,
        "-a",
        "--pr-files",
        help="Rank the files that appear most often in merged pull requests",
    ),
    top: Optional[int] = typer.Option(
        None,
        "--top",
        help="Number of files to list with -a (default: 5)",
        min=1,
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output in machine-readable JSON format",
    ),
    token: Optional[str] = typer.Option(
        None,
        "--token",
        help="GitHub API token (default: $COUPLING_TOKEN or $GITHUB_TOKEN)",
        show_default=False,
    ),
    workers: Optional[int] = typer.Option(
        None,
        "-w",
        "--workers",
        help="Concurrent commit fetches (default: 1, sequential)",
        min=1,
        max=32,
        hidden=True,
    ),
    config: Optional[Path] = typer.Option(
        None,
        "-c",
        "--config",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug logging and failure reasons",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only print the result",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
):
    """
    Find the developers who are coupled the most in a GitHub repository.

    Two developers are coupled when they modify the same files. For every
    shared file the smaller of their two commit counts is added up; the
    pair(s) with the highest total win.

    [bold cyan]Examples:[/bold cyan]

      coupling-insight octocat hello-world

      coupling-insight octocat hello-world -n 100

      coupling-insight octocat hello-world -a --json
    """
    logger = setup_logging(verbose=verbose, quiet=quiet, console=err_console)

    try:
        settings = resolve_config(
            config=config,
            commit_limit=number,
            top=top,
            token=token,
            workers=workers,
            verbose=verbose,
            quiet=quiet,
        )

        show_progress = not (json_output or quiet)

        with GitHubSource.from_config(settings) as source:
            if pr_files:
                progress = (
                    FetchProgress("Fetching pull requests", console=err_console)
                    if show_progress
                    else SilentProgress()
                )
                outcome = analyze_pr_files(
                    source,
                    owner,
                    repo,
                    top=settings.top_files,
                    workers=settings.workers,
                    progress=progress,
                )
            else:
                progress = (
                    FetchProgress("Fetching commits", console=err_console)
                    if show_progress
                    else SilentProgress()
                )
                outcome = analyze_coupling(
                    source,
                    owner,
                    repo,
                    limit=settings.commit_limit,
                    workers=settings.workers,
                    progress=progress,
                )

        if json_output:
            print(format_json(outcome))
        else:
            render_outcome(outcome, console, verbose=verbose)

        if isinstance(outcome, RepositoryNotFound):
            raise typer.Exit(1)

    except typer.Exit:
        raise

    except CouplingInsightError as e:
        logger.error(f"{e.__class__.__name__}: {e}")
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    except KeyboardInterrupt:
        logger.info("Analysis interrupted by user")
        console.print("\n[yellow]Analysis interrupted[/yellow]")
        raise typer.Exit(130)

    except Exception as e:
        logger.debug("Unexpected error during analysis", exc_info=True)
        console.print(f"[red]Unexpected error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

"""Render analysis outcomes for the terminal or as JSON."""

import json
from typing import Union

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..analysis.outcomes import (
    CouplingOutcome,
    FrequencyOutcome,
    NoCouplingFound,
    NoPullRequests,
    RankedFiles,
    RepositoryNotFound,
    TiedCouples,
    UniqueCouple,
)

Outcome = Union[CouplingOutcome, FrequencyOutcome]


def format_json(outcome: Outcome) -> str:
    """Machine-readable JSON output."""
    return json.dumps(outcome.to_dict(), indent=2)


def render_outcome(outcome: Outcome, console: Console, verbose: bool = False) -> None:
    """Print a human-readable summary of any outcome."""
    if isinstance(outcome, RepositoryNotFound):
        console.print("[red]The owner or the repo may not exist[/red]")
        if verbose and outcome.reason:
            location = f"{escape(outcome.owner)}/{escape(outcome.repo)}"
            console.print(f"[dim]{location}: {escape(outcome.reason)}[/dim]")
    elif isinstance(outcome, NoCouplingFound):
        _render_no_coupling(outcome, console, verbose)
    elif isinstance(outcome, UniqueCouple):
        _render_unique(outcome, console)
    elif isinstance(outcome, TiedCouples):
        _render_tied(outcome, console)
    elif isinstance(outcome, NoPullRequests):
        console.print("[yellow]There are no pull requests related to this repo[/yellow]")
    elif isinstance(outcome, RankedFiles):
        _render_ranked(outcome, console)
    else:
        raise TypeError(f"Unknown outcome: {outcome!r}")


def _render_no_coupling(outcome: NoCouplingFound, console: Console, verbose: bool) -> None:
    console.print("[yellow]No coupling found between any developer[/yellow]")
    console.print(
        "This may be, because all the developers work independently, "
        "or too few commits have been analyzed"
    )
    if verbose:
        console.print(
            f"[dim]{outcome.authors_analyzed} author(s), "
            f"{outcome.change_sets_analyzed} commit(s) analyzed[/dim]"
        )


def _render_unique(outcome: UniqueCouple, console: Console) -> None:
    console.print(
        "The developers, who are coupled the most are: "
        f"[bold cyan]{escape(outcome.author_a)}[/] and [bold cyan]{escape(outcome.author_b)}[/]!"
    )
    console.print(
        f"They have contributed to the same files a total number of [bold]{outcome.score}[/] times"
    )


def _render_tied(outcome: TiedCouples, console: Console) -> None:
    console.print("There are multiple pairs of developers, who are coupled the most!")
    console.print(
        "The pairs have contributed to the same files a total number of "
        f"[bold]{outcome.score}[/] times"
    )
    console.print("The pairs are:")
    for author_a, author_b in outcome.pairs:
        console.print(f"  [cyan]{escape(author_a)}[/] and [cyan]{escape(author_b)}[/]")


def _render_ranked(outcome: RankedFiles, console: Console) -> None:
    table = Table(
        title="The most common files across pull requests",
        show_lines=False,
        pad_edge=True,
    )
    table.add_column("#", style="dim", justify="right")
    table.add_column("File", style="cyan")
    table.add_column("Occurrences", style="bold", justify="right")

    for rank, entry in enumerate(outcome.files, start=1):
        table.add_row(str(rank), escape(entry.path), str(entry.count))

    console.print()
    console.print(table)
    console.print()

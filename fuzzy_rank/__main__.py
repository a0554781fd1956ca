from __future__ import annotations

import typer
from rich.console import Console

from fuzzy_rank import __version__
from fuzzy_rank.models import RankedCandidate
from fuzzy_rank.ranking import rank_candidates
from fuzzy_rank.rendering import format_ranked_line
from fuzzy_rank.search import simple_match

__all__ = [
    "cli",
    "run",
]


def _version_callback(value: bool) -> None:
    if not value:
        return
    typer.echo(f"fuzzy-rank {__version__}")
    raise typer.Exit()


def _read_candidates(arguments: list[str] | None) -> list[str]:
    if arguments:
        return list(arguments)
    stream = typer.get_text_stream("stdin")
    return [line.rstrip("\r\n") for line in stream if line.strip()]


def _filter_candidates(
    pattern: str, candidates: list[str], *, limit: int | None
) -> list[RankedCandidate]:
    filtered = [
        RankedCandidate(text=candidate, score=0)
        for candidate in candidates
        if not pattern or simple_match(pattern, candidate)
    ]
    return filtered if limit is None else filtered[:limit]


cli = typer.Typer(
    add_completion=False,
    help="Rank candidate strings against a fuzzy pattern.",
)


@cli.command()
def run(
    pattern: str = typer.Argument(
        ...,
        help="Characters that must appear, in order, in each candidate.",
    ),
    candidates: list[str] | None = typer.Argument(
        None,
        help="Candidates to rank. Read from stdin, one per line, when omitted.",
        show_default=False,
    ),
    limit: int | None = typer.Option(
        None,
        "--limit",
        "-n",
        min=1,
        help="Show at most this many results.",
    ),
    scores: bool = typer.Option(
        False,
        "--scores",
        "-s",
        help="Show the score next to each result.",
    ),
    simple: bool = typer.Option(
        False,
        "--simple",
        help="Only filter candidates, keeping their input order.",
    ),
    _version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    pool = _read_candidates(candidates)
    if not pool:
        typer.echo("No candidates to match against.", err=True)
        raise typer.Exit(code=1)

    if simple:
        results = _filter_candidates(pattern, pool, limit=limit)
    else:
        results = rank_candidates(pattern, pool, limit=limit)

    console = Console(highlight=False, soft_wrap=True)
    for candidate in results:
        console.print(format_ranked_line(candidate, show_score=scores and not simple))

    if not results:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    cli()

from __future__ import annotations

from collections.abc import Iterable

from rich.text import Text

from fuzzy_rank.models import RankedCandidate

MATCH_STYLE = "bold magenta"
SCORE_STYLE = "dim"
SCORE_WIDTH = 6


def highlight_positions(
    text: str, positions: Iterable[int], *, style: str = MATCH_STYLE
) -> Text:
    highlighted = Text(text)
    for position in positions:
        if 0 <= position < len(text):
            highlighted.stylize(style, position, position + 1)
    return highlighted


def format_score(score: int) -> str:
    return f"{score:>{SCORE_WIDTH}}"


def format_ranked_line(candidate: RankedCandidate, *, show_score: bool = False) -> Text:
    line = highlight_positions(candidate.text, candidate.positions)
    if not show_score:
        return line
    return Text.assemble((format_score(candidate.score), SCORE_STYLE), "  ", line)

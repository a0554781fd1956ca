from __future__ import annotations

from collections.abc import Iterable

from fuzzy_rank.models import RankedCandidate
from fuzzy_rank.search import fuzzy_match, simple_match


def rank_candidates(
    pattern: str,
    candidates: Iterable[str],
    *,
    limit: int | None = None,
) -> list[RankedCandidate]:
    """Rank candidates against a single pattern, best match first.

    An empty pattern keeps every candidate in its original order.
    """
    if not pattern:
        ranked = [RankedCandidate(text=candidate, score=0) for candidate in candidates]
        return ranked if limit is None else ranked[:limit]

    ranked = []
    for candidate in candidates:
        if not simple_match(pattern, candidate):
            continue
        result = fuzzy_match(pattern, candidate)
        if result.matched:
            ranked.append(
                RankedCandidate(
                    text=candidate,
                    score=result.score,
                    positions=result.positions,
                )
            )

    ranked.sort(key=lambda item: (-item.score, item.text))
    return ranked if limit is None else ranked[:limit]

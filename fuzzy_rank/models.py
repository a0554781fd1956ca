from __future__ import annotations

from dataclasses import dataclass

MatchPositions = tuple[int, ...]


@dataclass(frozen=True)
class FuzzyMatch:
    matched: bool
    score: int = 0
    positions: MatchPositions = ()


@dataclass(frozen=True)
class RankedCandidate:
    text: str
    score: int
    positions: MatchPositions = ()

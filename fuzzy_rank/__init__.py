from __future__ import annotations

import importlib.metadata

from fuzzy_rank.models import FuzzyMatch, RankedCandidate
from fuzzy_rank.ranking import rank_candidates
from fuzzy_rank.search import fuzzy_match, scored_match, simple_match

try:
    __version__ = importlib.metadata.version("fuzzy-rank")
except importlib.metadata.PackageNotFoundError:
    __version__ = "unknown"

__all__ = [
    "FuzzyMatch",
    "RankedCandidate",
    "__version__",
    "fuzzy_match",
    "rank_candidates",
    "scored_match",
    "simple_match",
]

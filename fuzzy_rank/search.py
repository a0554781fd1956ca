"""Subsequence matching with a relevance score.

A pattern matches a target when its characters appear in the target in order,
compared case-insensitively. ``fuzzy_match`` explores the alternative
alignments of the pattern within the target and keeps the highest-scoring one.

The search is bounded by two guards, ``RECURSION_LIMIT`` and ``MAX_MATCHES``.
When a guard trips, the affected branch reports no match instead of raising,
so highly repetitive targets may yield a lower score than the true maximum or
no match at all. Callers cannot tell a truncated search from a genuine miss.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from fuzzy_rank.models import FuzzyMatch, MatchPositions

logger = logging.getLogger(__name__)

BASE_SCORE = 100
ADJACENT_BONUS = 15
WORD_BONUS = 30
FIRST_BONUS = 15
LEADING_PENALTY_PER_CHAR = -5
MAX_LEADING_PENALTY = -15
UNMATCHED_PENALTY_PER_CHAR = -1

SEPARATORS = frozenset("-_ ")

RECURSION_LIMIT = 15
MAX_MATCHES = 256


def _fold(text: str) -> list[str]:
    return [char.lower() for char in text]


def simple_match(pattern: str, target: str) -> bool:
    """Return whether ``pattern`` is a case-insensitive subsequence of ``target``.

    An empty pattern or an empty target never matches.
    """
    if not pattern or not target:
        return False

    pattern_chars = _fold(pattern)
    cursor = 0
    for char in target:
        if char.lower() == pattern_chars[cursor]:
            cursor += 1
            if cursor == len(pattern_chars):
                return True
    return False


def score_alignment(target: str, positions: Sequence[int]) -> int:
    """Score one complete alignment of a pattern within ``target``."""
    score = BASE_SCORE
    score += max(positions[0] * LEADING_PENALTY_PER_CHAR, MAX_LEADING_PENALTY)
    score += (len(target) - len(positions)) * UNMATCHED_PENALTY_PER_CHAR

    for index, position in enumerate(positions):
        if index > 0 and position == positions[index - 1] + 1:
            score += ADJACENT_BONUS

        if position == 0:
            score += FIRST_BONUS
            continue

        previous = target[position - 1]
        current = target[position]
        if previous.islower() and current.isupper():
            score += WORD_BONUS
        if previous in SEPARATORS:
            score += WORD_BONUS

    return score


def _latest_starts(pattern_chars: list[str], target_chars: list[str]) -> list[int]:
    # Last target index where pattern_chars[index:] can still begin, negative
    # when it no longer fits.
    starts = [-1] * len(pattern_chars)
    position = len(target_chars)
    for index in range(len(pattern_chars) - 1, -1, -1):
        position -= 1
        while position >= 0 and target_chars[position] != pattern_chars[index]:
            position -= 1
        starts[index] = position
    return starts


@dataclass
class _SearchState:
    target: str
    pattern_chars: list[str]
    target_chars: list[str]
    latest_starts: list[int]
    max_matches: int
    recursion_limit: int
    truncated: bool = False
    cache: dict[tuple[int, int, int, int | None, int], MatchPositions | None] = (
        field(default_factory=dict)
    )


def _match_recursive(
    state: _SearchState,
    pattern_index: int,
    target_index: int,
    matches: MatchPositions,
    depth: int,
) -> MatchPositions | None:
    """Return the best positions for the rest of the pattern, or ``None``.

    Every alignment compared within one call starts with ``matches``, so which
    one wins depends only on the last matched position and the number of
    matches. Results are cached on those, the cursors and the depth.
    """
    depth += 1
    if depth >= state.recursion_limit:
        state.truncated = True
        return None

    pattern_length = len(state.pattern_chars)
    target_length = len(state.target_chars)
    if pattern_index == pattern_length or target_index == target_length:
        return None

    key = (
        pattern_index,
        target_index,
        depth,
        matches[-1] if matches else None,
        len(matches),
    )
    if key in state.cache:
        return state.cache[key]

    best_alternative: tuple[int, MatchPositions] | None = None
    current = list(matches)

    while pattern_index < pattern_length and target_index < target_length:
        if state.target_chars[target_index] == state.pattern_chars[pattern_index]:
            if len(current) >= state.max_matches:
                state.truncated = True
                state.cache[key] = None
                return None

            # Try the same pattern character against a later occurrence first,
            # when the rest of the pattern still fits after it.
            if target_index < state.latest_starts[pattern_index]:
                prefix = tuple(current)
                suffix = _match_recursive(
                    state,
                    pattern_index,
                    target_index + 1,
                    prefix,
                    depth,
                )
                if suffix is not None:
                    score = score_alignment(state.target, prefix + suffix)
                    if best_alternative is None or score > best_alternative[0]:
                        best_alternative = (score, prefix[len(matches) :] + suffix)

            current.append(target_index)
            pattern_index += 1
        target_index += 1

    result: MatchPositions | None = None
    if pattern_index < pattern_length:
        if best_alternative is not None:
            result = best_alternative[1]
    elif best_alternative is not None and best_alternative[0] > score_alignment(
        state.target, current
    ):
        result = best_alternative[1]
    else:
        result = tuple(current[len(matches) :])

    state.cache[key] = result
    return result


def fuzzy_match(
    pattern: str,
    target: str,
    *,
    max_matches: int = MAX_MATCHES,
    recursion_limit: int = RECURSION_LIMIT,
) -> FuzzyMatch:
    """Find the best-scoring alignment of ``pattern`` within ``target``.

    Ties between alignments keep the one that consumes earlier occurrences.
    """
    if not pattern or not target:
        return FuzzyMatch(matched=False)

    pattern_chars = _fold(pattern)
    target_chars = _fold(target)
    state = _SearchState(
        target=target,
        pattern_chars=pattern_chars,
        target_chars=target_chars,
        latest_starts=_latest_starts(pattern_chars, target_chars),
        max_matches=max_matches,
        recursion_limit=recursion_limit,
    )
    positions = _match_recursive(state, 0, 0, (), 0)
    if state.truncated:
        logger.debug(
            "Search for %r in %r was truncated (recursion limit %d, max matches %d)",
            pattern,
            target,
            recursion_limit,
            max_matches,
        )
    if positions is None:
        return FuzzyMatch(matched=False)
    return FuzzyMatch(
        matched=True,
        score=score_alignment(target, positions),
        positions=positions,
    )


def scored_match(pattern: str, target: str) -> tuple[bool, int]:
    """Return whether ``pattern`` matches ``target`` and the score of the match."""
    result = fuzzy_match(pattern, target)
    return result.matched, result.score

from fuzzy_rank.models import RankedCandidate
from fuzzy_rank.ranking import rank_candidates

CARDS = [
    "Frostwolf Grunt",
    "Druid of the Claw",
    "Chillwind Yeti",
    "Power Of The Wild",
]


def test_rank_candidates_orders_by_descending_score() -> None:
    ranked = rank_candidates("otw", CARDS)

    assert [candidate.text for candidate in ranked] == [
        "Power Of The Wild",
        "Druid of the Claw",
        "Frostwolf Grunt",
    ]
    assert [candidate.score for candidate in ranked] == [161, 131, 93]


def test_rank_candidates_keeps_match_positions() -> None:
    ranked = rank_candidates("otw", ["Power Of The Wild"])

    assert ranked == [
        RankedCandidate(text="Power Of The Wild", score=161, positions=(6, 9, 13))
    ]


def test_rank_candidates_breaks_ties_by_text() -> None:
    ranked = rank_candidates("ab", ["abd", "abc"])

    assert [candidate.text for candidate in ranked] == ["abc", "abd"]


def test_rank_candidates_respects_limit() -> None:
    ranked = rank_candidates("otw", CARDS, limit=1)

    assert [candidate.text for candidate in ranked] == ["Power Of The Wild"]


def test_rank_candidates_with_empty_pattern_keeps_input_order() -> None:
    ranked = rank_candidates("", CARDS)

    assert [candidate.text for candidate in ranked] == CARDS
    assert all(candidate.score == 0 for candidate in ranked)


def test_rank_candidates_without_matches() -> None:
    assert rank_candidates("qqq", CARDS) == []


def test_rank_candidates_matches_whitespace_pattern_as_separator() -> None:
    ranked = rank_candidates(" ", ["GitHub", "Power Of The Wild", "fizz_buzz"])

    assert [candidate.text for candidate in ranked] == ["Power Of The Wild"]
    assert ranked[0].positions == (5,)

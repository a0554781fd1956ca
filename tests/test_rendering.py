from fuzzy_rank.models import RankedCandidate
from fuzzy_rank.rendering import (
    MATCH_STYLE,
    format_ranked_line,
    format_score,
    highlight_positions,
)


def test_highlight_positions_styles_each_matched_character() -> None:
    text = highlight_positions("GitHub", (0, 3))

    assert text.plain == "GitHub"
    assert [(span.start, span.end, span.style) for span in text.spans] == [
        (0, 1, MATCH_STYLE),
        (3, 4, MATCH_STYLE),
    ]


def test_highlight_positions_ignores_out_of_range_positions() -> None:
    text = highlight_positions("abc", (5,))

    assert text.spans == []


def test_format_ranked_line_without_score() -> None:
    candidate = RankedCandidate(text="Power Of The Wild", score=161, positions=(6,))

    assert format_ranked_line(candidate).plain == "Power Of The Wild"


def test_format_ranked_line_with_score() -> None:
    candidate = RankedCandidate(text="Frostwolf Grunt", score=93, positions=(2, 4, 5))

    line = format_ranked_line(candidate, show_score=True)

    assert line.plain == f"{format_score(93)}  Frostwolf Grunt"
    assert format_score(-7) == "    -7"

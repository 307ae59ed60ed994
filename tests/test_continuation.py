from dspf.continuation import resolve_continuation
from dspf.layout import KEYWORD_WIDTH
from dspf.synth import comment_line, format_line


def test_single_line_keyword_is_stripped():
    lines = [format_line(keywords="DSPATR(HI)")]
    assert resolve_continuation(lines, 0) == ("DSPATR(HI)", 0)


def test_constant_split_across_lines_joins_fixed_segments():
    first = "'Please confirm the changes made to"
    assert len(first) == KEYWORD_WIDTH - 1
    lines = [
        format_line(row=2, col=2, keywords=first + "-"),
        format_line(keywords=" this customer'"),
    ]
    text, last = resolve_continuation(lines, 0)
    assert text == first + " this customer'"
    assert last == 1


def test_marker_followed_by_padding_still_continues():
    lines = [
        format_line(keywords="COLOR(-"),
        format_line(keywords="BLU)"),
        format_line(keywords="DSPATR(HI)"),
    ]
    assert resolve_continuation(lines, 0) == ("COLOR(BLU)", 1)


def test_continuation_skips_comment_lines():
    lines = [
        format_line(keywords="ERRMSG('Bad -"),
        comment_line(" note"),
        format_line(keywords="value')"),
    ]
    assert resolve_continuation(lines, 0) == ("ERRMSG('Bad value')", 2)


def test_unterminated_continuation_stops_at_end_of_document():
    lines = [
        format_line(keywords="TEXT('first-"),
        format_line(keywords="second-"),
    ]
    text, last = resolve_continuation(lines, 0)
    assert text == "TEXT('firstsecond"
    assert last == 1


def test_short_line_yields_empty_text():
    assert resolve_continuation(["     A"], 0) == ("", 0)

from dspf.config import ParserConfig
from dspf.layout import LineKind, classify_line, content, extract_components, to_int
from dspf.synth import comment_line, constant_lines, field_lines, format_line, record_lines


def test_classify_line_recognizes_each_kind():
    assert classify_line(comment_line(" heading")) is LineKind.COMMENT
    assert classify_line(record_lines("HEADER")[0]) is LineKind.RECORD
    assert classify_line(field_lines("CUSTNO", 6, "Y", decimals=0, row=3, col=20)[0]) is LineKind.FIELD
    assert classify_line(constant_lines("Title", row=1, col=2)[0]) is LineKind.CONSTANT
    assert classify_line(format_line(keywords="DSPATR(HI)")) is LineKind.ATTRIBUTE


def test_record_marker_wins_over_name():
    # a record line also carries a name, but the name-type column decides
    line = "     A          R HEADER"
    assert classify_line(line) is LineKind.RECORD


def test_blank_name_without_position_falls_through_to_attribute():
    line = format_line(row=5)
    assert classify_line(line) is LineKind.ATTRIBUTE


def test_zero_position_is_not_a_constant():
    line = format_line(row=0, col=4, keywords="'x'")
    assert classify_line(line) is LineKind.ATTRIBUTE


def test_short_and_empty_lines_do_not_crash():
    for line in ["", "   ", "     ", "     A", "     A  3"]:
        assert classify_line(line) is LineKind.ATTRIBUTE


def test_extract_components_reads_fixed_columns():
    line = "     A N25        CUSTNO         6Y 0B  3 20"
    components = extract_components(content(line, ParserConfig()), ParserConfig())
    assert components.name == "CUSTNO"
    assert components.row == 3
    assert components.col == 20
    assert [(i.number, i.active) for i in components.indicators] == [(25, False)]


def test_to_int_tolerates_blank_and_garbage():
    assert to_int(" 12") == 12
    assert to_int("007") == 7
    assert to_int("   ") is None
    assert to_int("1A") is None
    assert to_int("") is None


def test_sequence_width_is_configurable():
    cfg = ParserConfig(sequence_width=0)
    assert classify_line("A          R HEADER", cfg) is LineKind.RECORD
    assert classify_line("A*comment", cfg) is LineKind.COMMENT

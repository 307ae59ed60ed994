from pathlib import Path

from dspf.model import AttributeElement, ConstantElement, FieldElement, FileElement, RecordElement
from dspf.parser import ParseStore, parse_document, parse_lines, split_lines
from dspf.synth import document, field_lines, keyword_lines, record_lines

SAMPLE = (Path(__file__).parent / "data" / "inquiry.dspf").read_text().rstrip("\n")


def test_sample_element_order_and_kinds():
    result = parse_document(SAMPLE)
    kinds = [el.kind for el in result.elements]
    assert kinds == [
        "file",
        "record",
        "constant",
        "field",
        "field",
        "field",
        "field",
        "record",
        "field",
        "field",
        "constant",
        "record",
        "constant",
    ]
    assert not any(isinstance(el, AttributeElement) for el in result.elements)
    assert sum(isinstance(el, AttributeElement) for el in result.all_elements) == 6
    lines = [el.line_index for el in result.elements]
    assert lines == sorted(lines)


def test_sample_file_attributes_and_display_sizes():
    result = parse_document(SAMPLE)
    assert [a.value for a in result.file_attributes] == [
        "DSPSIZ(24 80 *DS3 27 132 *DS4)",
        "CA03(03 'Exit')",
    ]
    sizes = result.display_sizes
    assert sizes.count == 2
    assert (sizes.primary.rows, sizes.primary.cols, sizes.primary.name) == (24, 80, "*DS3")
    assert sizes.secondary is not None
    assert (sizes.secondary.rows, sizes.secondary.cols, sizes.secondary.name) == (27, 132, "*DS4")
    root = result.elements[0]
    assert isinstance(root, FileElement)
    assert root.attributes is result.file_attributes


def test_sample_record_boundaries():
    result = parse_document(SAMPLE)
    assert result.line_count == 21
    spans = [(e.name, e.start_line, e.end_line) for e in result.records]
    assert spans == [("HEADER", 3, 12), ("DETAIL", 13, 16), ("CONFIRM", 17, 20)]
    records = [el for el in result.elements if isinstance(el, RecordElement)]
    assert [(r.line_index, r.end_line) for r in records] == [(3, 12), (13, 16), (17, 20)]


def test_sample_field_attributes_and_indicators():
    result = parse_document(SAMPLE)
    custno = next(el for el in result.elements if isinstance(el, FieldElement))
    assert custno.name == "CUSTNO"
    assert (custno.type, custno.length, custno.decimals, custno.usage) == ("Y", 6, 0, "B")
    assert [a.value for a in custno.attributes] == ["DSPATR(RI PC)", "COLOR(RED)"]
    assert [(i.number, i.active) for i in custno.attributes[0].indicators] == [(30, True)]
    assert [(i.number, i.active) for i in custno.attributes[1].indicators] == [(31, False)]


def test_sample_mirror_entries():
    result = parse_document(SAMPLE)
    header, detail, confirm = result.records

    assert [f.name for f in header.fields] == ["CUSTNO", "CUSTNM", "MODE"]
    custno = header.fields[0]
    assert (custno.row, custno.col, custno.line_index) == (3, 20, 6)
    assert custno.attribute_values == ["DSPATR(RI PC)", "COLOR(RED)"]
    assert (header.fields[2].row, header.fields[2].col) == (0, 0)
    assert [(c.name, c.length, c.row, c.col) for c in header.constants] == [
        ("Customer Inquiry", 16, 1, 2)
    ]
    assert header.constants[0].attribute_values == ["DSPATR(HI)"]
    assert header.size is not None
    assert (header.size.rows, header.size.cols, header.size.source) == (24, 80, "default")

    assert [a.value for a in detail.attributes] == ["SFL"]
    assert [(f.name, f.row, f.col) for f in detail.fields] == [("OPT", 3, 10), ("ITEM", 7, 10)]
    assert [(c.name, c.row, c.col) for c in detail.constants] == [("Qty", 20, 10)]

    assert confirm.size is not None
    assert confirm.size.source == "window"
    assert (confirm.size.origin_row, confirm.size.origin_col) == (5, 10)
    assert (confirm.size.rows, confirm.size.cols) == (8, 40)
    constant = confirm.constants[0]
    assert constant.name == "Please confirm the changes made to this customer"
    assert (constant.line_index, constant.last_line) == (18, 19)
    assert constant.attribute_values == ["COLOR(WHT)"]


def test_sample_referenced_and_hidden_fields():
    result = parse_document(SAMPLE)
    fields = {el.name: el for el in result.elements if isinstance(el, FieldElement)}
    assert fields["ITEM"].referenced is True
    assert fields["MODE"].hidden is True
    assert fields["MODE"].row is None


def test_sample_multi_line_constant_element_keeps_quotes():
    result = parse_document(SAMPLE)
    constants = [el for el in result.elements if isinstance(el, ConstantElement)]
    assert constants[-1].name == "'Please confirm the changes made to this customer'"
    assert constants[-1].record_name == "CONFIRM"


def test_parse_is_idempotent():
    assert parse_document(SAMPLE) == parse_document(SAMPLE)


def test_record_end_lines_follow_next_record_start():
    text = document(
        keyword_lines("DSPSIZ(24 80 *DS3)"),
        record_lines("A1"),
        field_lines("F1", 3, "A", row=1, col=1),
        record_lines("A2"),
        record_lines("A3"),
        field_lines("F2", 3, "A", row=1, col=1),
        field_lines("F3", 3, "A", row=2, col=1),
    )
    result = parse_document(text)
    assert [(e.start_line, e.end_line) for e in result.records] == [(1, 2), (3, 3), (4, 6)]


def test_crlf_and_lf_parse_identically():
    crlf = SAMPLE.replace("\n", "\r\n")
    assert parse_document(crlf) == parse_document(SAMPLE)


def test_trailing_newline_counts_as_a_line():
    assert split_lines("a\nb\n") == ["a", "b", ""]
    result = parse_document(SAMPLE + "\n")
    assert result.records[-1].end_line == 21


def test_no_records_and_empty_document():
    result = parse_lines([])
    assert [el.kind for el in result.elements] == ["file"]
    assert result.records == []
    assert (result.display_sizes.primary.rows, result.display_sizes.primary.cols) == (24, 80)

    blank = parse_document("")
    assert blank.line_count == 1
    assert [el.kind for el in blank.elements] == ["file"]


def test_garbage_input_never_raises():
    text = "\n".join(["x", "     A  9", "     AR", "     A          R", "12345" * 30, "\t\t"])
    result = parse_document(text)
    assert result.elements[0].kind == "file"


def test_non_ascii_digits_read_as_absent():
    text = "\n".join(
        [
            "     A" + " " * 38 + "DSPSIZ(² 80)",
            "     A          R REC",
            "     A" + " " * 33 + "1²  2'Hi'",
            "     A  ²5" + " " * 34 + "COLOR(RED)",
            "     A            FLD            ²A  B  3  4",
        ]
    )
    result = parse_document(text)
    assert result.display_sizes.count == 1
    assert result.display_sizes.primary.name == "*DS3"
    assert all(not el.indicators for el in result.all_elements if hasattr(el, "indicators"))
    assert [e.name for e in result.records[0].fields] == ["FLD"]
    assert result.records[0].fields[0].length == 0


def test_store_swaps_in_latest_result():
    store = ParseStore()
    assert store.current is None
    first = store.parse(SAMPLE)
    assert store.current is first
    second = store.parse(document(record_lines("ONLY")))
    assert store.current is second
    assert [e.name for e in store.current.records] == ["ONLY"]
    store.clear()
    assert store.current is None

"""Turn classified source lines into elements, one per logical unit."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from dspf.config import ParserConfig
from dspf.continuation import resolve_continuation
from dspf.index import RecordIndex
from dspf.layout import (
    DATA_TYPE,
    DECIMALS,
    LENGTH,
    NAME,
    REFERENCE,
    USAGE,
    LineComponents,
    LineKind,
    char_at,
    classify_content,
    content,
    to_int,
)
from dspf.model import (
    Attribute,
    AttributeElement,
    ConstantElement,
    Element,
    FieldElement,
    RecordElement,
    RecordEntry,
)
from dspf.subfile import adapt_position


@dataclass
class _OpenRecord:
    element: RecordElement
    entry: RecordEntry
    has_items: bool = False


def _build_record(
    lines: Sequence[str], index: int, text: str, cfg: ParserConfig
) -> tuple[RecordElement, int]:
    keywords, last = resolve_continuation(lines, index, cfg)
    attributes = [Attribute(value=keywords, line_index=index, last_line=last)] if keywords else []
    record = RecordElement(name=text[NAME].strip(), line_index=index, attributes=attributes)
    return record, last


def _build_field(
    lines: Sequence[str],
    index: int,
    text: str,
    components: LineComponents,
    record: _OpenRecord | None,
    records: RecordIndex,
    cfg: ParserConfig,
) -> FieldElement:
    usage = char_at(text, USAGE)
    hidden = usage == cfg.hidden_usage
    keywords, last = resolve_continuation(lines, index, cfg)
    attributes: list[Attribute] = []
    if keywords:
        attributes.append(
            Attribute(
                value=keywords,
                indicators=list(components.indicators),
                line_index=index,
                last_line=last,
            )
        )

    row: int | None = None
    col: int | None = None
    if not hidden:
        subfile = records.is_subfile(record.entry if record else None)
        row, col = adapt_position(components.row, components.col, subfile)

    return FieldElement(
        name=components.name,
        type=char_at(text, DATA_TYPE).strip(),
        length=to_int(text[LENGTH]) or 0,
        decimals=to_int(text[DECIMALS]) or 0,
        usage=usage,
        row=row,
        column=col,
        line_index=index,
        last_line=last,
        record_name=record.element.name if record else "",
        hidden=hidden,
        referenced=char_at(text, REFERENCE) == cfg.reference_marker,
        attributes=attributes,
        indicators=components.indicators,
    )


def _build_constant(
    lines: Sequence[str],
    index: int,
    components: LineComponents,
    record: _OpenRecord | None,
    records: RecordIndex,
    cfg: ParserConfig,
) -> ConstantElement:
    literal, last = resolve_continuation(lines, index, cfg)
    subfile = records.is_subfile(record.entry if record else None)
    row, col = adapt_position(components.row, components.col, subfile)
    return ConstantElement(
        text=literal,
        row=row,
        column=col,
        line_index=index,
        last_line=last,
        record_name=record.element.name if record else "",
        indicators=components.indicators,
    )


def _build_attribute(
    lines: Sequence[str], index: int, components: LineComponents, cfg: ParserConfig
) -> AttributeElement | None:
    keywords, last = resolve_continuation(lines, index, cfg)
    if not keywords:
        return None
    attribute = Attribute(
        value=keywords,
        indicators=list(components.indicators),
        line_index=index,
        last_line=last,
    )
    return AttributeElement(
        line_index=index,
        last_line=last,
        indicators=components.indicators,
        attributes=[attribute],
    )


def build_elements(
    lines: Sequence[str], records: RecordIndex, config: ParserConfig | None = None
) -> list[Element]:
    """Build record, field, constant and keyword elements in source order.

    Records are registered in ``records`` as they are met so the subfile
    check for a field or constant sees its record's keywords.
    """
    cfg = config or ParserConfig()
    elements: list[Element] = []
    current: _OpenRecord | None = None
    index = 0

    while index < len(lines):
        text = content(lines[index], cfg)
        kind, components = classify_content(text, cfg)
        if kind is LineKind.COMMENT or components is None:
            index += 1
            continue

        element: Element | None
        if kind is LineKind.RECORD:
            record, last = _build_record(lines, index, text, cfg)
            current = _OpenRecord(element=record, entry=records.open_record(record))
            element = record
        elif kind is LineKind.FIELD:
            element = _build_field(lines, index, text, components, current, records, cfg)
            last = element.last_line
        elif kind is LineKind.CONSTANT:
            element = _build_constant(lines, index, components, current, records, cfg)
            last = element.last_line
        else:
            element = _build_attribute(lines, index, components, cfg)
            last = element.last_line if element else index
            if element and current and not current.has_items:
                records.note_attributes(current.entry, element.attributes)

        if isinstance(element, (FieldElement, ConstantElement)) and current:
            current.has_items = True
        if element is not None:
            elements.append(element)
        index = last + 1

    return elements

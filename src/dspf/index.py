"""Per-record mirror of the element tree.

Entries are opened while records are built so the builder can ask whether
the open record is a subfile; summaries, end lines, sizes and the final
attribute lists are filled in once the whole document has been linked.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from dspf.model import (
    Attribute,
    ConstantElement,
    ConstantSummary,
    Element,
    FieldElement,
    FieldSummary,
    RecordElement,
    RecordEntry,
)
from dspf.subfile import is_subfile

logger = logging.getLogger(__name__)


def unquote(text: str) -> str:
    if len(text) >= 2 and text[0] == text[-1] == "'":
        return text[1:-1]
    return text


class RecordIndex:
    def __init__(self, subfile_keyword: str = "SFL") -> None:
        self.subfile_keyword = subfile_keyword
        self.entries: list[RecordEntry] = []
        self._by_line: dict[int, RecordEntry] = {}

    def open_record(self, record: RecordElement) -> RecordEntry:
        entry = RecordEntry(
            name=record.name,
            start_line=record.line_index,
            attributes=list(record.attributes),
        )
        self.entries.append(entry)
        self._by_line[record.line_index] = entry
        return entry

    def note_attributes(self, entry: RecordEntry, attributes: Iterable[Attribute]) -> None:
        """Accumulate keywords seen before the record's first field or constant."""
        entry.attributes.extend(attributes)

    def is_subfile(self, entry: RecordEntry | None) -> bool:
        if entry is None:
            return False
        return is_subfile(entry.attributes, self.subfile_keyword)

    def entry_for(self, record: RecordElement) -> RecordEntry | None:
        return self._by_line.get(record.line_index)

    def populate(self, elements: Iterable[Element]) -> None:
        """Add field and constant summaries under their owning records."""
        entry: RecordEntry | None = None
        for element in elements:
            match element:
                case RecordElement():
                    entry = self.entry_for(element)
                case FieldElement() if entry is not None:
                    self._add_field(entry, element)
                case ConstantElement() if entry is not None:
                    self._add_constant(entry, element)
                case _:
                    pass

    def _add_field(self, entry: RecordEntry, element: FieldElement) -> None:
        if any(summary.name == element.name for summary in entry.fields):
            logger.debug(
                "Field %s on line %d repeats a name in record %s; first one kept",
                element.name,
                element.line_index,
                entry.name,
            )
            return
        entry.fields.append(
            FieldSummary(
                name=element.name,
                type=element.type,
                row=element.row or 0,
                col=element.column or 0,
                length=element.length,
                line_index=element.line_index,
                last_line=element.last_line,
                attributes=[attr for attr in element.attributes if attr.value],
                indicators=list(element.indicators),
            )
        )

    def _add_constant(self, entry: RecordEntry, element: ConstantElement) -> None:
        name = unquote(element.text)
        if any(summary.name == name for summary in entry.constants):
            logger.debug(
                "Constant %r on line %d repeats text in record %s; first one kept",
                name,
                element.line_index,
                entry.name,
            )
            return
        entry.constants.append(
            ConstantSummary(
                name=name,
                row=element.row or 0,
                col=element.column or 0,
                length=len(name),
                line_index=element.line_index,
                last_line=element.last_line,
                attributes=[attr for attr in element.attributes if attr.value],
            )
        )

    def finalize(self, records: Sequence[RecordElement], line_count: int) -> None:
        """Compute end lines and copy end line, size and attributes into the mirror."""
        ordered = sorted(records, key=lambda record: record.line_index)
        for i, record in enumerate(ordered):
            if i + 1 < len(ordered):
                record.end_line = ordered[i + 1].line_index - 1
            else:
                record.end_line = line_count - 1
            entry = self.entry_for(record)
            if entry is None:
                continue
            entry.end_line = record.end_line
            entry.size = record.size
            entry.attributes = record.attributes

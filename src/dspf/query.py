"""Lookups over a parse result for code that edits the source in place."""

from __future__ import annotations

import re

from dspf.model import (
    ConstantElement,
    FieldElement,
    Owner,
    ParseResult,
    RecordElement,
    RecordEntry,
    RecordSize,
)


def record_names(result: ParseResult) -> list[str]:
    return [entry.name for entry in result.records]


def record_exists(result: ParseResult, name: str) -> bool:
    return find_record(result, name) is not None


def find_record(result: ParseResult, name: str) -> RecordEntry | None:
    """First record with ``name``, compared upper-cased."""
    target = name.upper()
    return next((entry for entry in result.records if entry.name.upper() == target), None)


def record_at_line(result: ParseResult, line_index: int) -> RecordEntry | None:
    for entry in result.records:
        if entry.start_line <= line_index <= entry.end_line:
            return entry
    return None


def record_size(result: ParseResult, name: str) -> RecordSize | None:
    entry = find_record(result, name)
    return entry.size if entry else None


def all_record_sizes(result: ParseResult) -> list[tuple[str, RecordSize]]:
    return [(entry.name, entry.size) for entry in result.records if entry.size]


def element_at_line(result: ParseResult, line_index: int) -> Owner | None:
    """Find the field, constant or record whose own lines include ``line_index``."""
    for element in result.elements:
        if isinstance(element, (FieldElement, ConstantElement)):
            if element.line_index <= line_index <= element.last_line:
                return element
        elif isinstance(element, RecordElement) and element.line_index == line_index:
            return element
    return None


def elements_with_attribute(result: ParseResult, record_name: str, keyword: str) -> list[str]:
    """Names of a record's fields and constants carrying ``KEYWORD(...)``."""
    entry = find_record(result, record_name)
    if entry is None:
        return []
    pattern = re.compile(rf"^{re.escape(keyword)}\(.*\)$", re.IGNORECASE)
    names: list[str] = []
    for summary in [*entry.fields, *entry.constants]:
        if any(pattern.match(value) for value in summary.attribute_values):
            names.append(summary.name)
    return names

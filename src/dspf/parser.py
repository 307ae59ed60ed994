"""Parse DDS display file source into an element tree and record mirror.

Each call is a full reparse: build elements line by line, link keyword
lines to their owners, summarize fields and constants per record, resolve
sizes and compute record end lines. Nothing is carried over between calls;
callers that want the last result at hand keep a ``ParseStore``.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence

from dspf.builder import build_elements
from dspf.config import ParserConfig
from dspf.index import RecordIndex
from dspf.linker import link_attributes
from dspf.model import AttributeElement, Element, FileElement, ParseResult, RecordElement
from dspf.sizing import resolve_display_sizes, resolve_record_sizes

logger = logging.getLogger(__name__)

LINE_BREAK_RE = re.compile(r"\r?\n")


def split_lines(text: str) -> list[str]:
    return LINE_BREAK_RE.split(text)


def parse_lines(lines: Sequence[str], config: ParserConfig | None = None) -> ParseResult:
    cfg = config or ParserConfig()
    records = RecordIndex(subfile_keyword=cfg.subfile_keyword)
    root = FileElement()

    all_elements: list[Element] = [root]
    all_elements.extend(build_elements(lines, records, cfg))
    link_attributes(all_elements)
    records.populate(all_elements)

    display_sizes = resolve_display_sizes(root.attributes, cfg)
    record_elements = [el for el in all_elements if isinstance(el, RecordElement)]
    resolve_record_sizes(record_elements, display_sizes)
    records.finalize(record_elements, len(lines))

    elements = [el for el in all_elements if not isinstance(el, AttributeElement)]
    logger.debug(
        "Parsed %d lines into %d records and %d elements",
        len(lines),
        len(record_elements),
        len(elements),
    )
    return ParseResult(
        elements=elements,
        all_elements=all_elements,
        records=records.entries,
        display_sizes=display_sizes,
        file_attributes=root.attributes,
        line_count=len(lines),
    )


def parse_document(text: str, config: ParserConfig | None = None) -> ParseResult:
    """Parse a whole document; either line-ending convention is accepted."""
    return parse_lines(split_lines(text), config)


class ParseStore:
    """Holds the last parse result for collaborators that query without reparsing."""

    def __init__(self, config: ParserConfig | None = None) -> None:
        self.config = config or ParserConfig()
        self._current: ParseResult | None = None

    @property
    def current(self) -> ParseResult | None:
        return self._current

    def parse(self, text: str) -> ParseResult:
        result = parse_document(text, self.config)
        self._current = result
        return result

    def clear(self) -> None:
        self._current = None

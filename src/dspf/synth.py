"""Fixed-column source line formatter.

Builds well-formed DDS display file lines from plain values so fixtures and
callers never count columns by hand. Long keyword text and long literals
are split across lines with the continuation marker in the last column.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from dspf.config import ParserConfig
from dspf.layout import (
    COLUMN,
    DATA_TYPE,
    DECIMALS,
    INDICATORS,
    KEYWORD_WIDTH,
    KEYWORDS,
    LENGTH,
    NAME,
    NAME_TYPE,
    REFERENCE,
    ROW,
    USAGE,
)
from dspf.model import Geometry, Indicator

CONTENT_WIDTH = KEYWORDS.stop


def _put(buffer: list[str], where: slice | int, value: str, right: bool = False) -> None:
    if isinstance(where, int):
        buffer[where] = (value or " ")[:1]
        return
    width = where.stop - where.start
    text = value.rjust(width) if right else value.ljust(width)
    buffer[where] = list(text[:width])


def indicator_area(indicators: Iterable[Indicator], negation_marker: str = "N") -> str:
    slots = [
        f"{' ' if ind.active else negation_marker}{ind.number:02d}" for ind in indicators
    ]
    return "".join(slots[:3])


def format_line(
    *,
    form: str = "A",
    indicators: Sequence[Indicator] = (),
    name_type: str = "",
    name: str = "",
    reference: str = "",
    length: int | None = None,
    data_type: str = "",
    decimals: int | None = None,
    usage: str = "",
    row: int | None = None,
    col: int | None = None,
    keywords: str = "",
    sequence: str = "",
    config: ParserConfig | None = None,
) -> str:
    """Lay out one physical line; trailing blanks are dropped."""
    cfg = config or ParserConfig()
    buffer = [" "] * CONTENT_WIDTH
    _put(buffer, 0, form)
    _put(buffer, INDICATORS, indicator_area(indicators, cfg.negation_marker))
    _put(buffer, NAME_TYPE, name_type)
    _put(buffer, NAME, name)
    _put(buffer, REFERENCE, reference)
    _put(buffer, LENGTH, "" if length is None else str(length), right=True)
    _put(buffer, DATA_TYPE, data_type)
    _put(buffer, DECIMALS, "" if decimals is None else str(decimals), right=True)
    _put(buffer, USAGE, usage)
    _put(buffer, ROW, "" if row is None else str(row), right=True)
    _put(buffer, COLUMN, "" if col is None else str(col), right=True)
    _put(buffer, KEYWORDS, keywords)
    prefix = sequence.ljust(cfg.sequence_width)[: cfg.sequence_width]
    return (prefix + "".join(buffer)).rstrip()


def split_keyword_text(text: str, marker: str = "-") -> list[str]:
    """Cut text into keyword-area chunks, marking every chunk but the last."""
    if len(text) <= KEYWORD_WIDTH:
        return [text]
    step = KEYWORD_WIDTH - len(marker)
    chunks = [text[i : i + step] for i in range(0, len(text), step)]
    return [chunk + marker for chunk in chunks[:-1]] + [chunks[-1]]


def keyword_lines(
    text: str, indicators: Sequence[Indicator] = (), config: ParserConfig | None = None
) -> list[str]:
    cfg = config or ParserConfig()
    chunks = split_keyword_text(text, cfg.continuation_marker)
    lines = [format_line(indicators=indicators, keywords=chunks[0], config=cfg)]
    lines.extend(format_line(keywords=chunk, config=cfg) for chunk in chunks[1:])
    return lines


def record_lines(name: str, keywords: str = "", config: ParserConfig | None = None) -> list[str]:
    cfg = config or ParserConfig()
    chunks = split_keyword_text(keywords, cfg.continuation_marker)
    lines = [format_line(name_type=cfg.record_marker, name=name, keywords=chunks[0], config=cfg)]
    lines.extend(format_line(keywords=chunk, config=cfg) for chunk in chunks[1:])
    return lines


def field_lines(
    name: str,
    length: int | None,
    data_type: str = "A",
    *,
    decimals: int | None = None,
    usage: str = "B",
    row: int | None = None,
    col: int | None = None,
    keywords: str = "",
    indicators: Sequence[Indicator] = (),
    referenced: bool = False,
    config: ParserConfig | None = None,
) -> list[str]:
    cfg = config or ParserConfig()
    chunks = split_keyword_text(keywords, cfg.continuation_marker)
    lines = [
        format_line(
            indicators=indicators,
            name=name,
            reference=cfg.reference_marker if referenced else "",
            length=length,
            data_type=data_type,
            decimals=decimals,
            usage=usage,
            row=row,
            col=col,
            keywords=chunks[0],
            config=cfg,
        )
    ]
    lines.extend(format_line(keywords=chunk, config=cfg) for chunk in chunks[1:])
    return lines


def constant_lines(
    literal: str,
    row: int,
    col: int,
    indicators: Sequence[Indicator] = (),
    config: ParserConfig | None = None,
) -> list[str]:
    """Lay out a quoted literal at a position, continuing it when too long."""
    cfg = config or ParserConfig()
    chunks = split_keyword_text(f"'{literal}'", cfg.continuation_marker)
    lines = [format_line(indicators=indicators, row=row, col=col, keywords=chunks[0], config=cfg)]
    lines.extend(format_line(keywords=chunk, config=cfg) for chunk in chunks[1:])
    return lines


def comment_line(text: str = "", config: ParserConfig | None = None) -> str:
    cfg = config or ParserConfig()
    return (" " * cfg.sequence_width + cfg.comment_marker + text).rstrip()


def dspsiz_lines(sizes: Sequence[Geometry], config: ParserConfig | None = None) -> list[str]:
    specs = " ".join(f"{size.rows} {size.cols} {size.name}".strip() for size in sizes)
    return keyword_lines(f"DSPSIZ({specs})", config=config)


def document(*groups: Iterable[str]) -> str:
    lines: list[str] = []
    for group in groups:
        lines.extend(group)
    return "\n".join(lines)

"""Fixed-column layout of a DDS display file line and the line classifier.

Column offsets below are 0-based and relative to the content area, i.e.
after the leading sequence-number region has been stripped. In the usual
80-column source member that puts the form type in source column 6 and the
keyword area in source columns 45-80.

Rules:
- ``A*`` at the start of the content area marks a comment.
- The record marker in the name-type column marks a record header.
- A non-blank name slice marks a field.
- A blank name with positive row and column marks a constant.
- Anything else is a keyword line (possibly empty).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from dspf.config import ParserConfig
from dspf.indicators import parse_indicators
from dspf.model import Indicator

INDICATORS = slice(2, 11)
NAME_TYPE = 11
NAME = slice(13, 23)
REFERENCE = 23
LENGTH = slice(24, 29)
DATA_TYPE = 29
DECIMALS = slice(30, 32)
USAGE = 32
ROW = slice(33, 36)
COLUMN = slice(36, 39)
KEYWORDS = slice(39, 75)
KEYWORD_WIDTH = KEYWORDS.stop - KEYWORDS.start


class LineKind(str, Enum):
    COMMENT = "comment"
    RECORD = "record"
    FIELD = "field"
    CONSTANT = "constant"
    ATTRIBUTE = "attribute"


@dataclass
class LineComponents:
    indicators: list[Indicator]
    name: str
    row: int | None
    col: int | None


def content(line: str, config: ParserConfig) -> str:
    """Strip the sequence-number region, tolerating short lines."""
    return line[config.sequence_width :]


def char_at(text: str, index: int) -> str:
    return text[index] if index < len(text) else " "


def to_int(text: str) -> int | None:
    """Read a blank- or zero-padded unsigned number; None when not numeric."""
    stripped = text.strip()
    if not stripped.isdecimal():
        return None
    return int(stripped)


def is_comment(text: str, config: ParserConfig) -> bool:
    return text.startswith(config.comment_marker)


def extract_components(text: str, config: ParserConfig) -> LineComponents:
    return LineComponents(
        indicators=parse_indicators(text[INDICATORS], negation_marker=config.negation_marker),
        name=text[NAME].strip(),
        row=to_int(text[ROW]),
        col=to_int(text[COLUMN]),
    )


def is_constant_position(components: LineComponents) -> bool:
    return bool(components.row) and bool(components.col)


def classify_content(text: str, config: ParserConfig) -> tuple[LineKind, LineComponents | None]:
    """Classify a content area; components are returned for non-comment lines."""
    if is_comment(text, config):
        return LineKind.COMMENT, None
    components = extract_components(text, config)
    if char_at(text, NAME_TYPE) == config.record_marker:
        return LineKind.RECORD, components
    if components.name:
        return LineKind.FIELD, components
    if is_constant_position(components):
        return LineKind.CONSTANT, components
    return LineKind.ATTRIBUTE, components


def classify_line(line: str, config: ParserConfig | None = None) -> LineKind:
    """Classify one physical source line."""
    cfg = config or ParserConfig()
    kind, _components = classify_content(content(line, cfg), cfg)
    return kind

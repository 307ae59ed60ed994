"""Element tree and per-record mirror produced by a parse.

Each element kind is its own dataclass carrying only the fields meaningful
to it; ``kind`` is a fixed tag so serialized output stays self-describing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Union

SizeSource = Literal["default", "window"]


@dataclass
class Indicator:
    number: int
    active: bool = True


@dataclass
class Attribute:
    value: str
    indicators: list[Indicator] = field(default_factory=list)
    line_index: int = 0
    last_line: int = 0


@dataclass
class Geometry:
    rows: int
    cols: int
    name: str = ""


@dataclass
class DisplaySizes:
    count: int
    primary: Geometry
    secondary: Geometry | None = None


@dataclass
class RecordSize:
    rows: int
    cols: int
    name: str
    source: SizeSource
    origin_row: int = 1
    origin_col: int = 1


@dataclass
class FileElement:
    kind: Literal["file"] = field(default="file", init=False)
    line_index: int = 0
    attributes: list[Attribute] = field(default_factory=list)


@dataclass
class RecordElement:
    kind: Literal["record"] = field(default="record", init=False)
    name: str
    line_index: int
    end_line: int = 0
    attributes: list[Attribute] = field(default_factory=list)
    size: RecordSize | None = None


@dataclass
class FieldElement:
    kind: Literal["field"] = field(default="field", init=False)
    name: str
    type: str
    length: int
    decimals: int
    usage: str
    row: int | None
    column: int | None
    line_index: int
    last_line: int
    record_name: str
    hidden: bool = False
    referenced: bool = False
    attributes: list[Attribute] = field(default_factory=list)
    indicators: list[Indicator] = field(default_factory=list)


@dataclass
class ConstantElement:
    kind: Literal["constant"] = field(default="constant", init=False)
    text: str
    row: int | None
    column: int | None
    line_index: int
    last_line: int
    record_name: str
    attributes: list[Attribute] = field(default_factory=list)
    indicators: list[Indicator] = field(default_factory=list)

    @property
    def name(self) -> str:
        # literal text, quotes included
        return self.text


@dataclass
class AttributeElement:
    kind: Literal["attribute"] = field(default="attribute", init=False)
    line_index: int
    last_line: int
    indicators: list[Indicator] = field(default_factory=list)
    attributes: list[Attribute] = field(default_factory=list)


Element = Union[FileElement, RecordElement, FieldElement, ConstantElement, AttributeElement]
Owner = Union[FileElement, RecordElement, FieldElement, ConstantElement]


@dataclass
class FieldSummary:
    name: str
    type: str
    row: int
    col: int
    length: int
    line_index: int
    last_line: int
    attributes: list[Attribute] = field(default_factory=list)
    indicators: list[Indicator] = field(default_factory=list)

    @property
    def attribute_values(self) -> list[str]:
        return [attr.value for attr in self.attributes]


@dataclass
class ConstantSummary:
    name: str
    row: int
    col: int
    length: int
    line_index: int
    last_line: int
    attributes: list[Attribute] = field(default_factory=list)

    @property
    def attribute_values(self) -> list[str]:
        return [attr.value for attr in self.attributes]


@dataclass
class RecordEntry:
    name: str
    start_line: int
    end_line: int = 0
    attributes: list[Attribute] = field(default_factory=list)
    fields: list[FieldSummary] = field(default_factory=list)
    constants: list[ConstantSummary] = field(default_factory=list)
    size: RecordSize | None = None


@dataclass
class ParseResult:
    elements: list[Element]
    all_elements: list[Element]
    records: list[RecordEntry]
    display_sizes: DisplaySizes
    file_attributes: list[Attribute]
    line_count: int

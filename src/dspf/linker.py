"""Attach free-standing keyword lines to their owners.

One forward pass: a keyword line belongs to the last field or constant
seen since the last record, else to that record, else to the file.
"""

from __future__ import annotations

from collections.abc import Iterable

from dspf.model import (
    AttributeElement,
    ConstantElement,
    Element,
    FieldElement,
    FileElement,
    Owner,
    RecordElement,
)


def link_attributes(elements: Iterable[Element]) -> None:
    current_file: FileElement | None = None
    current_record: RecordElement | None = None
    current_item: FieldElement | ConstantElement | None = None

    for element in elements:
        match element:
            case FileElement():
                current_file = element
                current_record = None
                current_item = None
            case RecordElement():
                current_record = element
                current_item = None
            case FieldElement() | ConstantElement():
                current_item = element
            case AttributeElement():
                owner: Owner | None = current_item
                if owner is None:
                    owner = current_record
                if owner is None:
                    owner = current_file
                if owner is not None:
                    owner.attributes.extend(element.attributes)

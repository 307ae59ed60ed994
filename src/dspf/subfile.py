"""Subfile coordinate handling.

Fields and constants of a subfile record have their row and column
positions transposed in the source; they are swapped back before being
stored.
"""

from __future__ import annotations

from collections.abc import Iterable

from dspf.model import Attribute


def is_subfile(attributes: Iterable[Attribute], keyword: str = "SFL") -> bool:
    target = keyword.upper()
    return any(attr.value.upper() == target for attr in attributes)


def adapt_position(row: int | None, col: int | None, subfile: bool) -> tuple[int | None, int | None]:
    if subfile:
        return col, row
    return row, col

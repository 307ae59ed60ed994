"""Conditioning indicator decoding.

The indicator area is three 3-character slots. Each slot is a negation
flag followed by a two-digit indicator number (01-99); a slot without
digits is empty and produces nothing.
"""

from __future__ import annotations

from dspf.model import Indicator

SLOT_WIDTH = 3
SLOT_COUNT = 3


def parse_indicators(area: str, negation_marker: str = "N") -> list[Indicator]:
    """Decode up to three indicator slots, sorted by indicator number."""
    indicators: list[Indicator] = []
    for i in range(SLOT_COUNT):
        slot = area[i * SLOT_WIDTH : (i + 1) * SLOT_WIDTH]
        flag = slot[:1] or " "
        digits = slot[1:].strip()
        if not digits.isdecimal():
            continue
        indicators.append(Indicator(number=int(digits), active=flag != negation_marker))
    indicators.sort(key=lambda ind: ind.number)
    return indicators

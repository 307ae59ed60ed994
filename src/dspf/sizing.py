"""Screen and window size resolution.

``DSPSIZ`` at file level declares one or two display geometries, either as
``rows cols [*name]`` triples or as bare predefined names::

    DSPSIZ(24 80 *DS3 27 132 *DS4)
    DSPSIZ(*DS3 *DS4)

``WINDOW(start-row start-col rows cols)`` on a record overrides the file
default for that record. A missing or malformed ``DSPSIZ`` falls back to a
single 24x80 geometry.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from dspf.config import ParserConfig
from dspf.model import Attribute, DisplaySizes, Geometry, RecordElement, RecordSize

logger = logging.getLogger(__name__)

DSPSIZ_RE = re.compile(r"DSPSIZ\s*\(([^)]+)\)", re.IGNORECASE)
WINDOW_RE = re.compile(r"WINDOW\s*\(\s*(\d+)\s+(\d+)\s+(\d+)\s+(\d+)\s*\)", re.IGNORECASE)
MAX_GEOMETRIES = 2


def parse_dspsiz(argument: str, config: ParserConfig | None = None) -> list[Geometry]:
    """Parse the text inside ``DSPSIZ(...)`` into geometries, left to right."""
    cfg = config or ParserConfig()
    sizes: list[Geometry] = []
    tokens = argument.split()
    i = 0
    while i < len(tokens):
        token = tokens[i].upper()
        if token.startswith("*"):
            predefined = cfg.predefined_sizes.get(token)
            if predefined:
                sizes.append(Geometry(rows=predefined[0], cols=predefined[1], name=token))
            i += 1
        elif token.isdecimal() and i + 1 < len(tokens) and tokens[i + 1].isdecimal():
            name = tokens[i + 2].upper() if i + 2 < len(tokens) else ""
            if not name.startswith("*"):
                name = ""
            sizes.append(Geometry(rows=int(token), cols=int(tokens[i + 1]), name=name))
            i += 3 if name else 2
        else:
            i += 1
    return sizes


def default_display_sizes(config: ParserConfig | None = None) -> DisplaySizes:
    cfg = config or ParserConfig()
    return DisplaySizes(
        count=1,
        primary=Geometry(rows=cfg.default_rows, cols=cfg.default_cols, name=cfg.default_name),
    )


def resolve_display_sizes(
    attributes: Iterable[Attribute], config: ParserConfig | None = None
) -> DisplaySizes:
    """Resolve the document geometries from the file-level attributes."""
    cfg = config or ParserConfig()
    dspsiz = next((attr for attr in attributes if "DSPSIZ(" in attr.value.upper()), None)
    if dspsiz is None:
        return default_display_sizes(cfg)

    match = DSPSIZ_RE.search(dspsiz.value)
    if not match:
        logger.debug("Malformed DSPSIZ on line %d, using default size", dspsiz.line_index)
        return default_display_sizes(cfg)

    sizes = parse_dspsiz(match.group(1), cfg)[:MAX_GEOMETRIES]
    if not sizes:
        logger.debug("DSPSIZ on line %d declares no usable size, using default", dspsiz.line_index)
        return default_display_sizes(cfg)
    return DisplaySizes(
        count=len(sizes),
        primary=sizes[0],
        secondary=sizes[1] if len(sizes) > 1 else None,
    )


def window_size(attributes: Iterable[Attribute]) -> RecordSize | None:
    window = next((attr for attr in attributes if "WINDOW(" in attr.value.upper()), None)
    if window is None:
        return None
    match = WINDOW_RE.search(window.value)
    if not match:
        # reference or *DFT forms carry no explicit geometry
        logger.debug("WINDOW on line %d has no explicit geometry", window.line_index)
        return None
    start_row, start_col, rows, cols = (int(g) for g in match.groups())
    return RecordSize(
        rows=rows,
        cols=cols,
        name=f"WINDOW_{start_row}_{start_col}_{rows}_{cols}",
        source="window",
        origin_row=start_row,
        origin_col=start_col,
    )


def default_record_size(display_sizes: DisplaySizes) -> RecordSize:
    primary = display_sizes.primary
    return RecordSize(rows=primary.rows, cols=primary.cols, name=primary.name, source="default")


def resolve_record_sizes(records: Iterable[RecordElement], display_sizes: DisplaySizes) -> None:
    """Give every record its window size, or the document default."""
    for record in records:
        record.size = window_size(record.attributes) or default_record_size(display_sizes)

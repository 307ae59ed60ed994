"""Multi-line keyword and literal reassembly.

A keyword area whose last non-blank character is the continuation marker
continues in the keyword area of the next non-comment line. Each segment
is stripped of trailing padding, the marker is dropped and the segments are
joined with nothing in between.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from dspf.config import ParserConfig
from dspf.layout import KEYWORDS, content, is_comment

logger = logging.getLogger(__name__)


def keyword_text(line: str, config: ParserConfig) -> str:
    return content(line, config)[KEYWORDS]


def _next_content_line(lines: Sequence[str], start: int, config: ParserConfig) -> int | None:
    for index in range(start, len(lines)):
        if not is_comment(content(lines[index], config), config):
            return index
    return None


def resolve_continuation(
    lines: Sequence[str], start: int, config: ParserConfig | None = None
) -> tuple[str, int]:
    """Join continued keyword areas starting at ``start``.

    Returns the assembled text (outer blanks stripped) and the index of the
    last physical line consumed. A marker on the final line ends assembly
    with whatever was collected.
    """
    cfg = config or ParserConfig()
    marker = cfg.continuation_marker
    parts: list[str] = []
    index = start
    while True:
        segment = keyword_text(lines[index], cfg).rstrip()
        if not segment.endswith(marker):
            parts.append(segment)
            break
        parts.append(segment[: -len(marker)])
        following = _next_content_line(lines, index + 1, cfg)
        if following is None:
            logger.debug("Continuation on line %d runs past the end of the document", index)
            break
        index = following
    return "".join(parts).strip(), index

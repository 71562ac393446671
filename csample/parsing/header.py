"""Header handling for CWB concordance streams.

A concordance produced by the Open Corpus Workbench starts with a block of
metadata lines that begin with a marker (``#``), followed by one match per
line. :class:`ConcordanceReader` splits a line iterator into that leading
header block and the content lines while streaming, so samplers never need
to hold the corpus in memory.

Well-formed input keeps all header lines contiguous at the start. Once the
first content line has been seen, a marker line is treated as content.
"""
from __future__ import annotations

import logging
import re
from enum import Enum
from typing import Iterable, Iterator, List, Optional, Pattern

logger = logging.getLogger(__name__)

DEFAULT_MARKER = "#"


class ReaderState(Enum):
    AWAITING_FIRST_LINE = "awaiting_first_line"
    READING_HEADER = "reading_header"
    READING_CONTENT = "reading_content"
    DONE = "done"


def strip_terminator(line: str) -> str:
    """Remove a trailing ``\\n`` or ``\\r\\n`` from a raw input line."""
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def is_header_line(line: str, marker: str = DEFAULT_MARKER) -> bool:
    return line.startswith(marker)


def size_line_pattern(marker: str = DEFAULT_MARKER) -> Pattern:
    """Pattern for the CWB header line declaring the number of hits.

    Matches lines like ``# Size:    1234 intervals/matches``.
    """
    return re.compile(rf"^{re.escape(marker)} Size: *(\d+)(?:\s|$)")


def parse_declared_size(header_lines: Iterable[str], marker: str = DEFAULT_MARKER) -> Optional[int]:
    """Return the hit count declared in the header, or ``None`` if absent.

    Only the first matching line counts.
    """
    pattern = size_line_pattern(marker)
    for line in header_lines:
        m = pattern.match(line)
        if m:
            return int(m.group(1))
    return None


def find_size_line(header_lines: List[str]) -> Optional[int]:
    """Index of the first header line mentioning ``Size``, if any."""
    for i, line in enumerate(header_lines):
        if "Size" in line:
            return i
    return None


class ConcordanceReader:
    """Stream a concordance, collecting the header and yielding content lines.

    ``lines`` may be any iterable of strings (an open file, ``sys.stdin``,
    a list in tests). Line terminators are stripped. The reader can be
    iterated once; :attr:`header` is complete as soon as the first content
    line has been yielded, or when the stream ends.
    """

    def __init__(self, lines: Iterable[str], marker: str = DEFAULT_MARKER):
        if not marker:
            raise ValueError("header marker must be a non-empty string")
        self._lines = iter(lines)
        self.marker = marker
        self.header: List[str] = []
        self.state = ReaderState.AWAITING_FIRST_LINE
        self.content_count = 0

    def __iter__(self) -> Iterator[str]:
        return self.content()

    def content(self) -> Iterator[str]:
        if self.state is not ReaderState.AWAITING_FIRST_LINE:
            raise RuntimeError("ConcordanceReader can only be consumed once")
        for raw in self._lines:
            line = strip_terminator(raw)
            if self.state is not ReaderState.READING_CONTENT and is_header_line(line, self.marker):
                self.state = ReaderState.READING_HEADER
                self.header.append(line)
                continue
            if self.state is not ReaderState.READING_CONTENT:
                logger.debug("Header complete after %d line(s)", len(self.header))
                self.state = ReaderState.READING_CONTENT
            self.content_count += 1
            yield line
        self.state = ReaderState.DONE
        logger.debug("Stream exhausted: %d header line(s), %d content line(s)", len(self.header), self.content_count)

    def declared_size(self) -> Optional[int]:
        return parse_declared_size(self.header, self.marker)

"""Reformat concordance lines into quoted comma-separated rows.

CWB prints a hit as ``  12: <text_id t1>: left context <the match> right``.
The conversion turns the hit number, any structural attribute values and the
match itself into separate fields, keeping left and right context as the
fields around the match. The match must be enclosed in angle brackets with a
space on each side (the CWB default).
"""
from __future__ import annotations

import re
from typing import Iterable, List

HIT_NUMBER = re.compile(r"^ *(\d+):\s+")
MATCH_BRACKETS = re.compile(r" <(\S+[^<>]+)> ")
STRUCTURE_ATTRIBUTE = re.compile(r"<(\S+) (\S+)>:?\s*")


def line_to_row(line: str) -> str:
    """Convert a single concordance line to a CSV row.

    Example:
        >>> line_to_row("  7: <text_id a1>: the old <house> stood")
        '"7","a1","the old","house","stood"'
    """
    s = line.replace('"', "''")
    s = HIT_NUMBER.sub(r'\1","', s, count=1)
    s = MATCH_BRACKETS.sub(r'","\1","', s, count=1)
    s = STRUCTURE_ATTRIBUTE.sub(r'\2","', s)
    return f'"{s}"'


def lines_to_rows(lines: Iterable[str]) -> List[str]:
    return [line_to_row(line) for line in lines]

"""Assemble the printable output of a sampling run.

Output layout, in order:

1. the header, when requested, with the ``Size`` line rewritten to describe
   the sample and a ``Method`` line added after it
2. a single ``# Warnings:`` block when parameter defaulting produced messages
3. the sample lines, optionally converted to CSV rows
"""
from __future__ import annotations

from typing import List, Sequence

from csample.parsing.header import DEFAULT_MARKER, find_size_line
from csample.parsing.tabular import lines_to_rows
from csample.sampling.base import SampleResult

SEPARATOR_WIDTH = 75

TEXT_FORMAT = "text"
TABULAR_FORMAT = "tabular"


def separator(marker: str = DEFAULT_MARKER) -> str:
    return marker + "-" * SEPARATOR_WIDTH


def summary_lines(result: SampleResult, marker: str = DEFAULT_MARKER) -> List[str]:
    return [
        f"{marker} Size:    {result.sample_size} of {result.total_count} hits ({result.percent} percent)",
        f"{marker} Method:  {result.method_label}",
    ]


def rewrite_header(result: SampleResult, marker: str = DEFAULT_MARKER) -> List[str]:
    """Return the header with the sample size and method filled in.

    The first line mentioning ``Size`` is replaced. Headers without one get
    the two summary lines appended instead.
    """
    header = list(result.header_lines)
    summary = summary_lines(result, marker)
    idx = find_size_line(header)
    if idx is None:
        return header + summary
    return header[:idx] + summary + header[idx + 1:]


def format_warnings(warnings: Sequence[str], header_included: bool, marker: str = DEFAULT_MARKER) -> List[str]:
    """Render warning messages as a commented block.

    The opening rule is omitted when the header is printed, since the header
    already ends with one.
    """
    if not warnings:
        return []
    out: List[str] = []
    if not header_included:
        out.append(separator(marker))
    out.append(f"{marker} Warnings:")
    for msg in warnings:
        out.extend(f"{marker} {part}" for part in msg.splitlines())
    out.append(separator(marker))
    return out


def render_report(
    result: SampleResult,
    warnings: Sequence[str] = (),
    include_header: bool = False,
    output_format: str = TEXT_FORMAT,
    marker: str = DEFAULT_MARKER,
) -> List[str]:
    """Build the complete output of a run as a list of lines (no terminators)."""
    if output_format not in (TEXT_FORMAT, TABULAR_FORMAT):
        raise ValueError(f"unknown output format: {output_format!r}")
    out: List[str] = []
    if include_header:
        out.extend(rewrite_header(result, marker))
    out.extend(format_warnings(warnings, include_header, marker))
    if output_format == TABULAR_FORMAT:
        out.extend(lines_to_rows(result.sample_lines))
    else:
        out.extend(result.sample_lines)
    return out

"""Lightweight orchestration of a sampling run.

Glues the stages together so the command line script and tests share one
code path:

- resolve method/basis/offset into parameters (collecting warnings)
- stream the input through the selected sampler
- render header, warnings and sample into output lines
- write the lines to a stream or, atomically, to a file

Nothing is written before the sampler has finished, so a fatal error (for
example a missing ``# Size:`` header line) produces no output at all.
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Iterable, List, Optional, TextIO, Tuple

from config.settings import settings
from csample.reporting.report import render_report
from csample.sampling import SampleResult, build_sampler, resolve_parameters
from csample.utils.atomic_write import atomic_write_lines

logger = logging.getLogger(__name__)


def resolve_output_format(name: Optional[str]) -> str:
    """Map ``txt``/``text``/``csv``/``tabular`` to a report format."""
    key = (name or settings.DEFAULT_FORMAT).strip().lower()
    try:
        return settings.OUTPUT_FORMATS[key]
    except KeyError:
        raise ValueError(
            f"unknown output format {name!r}; choose one of {', '.join(sorted(settings.OUTPUT_FORMATS))}"
        ) from None


def run_sampling(
    lines: Iterable[str],
    method: Optional[str] = None,
    basis: float = 0,
    offset: int = 0,
    include_header: bool = False,
    output_format: Optional[str] = None,
    random_state: Optional[int] = None,
    marker: Optional[str] = None,
) -> Tuple[SampleResult, List[str]]:
    """Run the full sampling pipeline over ``lines``.

    Returns ``(result, output_lines)``. Raises
    :class:`csample.sampling.SamplingConfigError` for fatal problems.
    """
    marker = marker or settings.HEADER_MARKER
    fmt = resolve_output_format(output_format)
    params, warnings = resolve_parameters(method or settings.DEFAULT_METHOD, basis, offset)

    sampler = build_sampler(params, random_state=random_state, marker=marker)
    logger.info("Sampling with %s", sampler.method_label)
    result = sampler.sample(lines)
    logger.info(
        "Selected %d of %d lines (%d percent)", result.sample_size, result.total_count, result.percent
    )
    if result.total_count == 0:
        logger.warning("The input contains no concordance lines")

    output = render_report(result, warnings, include_header=include_header, output_format=fmt, marker=marker)
    return result, output


def write_output(lines: List[str], out_path: Optional[Path] = None, stream: Optional[TextIO] = None) -> None:
    """Write rendered lines to ``out_path`` (atomically) or to ``stream``."""
    if out_path is not None:
        atomic_write_lines(Path(out_path), lines, encoding=settings.ENCODING, errors=settings.ENCODING_ERRORS)
        logger.info("Wrote %d line(s) to %s", len(lines), out_path)
        return
    stream = stream or sys.stdout
    for line in lines:
        stream.write(f"{line}\n")
    stream.flush()


__all__ = ["resolve_output_format", "run_sampling", "write_output"]

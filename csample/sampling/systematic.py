"""Systematic (n-th line) samplers.

Both samplers keep the selected lines in corpus order.

* :class:`SystematicProportionalSampler` takes every n-th content line
  starting at a given offset; the sample size follows from n.
* :class:`SystematicFixedSampler` derives a fractional stride from the hit
  count declared in the CWB header so that the sample has a fixed size, with
  a random start (see https://en.wikipedia.org/wiki/Systematic_sampling).
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Tuple

from csample.parsing.header import ConcordanceReader
from csample.sampling.base import BaseSampler, MissingDeclaredSizeError, format_number

logger = logging.getLogger(__name__)


@dataclass
class SystematicProportionalSampler(BaseSampler):
    """Select every ``n``-th content line, the first one being line ``offset``.

    With ``offset >= 1`` the selected (1-based) line numbers are
    ``offset, offset + n, offset + 2n, ...``. ``offset=0`` is treated as
    ``offset=n``.
    """

    n: int = 2
    offset: int = 0

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.n < 1:
            raise ValueError(f"stride must be at least 1, got {self.n}")
        if self.offset == 0:
            self.offset = self.n

    @property
    def method_label(self) -> str:
        return f"Systematic (n = {format_number(self.n)})"

    def select(self, reader: ConcordanceReader) -> Tuple[int, List[str]]:
        sample: List[str] = []
        count = 0
        # counter reaches n on the offset-th line, then every n lines
        position = self.n - abs(self.offset - 1)
        for line in reader:
            count += 1
            if position == self.n:
                position = 0
                sample.append(line)
            position += 1
        if self.n == 1:
            logger.info("Stride n = 1: the sample is identical to the input")
        return count, sample


@dataclass
class SystematicFixedSampler(BaseSampler):
    """Select ``k`` lines at a fractional stride ``N / k`` from a random start.

    ``N`` comes from the ``# Size:`` line of the header, which must precede
    the first content line. Consecutive selected lines are ``floor(N/k)`` or
    ``ceil(N/k)`` lines apart, and exactly ``k`` lines are selected when ``N``
    is the real number of content lines.
    """

    k: int = 50

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.k < 1:
            raise ValueError(f"sample size must be at least 1, got {self.k}")

    @property
    def method_label(self) -> str:
        return "Systematic (Fixed)"

    def _stride(self, reader: ConcordanceReader) -> float:
        declared = reader.declared_size()
        if declared is None:
            raise MissingDeclaredSizeError(self.marker)
        stride = declared / self.k
        logger.debug("Declared size N=%d, k=%d, stride=%.4f", declared, self.k, stride)
        return stride

    def select(self, reader: ConcordanceReader) -> Tuple[int, List[str]]:
        sample: List[str] = []
        count = 0
        stride = None
        start = 0.0
        next_line = 0
        for line in reader:
            if stride is None:
                # the header is complete once the first content line arrives
                stride = self._stride(reader)
                start = self._rng.random() * stride
                next_line = math.floor(start) + 1
            count += 1
            if count >= next_line:
                sample.append(line)
                next_line = math.floor(start + len(sample) * stride) + 1
        if stride is None:
            # no content at all: still insist on a usable header
            self._stride(reader)
        return count, sample

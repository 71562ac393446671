"""Base classes and result types shared by the concordance samplers.

Every sampler implements the same contract: it consumes an iterable of raw
lines exactly once and returns a :class:`SampleResult` holding the header
block, the selected content lines and the run statistics.

Design goals
------------

* **Single pass.** The input is streamed; only the header and the sample
  are kept in memory.
* **Pure sampling.** Samplers never print; rendering belongs to
  :mod:`csample.reporting.report`.
* **Reproducible.** Shared ``random_state`` handling across samplers.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Tuple

import numpy as np

from csample.parsing.header import DEFAULT_MARKER, ConcordanceReader


class SamplingConfigError(ValueError):
    """Raised when a sampling run cannot proceed with the given input/options."""


class MissingDeclaredSizeError(SamplingConfigError):
    """The fixed systematic method needs a ``# Size: <n>`` header line."""

    def __init__(self, marker: str = DEFAULT_MARKER):
        super().__init__(
            "Systematic sampling with a fixed sample size needs the concordance size, "
            f"but the input has no '{marker} Size: <number> ...' header line. "
            "Keep the CWB header in the input or choose another method (e.g. -m rf)."
        )


class SamplingMethod(Enum):
    SYSTEMATIC_PROPORTIONAL = "sp"
    SYSTEMATIC_FIXED = "sf"
    RANDOM_PROPORTIONAL = "rp"
    RANDOM_FIXED = "rf"


@dataclass(frozen=True)
class SamplingParameters:
    """Validated sampling options.

    ``basis`` is the stride (sp), target size (sf, rf) or probability (rp).
    ``offset`` is only used by the proportional systematic method.
    """

    method: SamplingMethod
    basis: float
    offset: int = 0


def percent_of(sample_size: int, total_count: int) -> int:
    """Share of the total covered by the sample, rounded half up.

    An empty input yields 0.
    """
    if total_count <= 0:
        return 0
    return int(sample_size / total_count * 100 + 0.5)


@dataclass(frozen=True)
class RunStatistics:
    method_label: str
    total_count: int
    sample_size: int
    percent: int

    @classmethod
    def compute(cls, method_label: str, total_count: int, sample_size: int) -> "RunStatistics":
        return cls(method_label, total_count, sample_size, percent_of(sample_size, total_count))


@dataclass(frozen=True)
class SampleResult:
    header_lines: Tuple[str, ...]
    sample_lines: Tuple[str, ...]
    statistics: RunStatistics

    @property
    def method_label(self) -> str:
        return self.statistics.method_label

    @property
    def total_count(self) -> int:
        return self.statistics.total_count

    @property
    def sample_size(self) -> int:
        return self.statistics.sample_size

    @property
    def percent(self) -> int:
        return self.statistics.percent


@dataclass
class BaseSampler(ABC):
    """Abstract base class for all samplers.

    Parameters
    ----------
    random_state:
        Optional integer seed to make sampling reproducible. Samplers derive
        a :class:`numpy.random.Generator` from it.
    marker:
        Prefix identifying header lines.
    """

    random_state: Optional[int] = None
    marker: str = DEFAULT_MARKER

    def __post_init__(self) -> None:
        # A dedicated Generator keeps runs independent of global RNG state.
        self._rng: np.random.Generator = np.random.default_rng(self.random_state)

    @property
    @abstractmethod
    def method_label(self) -> str:
        """Human readable description written into the ``# Method:`` line."""

    @abstractmethod
    def select(self, reader: ConcordanceReader) -> Tuple[int, list]:
        """Consume ``reader`` and return ``(total_count, sample_lines)``."""

    def sample(self, lines: Iterable[str]) -> SampleResult:
        """Run the sampler over ``lines`` and return the result.

        ``lines`` is consumed exactly once.
        """
        reader = ConcordanceReader(lines, marker=self.marker)
        total, selected = self.select(reader)
        stats = RunStatistics.compute(self.method_label, total, len(selected))
        return SampleResult(
            header_lines=tuple(reader.header),
            sample_lines=tuple(selected),
            statistics=stats,
        )


def format_number(value: float) -> str:
    """Render a basis the way it is shown in method labels (``2``, ``0.25``).

    Whole numbers print without a decimal point or exponent; other values
    keep their full precision.
    """
    if isinstance(value, int):
        return str(value)
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))

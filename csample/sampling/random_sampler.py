"""Random samplers.

* :class:`RandomProportionalSampler` keeps each line independently with
  probability ``p``; the sample size approximates ``p`` times the input.
* :class:`ReservoirSampler` draws a uniform sample of exactly ``k`` lines
  (or all lines, if there are fewer) in one pass, holding only ``k`` lines
  in memory (see https://stackoverflow.com/a/856559).

Both return the sample sorted by the raw line text, so the output does not
reveal the order in which lines were drawn.

Usage
-----

.. code-block:: python

    from csample.sampling import ReservoirSampler

    with open("concordance.txt", encoding="utf-8") as fh:
        result = ReservoirSampler(k=100, random_state=42).sample(fh)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from csample.parsing.header import ConcordanceReader
from csample.sampling.base import BaseSampler, format_number


@dataclass
class RandomProportionalSampler(BaseSampler):
    """Bernoulli sampler: include a line iff a uniform draw is ``<= p``."""

    p: float = 0.5

    @property
    def method_label(self) -> str:
        return f"Random (p = {format_number(self.p)})"

    def select(self, reader: ConcordanceReader) -> Tuple[int, List[str]]:
        sample: List[str] = []
        count = 0
        for line in reader:
            count += 1
            if self._rng.random() <= self.p:
                sample.append(line)
        return count, sorted(sample)


@dataclass
class ReservoirSampler(BaseSampler):
    """Uniform fixed-size sampler (reservoir sampling).

    Notes
    -----
    * The first ``k`` lines fill the reservoir. Line ``i > k`` enters with
      probability ``k / i`` and replaces a uniformly chosen slot, so every
      line ends up in the sample with probability ``k / N``.
    * If the input has fewer than ``k`` lines, all of them are returned.
    """

    k: int = 50

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.k < 1:
            raise ValueError(f"sample size must be at least 1, got {self.k}")

    @property
    def method_label(self) -> str:
        return "Random (Fixed Size)"

    def select(self, reader: ConcordanceReader) -> Tuple[int, List[str]]:
        reservoir: List[str] = []
        count = 0
        for line in reader:
            count += 1
            if count <= self.k:
                reservoir.append(line)
            elif self._rng.random() <= self.k / count:
                reservoir[int(self._rng.integers(0, self.k))] = line
        return count, sorted(reservoir)

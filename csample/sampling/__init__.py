"""Sampling strategies for CWB concordances.

The main entrypoints are:

* :class:`csample.sampling.systematic.SystematicProportionalSampler`
* :class:`csample.sampling.systematic.SystematicFixedSampler`
* :class:`csample.sampling.random_sampler.RandomProportionalSampler`
* :class:`csample.sampling.random_sampler.ReservoirSampler`

:func:`build_sampler` picks and configures one of them from resolved
:class:`SamplingParameters`.
"""

from typing import Optional

from .base import (
    BaseSampler,
    MissingDeclaredSizeError,
    RunStatistics,
    SampleResult,
    SamplingConfigError,
    SamplingMethod,
    SamplingParameters,
)
from .parameters import resolve_method, resolve_parameters
from .random_sampler import RandomProportionalSampler, ReservoirSampler
from .systematic import SystematicFixedSampler, SystematicProportionalSampler
from csample.parsing.header import DEFAULT_MARKER


def build_sampler(
    params: SamplingParameters,
    random_state: Optional[int] = None,
    marker: str = DEFAULT_MARKER,
) -> BaseSampler:
    method = params.method
    if method is SamplingMethod.SYSTEMATIC_PROPORTIONAL:
        return SystematicProportionalSampler(random_state=random_state, marker=marker, n=int(params.basis), offset=params.offset)
    if method is SamplingMethod.SYSTEMATIC_FIXED:
        return SystematicFixedSampler(random_state=random_state, marker=marker, k=int(params.basis))
    if method is SamplingMethod.RANDOM_PROPORTIONAL:
        return RandomProportionalSampler(random_state=random_state, marker=marker, p=float(params.basis))
    if method is SamplingMethod.RANDOM_FIXED:
        return ReservoirSampler(random_state=random_state, marker=marker, k=int(params.basis))
    raise SamplingConfigError(f"unsupported sampling method: {method!r}")


__all__ = [
    "BaseSampler",
    "MissingDeclaredSizeError",
    "RandomProportionalSampler",
    "ReservoirSampler",
    "RunStatistics",
    "SampleResult",
    "SamplingConfigError",
    "SamplingMethod",
    "SamplingParameters",
    "SystematicFixedSampler",
    "SystematicProportionalSampler",
    "build_sampler",
    "resolve_method",
    "resolve_parameters",
]

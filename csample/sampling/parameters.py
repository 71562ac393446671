"""Resolve user supplied method/basis/offset into :class:`SamplingParameters`.

Each method has its own default and out-of-range policy. Adjustments never
abort a run: they are reported as warning messages which the report puts
into a single ``# Warnings:`` block ahead of the sample.
"""
from __future__ import annotations

import logging
import math
import re
from typing import List, Optional, Tuple

from config.settings import settings
from csample.sampling.base import SamplingConfigError, SamplingMethod, SamplingParameters, format_number

logger = logging.getLogger(__name__)

# Searched in this order against the normalised method name. The searches
# are unanchored, as in csample.pl, so "systematicproportional" resolves to sp.
METHOD_PATTERNS = [
    (SamplingMethod.SYSTEMATIC_PROPORTIONAL, re.compile(r"s(ystematic)?p(roportion)?")),
    (SamplingMethod.SYSTEMATIC_FIXED, re.compile(r"s(ystematic)?f(ixed)?")),
    (SamplingMethod.RANDOM_PROPORTIONAL, re.compile(r"r(andom)?p(roportion)?")),
    (SamplingMethod.RANDOM_FIXED, re.compile(r"r(andom)?f(ixed)?")),
]

STRIDE_TOO_SMALL = (
    "The specified n for nth-case selection was less than one. Switched to a\n"
    "default of n = {n}."
)
STRIDE_IS_ONE = (
    "The specified n for nth-case selection was 1. The sample is identical\n"
    "to the original concordance."
)
PROBABILITY_AS_PERCENTAGE = (
    "The specified probability was equal to or greater than one and was\n"
    "interpreted as a percentage (p = {p})."
)
SIZE_TOO_SMALL = (
    "The specified sample size was less than one. Switched to a default\n"
    "sample size of {k} lines."
)
NOT_A_WHOLE_NUMBER = (
    "The specified basis ({given}) is not a whole number. It was truncated\n"
    "to {used}."
)
UNKNOWN_METHOD = (
    "An unknown sampling method was selected. Switched to systematic\n"
    "sampling on an n-th case basis with n={n}."
)


def normalize_method_name(name: Optional[str]) -> str:
    return re.sub(r"[\s_-]+", "", (name or "").lower())


def resolve_method(name: Optional[str]) -> Optional[SamplingMethod]:
    """Map a method name or alias (``sp``, ``random-fixed``...) to a method.

    Returns ``None`` for names that match none of the known methods.
    """
    key = normalize_method_name(name)
    for method, pattern in METHOD_PATTERNS:
        if pattern.search(key):
            return method
    return None


def _default_basis(method: SamplingMethod) -> float:
    return settings.METHOD_DEFAULTS[method.value]["basis"]


def _whole(basis: float, warnings: List[str]) -> int:
    used = int(basis)
    if used != basis:
        warnings.append(NOT_A_WHOLE_NUMBER.format(given=format_number(basis), used=used))
    return used


def _resolve_stride(basis: float, warnings: List[str]) -> int:
    default = _default_basis(SamplingMethod.SYSTEMATIC_PROPORTIONAL)
    if basis == 0:
        return int(default)
    if basis < 1:
        warnings.append(STRIDE_TOO_SMALL.format(n=format_number(default)))
        return int(default)
    n = _whole(basis, warnings)
    if n == 1:
        warnings.append(STRIDE_IS_ONE)
    return n


def _resolve_size(method: SamplingMethod, basis: float, warnings: List[str]) -> int:
    default = int(_default_basis(method))
    if basis == 0:
        return default
    if basis < 1:
        warnings.append(SIZE_TOO_SMALL.format(k=default))
        return default
    return _whole(basis, warnings)


def _resolve_probability(basis: float, warnings: List[str]) -> float:
    if basis == 0:
        return float(_default_basis(SamplingMethod.RANDOM_PROPORTIONAL))
    if basis >= 1:
        p = basis / 100
        warnings.append(PROBABILITY_AS_PERCENTAGE.format(p=format_number(p)))
        return p
    return float(basis)


def _fallback_stride(basis: float, warnings: List[str]) -> int:
    # Quirk kept from csample.pl: a basis below one is read as a percentage
    # and becomes a stride of basis * 100 (0.25 -> every 25th line).
    if 0 < basis < 1:
        basis = round(basis * 100, 6)
    elif basis < 0:
        basis = 0
    return _resolve_stride(basis, warnings)


def resolve_parameters(
    method: Optional[str],
    basis: float = 0,
    offset: int = 0,
) -> Tuple[SamplingParameters, List[str]]:
    """Apply the per-method defaults and range checks.

    Args:
        method: method name or alias as given on the command line.
        basis: stride (sp), target size (sf, rf) or probability (rp); 0 selects
            the method default.
        offset: first line to select for sp; 0 means "same as the stride".

    Returns:
        ``(parameters, warnings)`` where ``warnings`` holds one message per
        adjustment, in the order they were made.
    """
    warnings: List[str] = []
    resolved = resolve_method(method)
    basis = float(basis or 0)
    if not math.isfinite(basis):
        raise SamplingConfigError(f"the basis must be a finite number, got {basis!r}")
    offset = int(offset or 0)

    if resolved is SamplingMethod.SYSTEMATIC_PROPORTIONAL:
        n = _resolve_stride(basis, warnings)
        params = SamplingParameters(resolved, n, offset or n)
    elif resolved in (SamplingMethod.SYSTEMATIC_FIXED, SamplingMethod.RANDOM_FIXED):
        params = SamplingParameters(resolved, _resolve_size(resolved, basis, warnings))
    elif resolved is SamplingMethod.RANDOM_PROPORTIONAL:
        params = SamplingParameters(resolved, _resolve_probability(basis, warnings))
    else:
        n = _fallback_stride(basis, warnings)
        warnings.append(UNKNOWN_METHOD.format(n=n))
        params = SamplingParameters(SamplingMethod.SYSTEMATIC_PROPORTIONAL, n, offset or n)

    for msg in warnings:
        logger.warning(msg.replace("\n", " "))
    logger.debug("Resolved parameters: %s", params)
    return params, warnings

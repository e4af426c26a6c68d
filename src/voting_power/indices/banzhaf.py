from __future__ import annotations

from fractions import Fraction
from typing import List, Optional, Sequence

from ..model.errors import EmptySystem
from ..model.voting_system import validate_system
from ..utils.logging_utils import get_logger
from ..utils.progress import CancelFlag, ProgressCallback
from .polynomial import build_polynomial
from .swings import extract_swings

logger = get_logger(__name__)


def absolute_denominator_from_polynomial(polynomial: Sequence[int]) -> Fraction:
    """Half the coalition count, read off the symmetric polynomial.

    Sums the lower half of the coefficients plus half the middle one when
    the total weight is even. Always equal to 2^(n-1); kept as a
    cross-check of the closed form.
    """
    total = len(polynomial) - 1
    if total % 2:
        return Fraction(sum(polynomial[: (total + 1) // 2]))
    return sum(polynomial[: total // 2]) + Fraction(polynomial[total // 2], 2)


def normalize_swings(
    swings: Sequence[int],
    polynomial: Optional[Sequence[int]],
    n: int,
    absolute: bool,
) -> List[Fraction]:
    """Turn raw swing counts into exact Banzhaf indices.

    ``absolute`` divides by 2^(n-1), the number of coalitions of the other
    players; otherwise the denominator is the total swing count and the
    indices sum to 1. When ``polynomial`` is given the absolute denominator
    is cross-checked against it.
    """
    if n <= 0:
        raise EmptySystem("Cannot compute a power index for zero players.")

    if absolute:
        denominator = 1 << (n - 1)
        if polynomial is not None:
            alt = absolute_denominator_from_polynomial(polynomial)
            if alt != denominator:
                msg = f"Polynomial half-sum {alt} disagrees with 2^(n-1)={denominator}."
                raise ArithmeticError(msg)
    else:
        denominator = sum(swings)
        if denominator == 0:
            raise EmptySystem("No player is ever critical; the index is undefined.")

    return [Fraction(s, denominator) for s in swings]


def compute_swings(
    weights: Sequence[int],
    quota: int,
    progress: Optional[ProgressCallback] = None,
    cancel: Optional[CancelFlag] = None,
) -> tuple[List[int], List[int]]:
    """Validate, then return ``(polynomial, swings)`` for a weighted system."""
    clean, q = validate_system(weights, quota)
    polynomial = build_polynomial(clean, progress=progress, cancel=cancel)
    swings = extract_swings(polynomial, clean, q, progress=progress, cancel=cancel)
    return polynomial, swings


def banzhaf_exact(
    weights: Sequence[int],
    quota: int,
    absolute: bool = True,
    progress: Optional[ProgressCallback] = None,
    cancel: Optional[CancelFlag] = None,
) -> List[Fraction]:
    """Exact Banzhaf power index of a weighted voting game.

    Runs in O(N * total) big-integer additions through the generating
    polynomial instead of enumerating the 2^N coalitions.

    Raises ``EmptySystem``, ``InvalidWeights`` or ``InvalidQuota`` before
    any work is done, and ``ComputationCancelled`` once ``cancel`` is set.
    """
    polynomial, swings = compute_swings(
        weights, quota, progress=progress, cancel=cancel
    )
    logger.debug(
        "Normalizing %d swing counts (%s)",
        len(swings),
        "absolute" if absolute else "normalized",
    )
    return normalize_swings(swings, polynomial, len(swings), absolute)

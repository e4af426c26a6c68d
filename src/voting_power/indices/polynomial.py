from __future__ import annotations

from typing import List, Optional, Sequence

from ..utils.logging_utils import get_logger
from ..utils.progress import CancelFlag, ProgressCallback, check_cancelled, report

logger = get_logger(__name__)


def build_polynomial(
    weights: Sequence[int],
    progress: Optional[ProgressCallback] = None,
    cancel: Optional[CancelFlag] = None,
) -> List[int]:
    """Coefficients of prod_i (1 + x^{w_i}).

    Entry k counts the coalitions whose weights sum to exactly k, so the
    result has ``sum(weights) + 1`` entries, starts with 1 (the empty
    coalition) and sums to 2^N.

    Each factor is folded in place with ``P[j] += P[j - w]``. The update
    runs from the highest degree downwards so every read of ``P[j - w]``
    still sees the coefficient from before this factor.
    """
    total = sum(weights)
    n = len(weights)
    polynomial = [0] * (total + 1)
    polynomial[0] = 1

    order = 0
    for i, w in enumerate(weights):
        check_cancelled(cancel, "polynomial construction")
        order += w
        for j in range(order, w - 1, -1):
            polynomial[j] += polynomial[j - w]
        report(progress, i + 1, n)

    logger.debug("Built generating polynomial of degree %d for %d players", total, n)
    return polynomial


def count_winning_coalitions(polynomial: Sequence[int], quota: int) -> int:
    """Number of coalitions whose total weight reaches ``quota``."""
    return sum(polynomial[quota:])

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from ..utils.logging_utils import get_logger
from ..utils.progress import CancelFlag, ProgressCallback, check_cancelled, report

logger = get_logger(__name__)


def player_swings(polynomial: Sequence[int], weight: int, quota: int) -> int:
    """Count coalitions of the other players in which this player is critical.

    Dividing ``polynomial`` by ``(1 + x^weight)`` gives the coalition
    counts of everybody else. Only degrees below ``quota`` are needed, and
    they are recovered in ascending order as
    ``others[j] = P[j] - others[j - weight]``. The player swings exactly
    the coalitions with weight in ``[quota - weight, quota - 1]``.
    """
    if weight == 0:
        return 0

    others = [0] * quota
    for j in range(quota):
        if j < weight:
            others[j] = polynomial[j]
        else:
            others[j] = polynomial[j] - others[j - weight]

    # A player heavier than the quota swings every losing coalition.
    return sum(others[max(quota - weight, 0):quota])


def extract_swings(
    polynomial: Sequence[int],
    weights: Sequence[int],
    quota: int,
    progress: Optional[ProgressCallback] = None,
    cancel: Optional[CancelFlag] = None,
) -> List[int]:
    n = len(weights)
    # Equal weights give equal swing counts; only deconvolve each weight once.
    by_weight: Dict[int, int] = {}
    swings: list[int] = []

    for i, w in enumerate(weights):
        check_cancelled(cancel, "swing extraction")
        if w not in by_weight:
            by_weight[w] = player_swings(polynomial, w, quota)
        swings.append(by_weight[w])
        report(progress, i + 1, n)

    logger.debug(
        "Extracted swings for %d players (%d distinct weights)", n, len(by_weight)
    )
    return swings

from __future__ import annotations

import math
from typing import List, Optional, Sequence

import numpy as np

from ..model.errors import InvalidParameters
from ..model.voting_system import validate_system
from ..utils.logging_utils import get_logger
from ..utils.progress import CancelFlag, ProgressCallback, check_cancelled, report

logger = get_logger(__name__)

# Upper bound on coalition-membership cells drawn per batch.
_BATCH_CELLS = 1 << 20


def _validate_accuracy(confidence: float, width: float) -> None:
    if not 0.0 < confidence < 1.0:
        msg = f"confidence must lie in (0, 1), got {confidence}."
        raise InvalidParameters(msg)
    if not width > 0.0 or math.isinf(width):
        msg = f"width must be a positive finite number, got {width}."
        raise InvalidParameters(msg)


def hoeffding_sample_size(confidence: float, width: float) -> int:
    """Draws needed so the estimate is within width/2 w.p. >= confidence.

    Hoeffding: P(|p_hat - p| >= t) <= 2 exp(-2 m t^2) with t = width / 2,
    so m = ln(2 / delta) / (2 t^2) where delta = 1 - confidence.
    """
    _validate_accuracy(confidence, width)
    delta = 1.0 - confidence
    t = width / 2.0
    return max(1, math.ceil(math.log(2.0 / delta) / (2.0 * t * t)))


def approximate(
    weights: Sequence[int],
    quota: int,
    confidence: float,
    width: float,
    player: int,
    rng: Optional[np.random.Generator] = None,
    progress: Optional[ProgressCallback] = None,
    cancel: Optional[CancelFlag] = None,
) -> float:
    """Monte-Carlo estimate of how often ``player`` is critical.

    Every other player joins a sampled coalition independently with
    probability 1/2, so the returned frequency estimates the absolute
    Banzhaf index of ``player``.
    """
    clean, q = validate_system(weights, quota)
    _validate_accuracy(confidence, width)
    if not 0 <= player < len(clean):
        msg = f"player index {player} out of range for {len(clean)} players."
        raise InvalidParameters(msg)

    if rng is None:
        rng = np.random.default_rng()

    samples = hoeffding_sample_size(confidence, width)
    weight = clean[player]
    # Beyond int64 the totals are summed as exact Python ints.
    dtype = np.int64 if sum(clean) <= np.iinfo(np.int64).max else object
    others = np.asarray(clean[:player] + clean[player + 1:], dtype=dtype)
    low, high = q - weight, q - 1

    batch = max(1, _BATCH_CELLS // max(others.size, 1))
    critical = 0
    drawn = 0
    while drawn < samples:
        check_cancelled(cancel, "sampling")
        size = min(batch, samples - drawn)
        if others.size:
            members = rng.integers(0, 2, size=(size, others.size), dtype=np.int64)
            totals = members.astype(dtype) @ others
        else:
            totals = np.zeros(size, dtype=np.int64)
        hits = ((totals >= low) & (totals <= high)).astype(bool)
        critical += int(np.count_nonzero(hits))
        drawn += size
        report(progress, drawn, samples)

    logger.debug(
        "Player %d critical in %d of %d sampled coalitions", player, critical, drawn
    )
    return critical / drawn


def banzhaf_approx(
    weights: Sequence[int],
    quota: int,
    confidence: float,
    width: float,
    absolute: bool = False,
    rng: Optional[np.random.Generator] = None,
    progress: Optional[ProgressCallback] = None,
    cancel: Optional[CancelFlag] = None,
) -> List[float]:
    """Estimate the Banzhaf index of every player by sampling.

    Each player is estimated independently with its own accuracy
    guarantee. The normalized index divides the estimates by their sum.
    """
    validate_system(weights, quota)
    _validate_accuracy(confidence, width)
    if rng is None:
        rng = np.random.default_rng()

    estimates = [
        approximate(
            weights,
            quota,
            confidence,
            width,
            player,
            rng=rng,
            progress=progress,
            cancel=cancel,
        )
        for player in range(len(weights))
    ]
    if absolute:
        return estimates

    total = sum(estimates)
    if total == 0:
        return estimates
    return [e / total for e in estimates]

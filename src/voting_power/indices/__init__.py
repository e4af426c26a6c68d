from __future__ import annotations

from .approximation import approximate, banzhaf_approx, hoeffding_sample_size
from .banzhaf import banzhaf_exact, normalize_swings
from .enumeration import compute_banzhaf_enumeration
from .polynomial import build_polynomial, count_winning_coalitions
from .swings import extract_swings, player_swings

__all__ = [
    "approximate",
    "banzhaf_approx",
    "banzhaf_exact",
    "build_polynomial",
    "compute_banzhaf_enumeration",
    "count_winning_coalitions",
    "extract_swings",
    "hoeffding_sample_size",
    "normalize_swings",
    "player_swings",
]

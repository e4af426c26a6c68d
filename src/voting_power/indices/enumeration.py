from __future__ import annotations

from fractions import Fraction
from itertools import combinations
from typing import List

from ..model.voting_system import Coalition, WeightedVotingSystem


def enumerate_swings(system: WeightedVotingSystem) -> List[int]:
    """Swing counts by visiting every coalition of the other players.

    Exponential in the number of players; only meant for small systems
    and for checking the polynomial method.
    """
    players = list(range(system.n_players))
    raw = [0] * len(players)

    for i in players:
        others = [p for p in players if p != i]
        for k in range(0, len(others) + 1):
            for subset in combinations(others, k):
                s: Coalition = frozenset(subset)
                if not system.is_winning(s) and system.is_winning(s | {i}):
                    raw[i] += 1

    return raw


def compute_banzhaf_enumeration(
    system: WeightedVotingSystem, absolute: bool = True
) -> List[Fraction]:
    system = system.validate()
    swings = enumerate_swings(system)
    if absolute:
        denominator = 1 << (system.n_players - 1)
    else:
        denominator = sum(swings)
    return [Fraction(s, denominator) for s in swings]

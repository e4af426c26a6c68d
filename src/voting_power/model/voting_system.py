from __future__ import annotations

import operator
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Sequence

from .errors import EmptySystem, InvalidQuota, InvalidWeights


Coalition = FrozenSet[int]


def _as_weight(value: object) -> int:
    if isinstance(value, bool):
        msg = f"Weight must be an integer, got {value!r}."
        raise InvalidWeights(msg)
    try:
        weight = operator.index(value)  # type: ignore[arg-type]
    except TypeError:
        msg = f"Weight must be an integer, got {value!r}."
        raise InvalidWeights(msg) from None
    if weight < 0:
        msg = f"Weight must be non-negative, got {weight}."
        raise InvalidWeights(msg)
    return weight


def _as_quota(value: object) -> int:
    if isinstance(value, bool):
        raise InvalidQuota(value)
    try:
        return operator.index(value)  # type: ignore[arg-type]
    except TypeError:
        raise InvalidQuota(value) from None


def validate_system(weights: Sequence[int], quota: int) -> tuple[list[int], int]:
    """Check a weights/quota pair and return them as plain ints.

    Errors are raised in a fixed order: no players, bad weights, zero
    total weight, then the quota window ``total/2 < quota <= total``.
    """
    if len(weights) == 0:
        raise EmptySystem("A voting system needs at least one player.")

    clean = [_as_weight(w) for w in weights]
    total = sum(clean)
    if total == 0:
        raise EmptySystem("All weights are zero; no quota can ever be met.")

    q = _as_quota(quota)
    if q > total or 2 * q <= total:
        raise InvalidQuota(q, total)
    return clean, q


@dataclass(frozen=True)
class WeightedVotingSystem:
    weights: list[int]
    quota: int
    name: str = ""
    players: list[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return sum(self.weights)

    @property
    def n_players(self) -> int:
        return len(self.weights)

    def player_labels(self) -> list[str]:
        if self.players:
            return list(self.players)
        return [str(i) for i in range(self.n_players)]

    def is_winning(self, coalition: Iterable[int]) -> bool:
        return sum(self.weights[i] for i in coalition) >= self.quota

    def validate(self) -> "WeightedVotingSystem":
        weights, quota = validate_system(self.weights, self.quota)
        if self.players and len(self.players) != len(weights):
            msg = (
                f"Got {len(self.players)} player labels for {len(weights)} weights."
            )
            raise InvalidWeights(msg)
        return WeightedVotingSystem(
            weights=weights,
            quota=quota,
            name=self.name,
            players=list(self.players),
        )

    @classmethod
    def from_weights(
        cls,
        weights: Iterable[int],
        quota: int,
        name: str = "",
        players: Iterable[str] | None = None,
    ) -> "WeightedVotingSystem":
        return cls(
            weights=list(weights),
            quota=quota,
            name=name,
            players=list(players) if players is not None else [],
        ).validate()

from __future__ import annotations

from voting_power.indices.polynomial import build_polynomial
from voting_power.indices.swings import extract_swings, player_swings


def test_swings_basic() -> None:
    weights = [2, 2, 1]
    poly = build_polynomial(weights)
    assert extract_swings(poly, weights, 4) == [2, 2, 0]


def test_swings_weighted_council() -> None:
    weights = [3, 2, 2, 1]
    poly = build_polynomial(weights)
    assert extract_swings(poly, weights, 5) == [5, 3, 3, 1]
    assert extract_swings(poly, weights, 8) == [1, 1, 1, 1]


def test_zero_weight_player_never_swings() -> None:
    weights = [0, 3, 2]
    poly = build_polynomial(weights)
    assert player_swings(poly, 0, 3) == 0
    assert extract_swings(poly, weights, 3)[0] == 0


def test_player_heavier_than_quota() -> None:
    weights = [10, 1]
    poly = build_polynomial(weights)
    # The heavy player swings both coalitions of the other player.
    assert extract_swings(poly, weights, 6) == [2, 0]


def test_swings_do_not_depend_on_position() -> None:
    weights = [1, 3, 2, 2]
    poly = build_polynomial(weights)
    assert extract_swings(poly, weights, 5) == [1, 5, 3, 3]


def test_swings_progress() -> None:
    weights = [2, 2, 1]
    poly = build_polynomial(weights)
    calls: list[tuple[int, int]] = []
    extract_swings(poly, weights, 4, progress=lambda d, t: calls.append((d, t)))
    assert calls[-1] == (3, 3)
    assert len(calls) == 3

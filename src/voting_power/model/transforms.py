from __future__ import annotations

from pathlib import Path
from typing import Any, List, Mapping

import pandas as pd

from ..io.readers import read_weight_table
from ..io.validators import validate_weight_table
from .voting_system import WeightedVotingSystem


def build_system_from_table(
    df: pd.DataFrame,
    quota: int,
    name: str = "",
    player_column: str = "player",
    weight_column: str = "weight",
) -> WeightedVotingSystem:
    """Build a validated voting system from a weight table.

    Row order is player order. When ``player_column`` is absent the
    players are labelled by position.
    """
    validate_weight_table(df, weight_column=weight_column)

    weights = [int(w) for w in df[weight_column]]
    players: list[str] | None = None
    if player_column in df.columns:
        players = [str(p) for p in df[player_column]]

    return WeightedVotingSystem.from_weights(
        weights, quota, name=name, players=players
    )


def build_systems_from_config(
    entries: List[Mapping[str, Any]],
) -> List[WeightedVotingSystem]:
    systems: list[WeightedVotingSystem] = []

    for k, entry in enumerate(entries, start=1):
        name = str(entry.get("name", f"system_{k}"))
        if "quota" not in entry:
            msg = f"System '{name}' has no quota."
            raise ValueError(msg)
        quota = int(entry["quota"])

        if "weights" in entry:
            players = entry.get("players")
            system = WeightedVotingSystem.from_weights(
                entry["weights"],
                quota,
                name=name,
                players=[str(p) for p in players] if players else None,
            )
        elif "path" in entry:
            df = read_weight_table(Path(entry["path"]), fmt=entry.get("format"))
            system = build_system_from_table(
                df,
                quota,
                name=name,
                player_column=entry.get("player_column", "player"),
                weight_column=entry.get("weight_column", "weight"),
            )
        else:
            msg = f"System '{name}' needs either 'weights' or 'path'."
            raise ValueError(msg)

        systems.append(system)

    return systems

from __future__ import annotations

from fractions import Fraction
from pathlib import Path
from typing import Sequence

import pandas as pd

from ..model.voting_system import WeightedVotingSystem


def index_to_frame(
    system: WeightedVotingSystem,
    index: Sequence[float | Fraction],
    swings: Sequence[int] | None = None,
    winning_coalitions: int | None = None,
) -> pd.DataFrame:
    """One row per player, in player order."""
    data: dict[str, list] = {
        "system": [system.name] * system.n_players,
        "player": system.player_labels(),
        "weight": list(system.weights),
    }
    if swings is not None:
        # Swing counts can exceed int64, keep them as Python ints.
        data["swings"] = [int(s) for s in swings]
    data["banzhaf"] = [float(x) for x in index]
    if winning_coalitions is not None:
        data["winning_coalitions"] = [winning_coalitions] * system.n_players
    return pd.DataFrame(data)


def write_table(
    df: pd.DataFrame, path: str | Path, fmt: str | None = None
) -> None:
    p = Path(path)
    if fmt is None:
        fmt = p.suffix.lstrip(".").lower()
    p.parent.mkdir(parents=True, exist_ok=True)

    if fmt == "csv":
        df.to_csv(p, index=False)
    elif fmt in {"parquet", "pq"}:
        # Arrow has no arbitrary-precision integers.
        out = df.copy()
        for col in ("swings", "winning_coalitions"):
            if col in out.columns:
                out[col] = out[col].astype(str)
        out.to_parquet(p, index=False)
    else:
        msg = f"Unsupported output format: {fmt}"
        raise ValueError(msg)

from __future__ import annotations

from pathlib import Path

import pandas as pd
import pytest

from voting_power.io.readers import read_weight_table
from voting_power.io.validators import validate_weight_table
from voting_power.io.writers import index_to_frame, write_table
from voting_power.model.errors import InvalidQuota, InvalidWeights
from voting_power.model.transforms import build_system_from_table, build_systems_from_config
from voting_power.model.voting_system import WeightedVotingSystem


def test_read_weight_table_csv(tmp_path: Path) -> None:
    path = tmp_path / "weights.csv"
    path.write_text("player,weight\nA,3\nB,2\nC,2\nD,1\n", encoding="utf-8")

    df = read_weight_table(path)
    system = build_system_from_table(df, quota=5, name="council")
    assert system.weights == [3, 2, 2, 1]
    assert system.player_labels() == ["A", "B", "C", "D"]
    assert system.total == 8


def test_read_weight_table_unknown_format(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        read_weight_table(tmp_path / "weights.xlsx")


def test_validate_weight_table() -> None:
    with pytest.raises(ValueError):
        validate_weight_table(pd.DataFrame({"player": [1]}))
    with pytest.raises(InvalidWeights):
        validate_weight_table(pd.DataFrame({"weight": [1, -2]}))
    with pytest.raises(InvalidWeights):
        validate_weight_table(pd.DataFrame({"weight": [1.5, 2.0]}))


def test_build_systems_from_config(tmp_path: Path) -> None:
    path = tmp_path / "board.csv"
    path.write_text("member,votes\nx,2\ny,2\nz,1\n", encoding="utf-8")

    systems = build_systems_from_config(
        [
            {"weights": [3, 2, 2, 1], "quota": 5},
            {
                "name": "board",
                "path": str(path),
                "player_column": "member",
                "weight_column": "votes",
                "quota": 4,
            },
        ]
    )
    assert [s.name for s in systems] == ["system_1", "board"]
    assert systems[1].weights == [2, 2, 1]
    assert systems[1].player_labels() == ["x", "y", "z"]

    with pytest.raises(InvalidQuota):
        build_systems_from_config([{"weights": [3, 2, 2, 1], "quota": 4}])
    with pytest.raises(ValueError):
        build_systems_from_config([{"weights": [1]}])


def test_write_index_table(tmp_path: Path) -> None:
    system = WeightedVotingSystem.from_weights([2, 2, 1], 4, name="s")
    df = index_to_frame(system, [0.5, 0.5, 0.0], swings=[2, 2, 0], winning_coalitions=3)
    out = tmp_path / "nested" / "individuals.csv"
    write_table(df, out)

    back = pd.read_csv(out)
    assert list(back.columns) == [
        "system", "player", "weight", "swings", "banzhaf", "winning_coalitions"
    ]
    assert back["banzhaf"].tolist() == [0.5, 0.5, 0.0]

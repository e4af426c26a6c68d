from __future__ import annotations

from pathlib import Path

import pandas as pd
import pytest

from voting_power.cli import main


def test_cli_compute(tmp_path: Path) -> None:
    cfg = tmp_path / "config.yaml"
    data = tmp_path / "board.csv"
    out_dir = tmp_path / "out"

    data.write_text(
        "player,weight\n"
        "a,2\n"
        "b,2\n"
        "c,1\n",
        encoding="utf-8",
    )

    cfg.write_text(
        f"""
systems:
  - name: council
    weights: [3, 2, 2, 1]
    quota: 5
  - name: board
    path: {data}
    quota: 4
index:
  method: exact
  absolute: true
output:
  path: {out_dir}
  format: csv
""",
        encoding="utf-8",
    )

    # Support both styles: with and without 'compute'
    main(["compute", "--config", str(cfg)])

    individuals = out_dir / "individuals.csv"
    assert individuals.exists()
    df = pd.read_csv(individuals)
    council = df[df["system"] == "council"]
    assert council["banzhaf"].tolist() == [0.625, 0.375, 0.375, 0.125]
    assert council["swings"].tolist() == [5, 3, 3, 1]
    assert council["banzhaf_rank"].tolist() == [1, 2, 2, 3]
    board = df[df["system"] == "board"]
    assert board["player"].tolist() == ["a", "b", "c"]
    assert board["banzhaf"].tolist() == [0.5, 0.5, 0.0]
    assert (out_dir / "individuals_banzhaf_council.png").exists()


def test_cli_approx_without_compute_command(tmp_path: Path) -> None:
    cfg = tmp_path / "config.yaml"
    out_dir = tmp_path / "out"
    cfg.write_text(
        f"""
systems:
  - weights: [3, 2, 2, 1]
    quota: 5
index:
  method: approx
  confidence: 0.9
  width: 0.1
  seed: 1
output:
  path: {out_dir}
visualization:
  enabled: false
""",
        encoding="utf-8",
    )

    main(["--config", str(cfg), "--progress"])

    df = pd.read_csv(out_dir / "individuals.csv")
    assert "swings" not in df.columns
    assert df["banzhaf"].sum() == pytest.approx(1.0)


def test_cli_enumerate_matches_exact(tmp_path: Path) -> None:
    results = {}
    for method in ("exact", "enumerate"):
        cfg = tmp_path / f"{method}.yaml"
        cfg.write_text(
            f"""
systems:
  - name: s
    weights: [5, 4, 3, 2, 1]
    quota: 9
index:
  method: {method}
output:
  path: {tmp_path / method}
visualization:
  enabled: false
""",
            encoding="utf-8",
        )
        main(["compute", "-c", str(cfg)])
        results[method] = pd.read_csv(tmp_path / method / "individuals.csv")

    assert results["exact"]["banzhaf"].tolist() == results["enumerate"]["banzhaf"].tolist()
    assert results["exact"]["swings"].tolist() == results["enumerate"]["swings"].tolist()


def test_cli_plot_names_are_safe_filenames(tmp_path: Path) -> None:
    cfg = tmp_path / "config.yaml"
    out_dir = tmp_path / "out"
    cfg.write_text(
        f"""
systems:
  - name: "eu/council 2024"
    weights: [2, 2, 1]
    quota: 4
output:
  path: {out_dir}
""",
        encoding="utf-8",
    )

    main(["compute", "-c", str(cfg)])

    assert (out_dir / "individuals_banzhaf_eu_council_2024.png").exists()
    assert (out_dir / "weight_vs_power_eu_council_2024.png").exists()

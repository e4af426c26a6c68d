from __future__ import annotations

import re
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pandas as pd  # noqa: E402


def _slug(name: object) -> str:
    slug = re.sub(r"[^A-Za-z0-9._-]+", "_", str(name)).strip("._")
    return slug or "system"


def plot_individuals(df: pd.DataFrame, out_dir: Path, title_prefix: str = "") -> None:
    """Bar chart of the Banzhaf index per player, one file per system."""
    out_dir.mkdir(parents=True, exist_ok=True)
    if "player" not in df.columns or "banzhaf" not in df.columns:
        return

    for system, g in df.groupby("system", sort=False):
        players = g["player"].astype(str)
        plt.figure(figsize=(max(8, len(players) * 0.3), 4))
        plt.bar(players, g["banzhaf"])
        plt.xlabel("player")
        plt.ylabel("Banzhaf index")
        plt.title(f"{title_prefix}{system}")
        if len(players) > 30:
            plt.xticks([])
        plt.tight_layout()
        plt.savefig(out_dir / f"individuals_banzhaf_{_slug(system)}.png")
        plt.close()


def plot_weight_vs_power(df: pd.DataFrame, out_dir: Path, title_prefix: str = "") -> None:
    """Scatter of each player's weight share against their Banzhaf index.

    Points above the diagonal hold more power than their share of votes.
    """
    out_dir.mkdir(parents=True, exist_ok=True)
    if "weight" not in df.columns or "banzhaf" not in df.columns:
        return

    for system, g in df.groupby("system", sort=False):
        total = g["weight"].sum()
        if total == 0:
            continue
        share = g["weight"] / total
        power = g["banzhaf"]
        upper = max(float(share.max()), float(power.max()), 1e-9)

        plt.figure(figsize=(5, 5))
        plt.scatter(share, power)
        plt.plot([0, upper], [0, upper], linestyle="--", color="grey")
        plt.xlabel("weight share")
        plt.ylabel("Banzhaf index")
        plt.title(f"{title_prefix}{system}")
        plt.tight_layout()
        plt.savefig(out_dir / f"weight_vs_power_{_slug(system)}.png")
        plt.close()

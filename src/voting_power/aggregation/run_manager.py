from __future__ import annotations

from contextlib import nullcontext
from fractions import Fraction
from pathlib import Path
from typing import Any, ContextManager, List, Mapping, Optional

import numpy as np
import pandas as pd

from ..config_loader import get_section, get_systems, load_config
from ..indices.approximation import banzhaf_approx
from ..indices.banzhaf import compute_swings, normalize_swings
from ..indices.enumeration import enumerate_swings
from ..indices.polynomial import count_winning_coalitions
from ..io.writers import index_to_frame, write_table
from ..model.index_types import IndexKind, Method
from ..model.transforms import build_systems_from_config
from ..model.voting_system import WeightedVotingSystem
from ..utils.logging_utils import configure_logging, get_logger
from ..utils.progress import ProgressCallback, tqdm_progress
from .visualization import plot_individuals, plot_weight_vs_power

logger = get_logger(__name__)


def _rank_values(values: pd.Series) -> pd.Series:
    # Dense ranking, 1 = most powerful.
    return values.rank(method="dense", ascending=False).astype("Int64")


def compute_system(
    system: WeightedVotingSystem,
    index_cfg: Mapping[str, Any],
    progress: Optional[ProgressCallback] = None,
    rng: Optional[np.random.Generator] = None,
) -> pd.DataFrame:
    """Compute the configured index for one system as a per-player table."""
    method = Method(str(index_cfg.get("method", Method.EXACT.value)).lower())
    kind = IndexKind.from_flag(bool(index_cfg.get("absolute", False)))
    absolute = kind is IndexKind.ABSOLUTE

    swings: List[int] | None = None
    winning: int | None = None
    index: List[Fraction] | List[float]

    if method is Method.EXACT:
        polynomial, swings = compute_swings(
            system.weights, system.quota, progress=progress
        )
        winning = count_winning_coalitions(polynomial, system.quota)
        index = normalize_swings(swings, polynomial, system.n_players, absolute)
    elif method is Method.ENUMERATE:
        swings = enumerate_swings(system)
        index = normalize_swings(swings, None, system.n_players, absolute)
    else:
        index = banzhaf_approx(
            system.weights,
            system.quota,
            confidence=float(index_cfg.get("confidence", 0.99)),
            width=float(index_cfg.get("width", 0.01)),
            absolute=absolute,
            rng=rng,
            progress=progress,
        )

    df = index_to_frame(system, index, swings=swings, winning_coalitions=winning)
    df["banzhaf_rank"] = _rank_values(df["banzhaf"])

    logger.info(
        "Processed system '%s' with %d players (quota %d of %d, %s %s)",
        system.name,
        system.n_players,
        system.quota,
        system.total,
        method.value,
        kind.value,
    )
    if winning is not None:
        logger.info("System '%s' has %d winning coalitions", system.name, winning)
    return df


def run_from_config(config_path: Path, show_progress: bool = False) -> pd.DataFrame:
    cfg = load_config(config_path)
    logging_cfg = get_section(cfg, "logging")
    index_cfg = get_section(cfg, "index")
    output_cfg = get_section(cfg, "output")
    viz_cfg = get_section(cfg, "visualization")
    progress_cfg = get_section(cfg, "progress")

    log_path = logging_cfg.get("config")
    configure_logging(Path(log_path) if log_path else None)

    systems = build_systems_from_config(get_systems(cfg))

    seed = index_cfg.get("seed")
    rng = np.random.default_rng(seed)

    frames: list[pd.DataFrame] = []
    for system in systems:
        bar: ContextManager[Optional[ProgressCallback]] = nullcontext()
        if show_progress or progress_cfg.get("enabled", False):
            bar = tqdm_progress(desc=system.name)
        with bar as progress:
            frames.append(compute_system(system, index_cfg, progress=progress, rng=rng))

    result_df = pd.concat(frames, ignore_index=True)

    fmt = str(output_cfg.get("format", "csv"))
    raw_out_path = output_cfg.get("path")
    if raw_out_path is None:
        base_dir = Path("outputs") / config_path.stem
    else:
        # path is treated as a directory
        base_dir = Path(str(raw_out_path))

    base_dir.mkdir(parents=True, exist_ok=True)
    metrics_path = base_dir / f"individuals.{fmt}"
    write_table(result_df, metrics_path, fmt=fmt)
    logger.info("Wrote index table to %s", metrics_path)

    if viz_cfg.get("enabled", True):
        try:
            plot_individuals(result_df, base_dir)
            plot_weight_vs_power(result_df, base_dir)
        except Exception as exc:  # noqa: BLE001
            logger.warning("Visualization failed: %s", exc)

    return result_df

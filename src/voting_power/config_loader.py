from __future__ import annotations

from pathlib import Path
from typing import Any, List, Mapping

import yaml


def load_config(path: Path) -> Mapping[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if not isinstance(data, dict):
        msg = "Configuration file must contain a mapping at top level."
        raise ValueError(msg)
    if not isinstance(data.get("systems"), list) or not data["systems"]:
        msg = "Configuration must list at least one entry under 'systems'."
        raise ValueError(msg)
    return data


def get_section(cfg: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    section = cfg.get(name) or {}
    if not isinstance(section, dict):
        msg = f"Configuration section '{name}' must be a mapping."
        raise ValueError(msg)
    return section


def get_systems(cfg: Mapping[str, Any]) -> List[Mapping[str, Any]]:
    entries = cfg["systems"]
    for k, entry in enumerate(entries, start=1):
        if not isinstance(entry, dict):
            msg = f"Entry {k} under 'systems' must be a mapping."
            raise ValueError(msg)
    return entries

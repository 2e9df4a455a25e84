"""
Persistence helpers for run artifacts.
"""
from __future__ import annotations

import json
from pathlib import Path

import numpy as np

from .archive import ArchiveSnapshot
from .config import MOEADConfigData


def ensure_dir(path: str | Path) -> Path:
    path = Path(path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def write_front(output_dir: str | Path, front: ArchiveSnapshot) -> dict:
    """
    Save the front objectives (FUN.csv) and points (X.csv).

    Returns:
        dict: artifact names keyed by a short label.
    """
    out = {}
    output_dir = ensure_dir(output_dir)

    fun_path = output_dir / "FUN.csv"
    np.savetxt(fun_path, front.F, delimiter=",")
    out["fun"] = fun_path.name

    x_path = output_dir / "X.csv"
    np.savetxt(x_path, front.X, delimiter=",")
    out["x"] = x_path.name
    return out


def write_config(output_dir: str | Path, cfg: MOEADConfigData) -> None:
    output_dir = ensure_dir(output_dir)
    with (output_dir / "resolved_config.json").open("w", encoding="utf-8") as f:
        json.dump(cfg.to_dict(), f, indent=2, sort_keys=True)


__all__ = ["ensure_dir", "write_config", "write_front"]

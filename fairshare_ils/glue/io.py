"""Configuration and instance loading helpers for the command-line glue layer.

Configuration files are YAML (or JSON); city coordinates come from CSV or
Parquet tables with ``x`` and ``y`` columns.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, Mapping

import numpy as np
import pandas as pd
import yaml


def load_config(path_yaml: Path) -> Dict:
    """Read a YAML (or JSON) configuration file.

    Parameters
    ----------
    path_yaml:
        Path to the configuration file.

    Returns
    -------
    dict
        Parsed configuration dictionary.  Empty files resolve to ``{}``.
    """

    path = Path(path_yaml)
    if not path.exists():
        raise FileNotFoundError(path)

    text = path.read_text(encoding="utf-8").strip()
    if not text:
        return {}

    if path.suffix.lower() == ".json":
        return json.loads(text)

    cfg = yaml.safe_load(text)
    return cfg or {}


def _read_frame(path_like: Path) -> pd.DataFrame:
    """Return a Pandas ``DataFrame`` from CSV or Parquet input."""

    path = Path(path_like)
    if not path.exists():
        raise FileNotFoundError(path)
    if path.suffix.lower() in {".parquet", ".pq"}:
        return pd.read_parquet(path)
    return pd.read_csv(path)


def load_coords(path_table: Path) -> np.ndarray:
    """Load city coordinates from a CSV/Parquet table."""

    df = _read_frame(path_table)
    if not {"x", "y"}.issubset(df.columns):
        raise ValueError("city table must contain 'x' and 'y' columns")
    if len(df.index) == 0:
        raise ValueError(f"empty table: {path_table}")
    coords = df[["x", "y"]].to_numpy(dtype=np.float64, copy=True)
    if not np.isfinite(coords).all():
        raise ValueError("city coordinates must be finite")
    return coords


def load_matrix(path_npz: Path) -> np.ndarray:
    """Load an explicit distance matrix from an ``.npz`` archive."""

    path = Path(path_npz)
    with np.load(path) as data:
        dist = np.array(data["dist"], dtype=np.float64)
    return dist


def validate_inputs(data: Mapping[str, np.ndarray]) -> None:
    """Run lightweight shape checks on the assembled instance."""

    dist = np.asarray(data["dist"])
    n = dist.shape[0]
    if dist.ndim != 2 or dist.shape != (n, n):
        raise ValueError("dist must have shape (n, n)")
    if n == 0:
        raise ValueError("instance must contain at least one city")
    if "coords" in data and data["coords"] is not None:
        coords = np.asarray(data["coords"])
        if coords.shape != (n, 2):
            raise ValueError("coords must have shape (n, 2) matching dist")
    if np.any(dist < 0):
        raise ValueError("distances must be non-negative")


def compute_euclid(coords: np.ndarray) -> np.ndarray:
    """Euclidean pairwise distances."""

    diff = coords[:, None, :] - coords[None, :, :]
    return np.sqrt(np.sum(diff * diff, axis=-1))


__all__ = [
    "load_config",
    "load_coords",
    "load_matrix",
    "validate_inputs",
    "compute_euclid",
]

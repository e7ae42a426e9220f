"""Command line pipeline: load an instance, run Fair-Share ILS, export results."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

import numpy as np

from ..config.config import DEFAULTS
from ..data.generate_data import generate_data
from ..domain.tsp import TSPDomain
from ..engine.environment import WallClock
from ..engine.ils import FairShareILS
from ..logging.metrics import Metrics, save_metrics_json, save_tour_csv
from .io import compute_euclid, load_config, load_coords, load_matrix, validate_inputs


def _resolve(base: Path, maybe_path: Optional[str]) -> Optional[Path]:
    if maybe_path is None:
        return None
    return (base / maybe_path).resolve()


def assemble_data(cfg: Dict[str, Any], base_dir: Path) -> Dict[str, Any]:
    """Load (or generate) the TSP instance described by ``cfg``."""

    dataset = cfg.get("dataset", {}) or {}
    coords_path = dataset.get("coords")
    matrix_path = dataset.get("matrix")

    if coords_path is None and matrix_path is None:
        params = build_params(cfg)
        data = generate_data(
            n_cities=int(params["n_cities"]),
            seed=int(params["instance_seed"]),
        )
    else:
        coords = None
        if coords_path is not None:
            coords = load_coords(_resolve(base_dir, coords_path))
        if matrix_path is not None:
            dist = load_matrix(_resolve(base_dir, matrix_path))
        else:
            dist = compute_euclid(coords)
        data = {"n": dist.shape[0], "coords": coords, "dist": dist}

    validate_inputs(data)
    return data


def build_params(cfg: Dict[str, Any]) -> Dict[str, Any]:
    params = DEFAULTS.copy()
    params.update(cfg.get("params", {}) or {})
    for key in ("temperature", "time_limit_ms", "iters", "log_period"):
        if key in cfg:
            params[key] = cfg[key]
    if float(params["temperature"]) <= 0.0:
        raise ValueError("temperature must be positive")
    if int(params["time_limit_ms"]) <= 0:
        raise ValueError("time_limit_ms must be positive")
    return params


def run_pipeline(
    cfg: Dict[str, Any],
    *,
    base_dir: Path,
    outdir: Path,
) -> Dict[str, Any]:
    """Execute Fair-Share ILS according to ``cfg`` and return the outcome."""

    outdir.mkdir(parents=True, exist_ok=True)

    seed = int(cfg.get("seed", 0))
    data = assemble_data(cfg, base_dir)
    params = build_params(cfg)

    domain = TSPDomain(data["dist"], seed=seed, ruin_fraction=float(params["ruin_fraction"]))
    engine = FairShareILS(
        seed,
        float(params["temperature"]),
        clock=WallClock(int(params["time_limit_ms"])),
        params=params,
    )
    metrics = Metrics()
    result = engine.solve(domain, metrics)

    best_tour = domain.best_tour
    meta = {
        "seed": seed,
        "engine": str(engine),
        "config_version": cfg.get("version", "dev"),
        "n_cities": int(data["n"]),
        "best_tour_length": float(domain.best_value),
    }

    save_metrics_json(outdir / "metrics.json", metrics, result, params, extra=meta)
    save_tour_csv(outdir / "tour.csv", best_tour if best_tour is not None else np.empty(0))
    metrics.save_csv(outdir / "metrics_log.csv")

    return {
        "result": result,
        "best_tour": best_tour,
        "metrics": metrics,
        "params": params,
        "meta": meta,
    }


def load_and_run(
    config_path: Path,
    outdir: Path,
    *,
    seed_override: Optional[int] = None,
    time_limit_override: Optional[int] = None,
) -> Dict[str, Any]:
    """Convenience wrapper combining ``load_config`` and :func:`run_pipeline`."""

    cfg = load_config(config_path)
    if seed_override is not None:
        cfg["seed"] = int(seed_override)
    if time_limit_override is not None:
        cfg["time_limit_ms"] = int(time_limit_override)

    base_dir = Path(config_path).resolve().parent
    return run_pipeline(cfg, base_dir=base_dir, outdir=outdir)


def build_arg_parser():
    import argparse

    ap = argparse.ArgumentParser(description="Fair-Share ILS solver")
    ap.add_argument("--config", required=True, help="Path to YAML/JSON configuration")
    ap.add_argument("--outdir", required=True, help="Output directory")
    ap.add_argument("--seed", type=int, default=None, help="Optional RNG seed override")
    ap.add_argument(
        "--time-limit",
        type=int,
        default=None,
        help="Optional time budget override in milliseconds",
    )
    return ap


def main(argv: Optional[list[str]] = None) -> Dict[str, Any]:
    ap = build_arg_parser()
    args = ap.parse_args(argv)

    outdir = Path(args.outdir).resolve()
    cfg_path = Path(args.config).resolve()

    result = load_and_run(
        cfg_path,
        outdir,
        seed_override=args.seed,
        time_limit_override=args.time_limit,
    )

    search = result["result"]
    summary = {
        "engine": result["meta"]["engine"],
        "best_value": float(search.best_value),
        "best_tour_length": result["meta"]["best_tour_length"],
        "time_to_best_ms": int(search.time_to_best),
        "iterations": int(search.iterations),
        "restarts": int(search.restarts),
    }

    print("\n[DONE]")
    print(json.dumps(summary, indent=2))
    return result


__all__ = [
    "assemble_data",
    "build_params",
    "build_arg_parser",
    "load_and_run",
    "main",
    "run_pipeline",
]

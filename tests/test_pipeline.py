import json
from pathlib import Path

import pytest

from fairshare_ils.glue.pipeline import assemble_data, build_params, main, run_pipeline


def _write_dataset(tmp_path: Path):
    (tmp_path / "dataset").mkdir()
    cities = tmp_path / "dataset" / "cities.csv"
    cities.write_text(
        """x,y
0,0
10,0
10,10
0,10
5,5
2,8
""",
        encoding="utf-8",
    )
    return cities


def test_assemble_data_from_table(tmp_path):
    cities = _write_dataset(tmp_path)
    cfg = {"dataset": {"coords": str(cities.relative_to(tmp_path))}}

    data = assemble_data(cfg, base_dir=tmp_path)
    assert data["n"] == 6
    assert data["dist"].shape == (6, 6)


def test_assemble_data_generates_when_no_dataset(tmp_path):
    data = assemble_data({"params": {"n_cities": 17}}, base_dir=tmp_path)
    assert data["dist"].shape == (17, 17)


def test_build_params_override():
    cfg = {"iters": 10, "params": {"log_period": 1, "temperature": 0.2}}
    params = build_params(cfg)
    assert params["iters"] == 10
    assert params["log_period"] == 1
    assert params["temperature"] == 0.2


def test_build_params_rejects_bad_values():
    with pytest.raises(ValueError):
        build_params({"temperature": -1.0})
    with pytest.raises(ValueError):
        build_params({"time_limit_ms": 0})


def test_run_pipeline(tmp_path):
    cities = _write_dataset(tmp_path)
    outdir = tmp_path / "out"
    cfg = {
        "seed": 0,
        "time_limit_ms": 60000,
        "params": {"iters": 20, "log_period": 1},
        "dataset": {"coords": str(cities.relative_to(tmp_path))},
    }

    result = run_pipeline(cfg, base_dir=tmp_path, outdir=outdir)
    assert sorted(result["best_tour"].tolist()) == list(range(6))
    assert (outdir / "metrics.json").exists()
    assert (outdir / "tour.csv").exists()
    assert (outdir / "metrics_log.csv").exists()

    with open(outdir / "metrics.json", encoding="utf-8") as f:
        metrics_data = json.load(f)
    assert metrics_data["seed"] == 0
    assert metrics_data["engine"] == "FairShareILS(T:0.5)"
    assert metrics_data["iters_logged"] >= 1
    assert len(metrics_data["option_successes"]) == 4


def test_cli_main(tmp_path, capsys):
    cities = _write_dataset(tmp_path)
    cfg_path = tmp_path / "cfg.yaml"
    cfg_path.write_text(
        "seed: 3\niters: 15\ndataset:\n  coords: dataset/cities.csv\n",
        encoding="utf-8",
    )
    outdir = tmp_path / "cli_out"

    main(["--config", str(cfg_path), "--outdir", str(outdir), "--time-limit", "60000"])

    out = capsys.readouterr().out
    assert "[DONE]" in out
    assert (outdir / "metrics.json").exists()
    assert cities.exists()

import csv
import json

import numpy as np

_COLUMNS = [
    "iter",
    "elapsed_ms",
    "option",
    "status",
    "curr_value",
    "proposed_value",
    "run_best",
    "best_value",
    "wait",
    "max_wait",
    "mean_improvement",
    "restart",
]


class Metrics:
    def __init__(self):
        self.rows = []

    def append(
        self,
        it,
        elapsed,
        option,
        status,
        curr,
        proposed,
        run_best,
        best,
        wait=0,
        max_wait=0,
        mean_improvement=0.0,
        restart=False,
    ):
        self.rows.append(
            (
                int(it),
                int(elapsed),
                int(option),
                status,
                float(curr),
                float(proposed),
                float(run_best),
                float(best),
                int(wait),
                int(max_wait),
                float(mean_improvement),
                bool(restart),
            )
        )

    @property
    def restarts(self):
        return sum(1 for row in self.rows if row[-1])

    def save_csv(self, path):
        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow(_COLUMNS)
            for row in self.rows:
                w.writerow([int(v) if isinstance(v, bool) else v for v in row])


def save_metrics_json(path, metrics, result, params, *, extra=None):
    data = {
        "final_best_value": float(result.best_value),
        "time_to_best_ms": int(result.time_to_best),
        "iterations": int(result.iterations),
        "restarts": int(result.restarts),
        "option_successes": result.search.total_successes.tolist(),
        "option_applications": result.search.total_applications.tolist(),
        "iters_logged": len(metrics.rows),
        "params": params,
    }
    if extra:
        data.update(extra)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, default=_json_default)


def _json_default(obj):
    if isinstance(obj, np.generic):
        return obj.item()
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    raise TypeError(f"not JSON serialisable: {type(obj).__name__}")


def save_tour_csv(path, tour):
    with open(path, "w", newline="", encoding="utf-8") as f:
        w = csv.writer(f)
        w.writerow(["pos", "city"])
        for i, city in enumerate(tour):
            w.writerow([i, int(city)])

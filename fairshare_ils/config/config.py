# Simple parameter defaults (extend freely)
DEFAULTS = {
    "temperature": 0.5,     # acceptance leniency T
    "time_limit_ms": 10000, # wall-clock budget of one search
    "iters": None,          # optional iteration cap, None = budget only
    "log_period": 100,      # trace every N iterations
    "max_wait_init": 1,     # initial patience before any improvement
    "n_cities": 100,        # generated TSP size when no dataset is given
    "instance_seed": 0,
    "ruin_fraction": 0.2,   # share of cities removed by ruin-recreate
}

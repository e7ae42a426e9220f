import numpy as np


def _euclid(a, b):
    dx = a[:,None,0] - b[None,:,0]
    dy = a[:,None,1] - b[None,:,1]
    return np.sqrt(dx*dx + dy*dy)


def generate_data(n_cities=100, seed=0):
    """Uniform random Euclidean TSP instance on the 100 x 100 square."""
    if n_cities < 1:
        raise ValueError("n_cities must be >= 1")
    rng = np.random.default_rng(seed)
    coords = rng.uniform(0, 100, size=(n_cities, 2))
    dist = _euclid(coords, coords)
    return {
        "n": n_cities,
        "coords": coords,
        "dist": dist,
    }

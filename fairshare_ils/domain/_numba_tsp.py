"""Numba-accelerated tour kernels for the reference TSP domain."""

from __future__ import annotations

import numpy as np
from numba import njit


@njit(cache=True)
def tour_length(dist, tour):
    """Length of the closed tour ``tour`` under the distance matrix ``dist``."""

    n = tour.shape[0]
    if n < 2:
        return 0.0
    s = 0.0
    for i in range(n - 1):
        s += dist[tour[i], tour[i + 1]]
    s += dist[tour[n - 1], tour[0]]
    return s


@njit(cache=True)
def two_opt_first(dist, tour):
    """First-improvement 2-opt on a closed tour. Returns True if a move was applied."""

    n = tour.shape[0]
    if n < 4:
        return False
    for i in range(n - 2):
        a = tour[i]
        b = tour[i + 1]
        # (tour[n-1], tour[0]) touches (tour[0], tour[1])
        j_end = n - 1 if i == 0 else n
        for j in range(i + 2, j_end):
            c = tour[j]
            d = tour[(j + 1) % n]
            delta = dist[a, c] + dist[b, d] - dist[a, b] - dist[c, d]
            if delta < -1e-9:
                lo = i + 1
                hi = j
                while lo < hi:
                    t = tour[lo]
                    tour[lo] = tour[hi]
                    tour[hi] = t
                    lo += 1
                    hi -= 1
                return True
    return False


@njit(cache=True)
def _relocate(tour, i, j):
    # move tour[i] between tour[j] and tour[j + 1]
    city = tour[i]
    if i < j:
        for k in range(i, j):
            tour[k] = tour[k + 1]
        tour[j] = city
    else:
        for k in range(i, j + 1, -1):
            tour[k] = tour[k - 1]
        tour[j + 1] = city


@njit(cache=True)
def or_opt_first(dist, tour):
    """First-improvement single-city relocation. Returns True if a move was applied."""

    n = tour.shape[0]
    if n < 4:
        return False
    for i in range(n):
        prev_i = (i - 1 + n) % n
        prev = tour[prev_i]
        city = tour[i]
        nxt = tour[(i + 1) % n]
        gain = dist[prev, city] + dist[city, nxt] - dist[prev, nxt]
        for j in range(n):
            if j == i or j == prev_i:
                continue
            u = tour[j]
            v = tour[(j + 1) % n]
            added = dist[u, city] + dist[city, v] - dist[u, v]
            if added - gain < -1e-9:
                _relocate(tour, i, j)
                return True
    return False


@njit(cache=True)
def cheapest_insertion(dist, partial, removed):
    """Reinsert ``removed`` cities one by one at their cheapest position."""

    L = partial.shape[0]
    n = L + removed.shape[0]
    tour = np.empty(n, dtype=partial.dtype)
    tour[:L] = partial
    for r in range(removed.shape[0]):
        city = removed[r]
        if L == 0:
            tour[0] = city
            L = 1
            continue
        best_pos = 0
        best_cost = np.inf
        for p in range(L):
            u = tour[p]
            v = tour[(p + 1) % L]
            cost = dist[u, city] + dist[city, v] - dist[u, v]
            if cost < best_cost:
                best_cost = cost
                best_pos = p
        for k in range(L, best_pos + 1, -1):
            tour[k] = tour[k - 1]
        tour[best_pos + 1] = city
        L += 1
    return tour

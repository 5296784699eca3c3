from __future__ import annotations
import time
from typing import Dict, List, Sequence, Tuple

import numpy as np

from two_d_tree import TwoDTree


def _as_matrix(points: Sequence[Sequence[float]]) -> np.ndarray:
    return np.asarray(points, dtype=float).reshape(-1, 2)


def brute_force_range(
    points: Sequence[Sequence[float]],
    x_min: float,
    y_min: float,
    x_max: float,
    y_max: float,
) -> List[int]:
    "Γραμμική σάρωση: indices των σημείων μέσα στο ορθογώνιο (κλειστά όρια)."
    P = _as_matrix(points)
    if P.shape[0] == 0:
        return []

    mask = (P[:, 0] >= x_min) & (P[:, 0] <= x_max) & (P[:, 1] >= y_min) & (P[:, 1] <= y_max)
    return np.flatnonzero(mask).tolist()


def brute_force_nearest(points: Sequence[Sequence[float]], qx: float, qy: float) -> Tuple[int, float]:
    "Απλή brute-force υλοποίηση nearest neighbor για σύγκριση με το 2D tree."
    P = _as_matrix(points)
    if P.shape[0] == 0:
        raise ValueError("brute_force_nearest needs at least one point")

    d = np.hypot(P[:, 0] - qx, P[:, 1] - qy)
    idx = int(np.argmin(d))
    return idx, float(d[idx])


def evaluate_tree(
    tree: TwoDTree,
    points: Sequence[Sequence[float]],
    rect: Tuple[float, float, float, float],
    query: Tuple[float, float],
) -> Dict[str, float | int]:
    "Μετράει χρόνους range/nearest στο δέντρο και στη γραμμική σάρωση για το ίδιο query."
    x_min, y_min, x_max, y_max = rect
    qx, qy = query

    t0 = time.perf_counter()
    tree_range = tree.range_search(x_min, y_min, x_max, y_max)
    t1 = time.perf_counter()
    range_time = t1 - t0

    t0 = time.perf_counter()
    bf_range = brute_force_range(points, x_min, y_min, x_max, y_max)
    t1 = time.perf_counter()
    bf_range_time = t1 - t0

    t0 = time.perf_counter()
    neighbor = tree.nearest_neighbor(qx, qy)
    t1 = time.perf_counter()
    nn_time = t1 - t0

    t0 = time.perf_counter()
    _, bf_distance = brute_force_nearest(points, qx, qy)
    t1 = time.perf_counter()
    bf_nn_time = t1 - t0

    return {
        "size": len(tree),
        "height": tree.height(),
        "range": range_time,
        "range_bruteforce": bf_range_time,
        "range_results": len(tree_range),
        "range_results_bruteforce": len(bf_range),
        "nn": nn_time,
        "nn_bruteforce": bf_nn_time,
        "nn_distance": neighbor.distance,
        "nn_distance_bruteforce": bf_distance,
        "nodes_examined": neighbor.nodes_examined,
    }

"""Benchmark the Nelder-Mead loop on bowls of increasing dimension."""

import time
from typing import Dict

import numpy as np

from quipu.optimize import Status, nelder_mead


def benchmark_bowl(dim: int, repeats: int = 20, tol: float = 1e-6) -> Dict[str, float]:
    """Benchmark minimization of a shifted quadratic bowl.

    Args:
        dim: Number of arguments of the objective.
        repeats: Number of timed runs.
        tol: Convergence tolerance.

    Returns:
        Dictionary with timing and iteration statistics.
    """
    rng = np.random.default_rng(0)
    center = rng.uniform(-3.0, 3.0, size=dim)

    def bowl(x: np.ndarray) -> float:
        return float(np.sum((x - center) ** 2))

    x0 = rng.uniform(-10.0, 10.0, size=dim)

    # Warmup
    nelder_mead(bowl, x0, maxiter=10, vectorized=True)

    nits = []
    nfevs = []
    start = time.perf_counter()
    for _ in range(repeats):
        res = nelder_mead(bowl, x0, maxiter=200 * dim, tol=tol, vectorized=True)
        nits.append(res.nit)
        nfevs.append(res.nfev)
        if res.status is not Status.OPTIMAL:
            print(f"  warning: dim={dim} ended with {res.status.value}")
    end = time.perf_counter()

    total_time = end - start
    return {
        "dim": dim,
        "total_time_sec": total_time,
        "time_per_run_sec": total_time / repeats,
        "mean_nit": float(np.mean(nits)),
        "mean_nfev": float(np.mean(nfevs)),
    }


if __name__ == "__main__":
    print("Benchmarking Nelder-Mead on quadratic bowls...")

    for dim in (1, 2, 4, 8):
        results = benchmark_bowl(dim)
        print(f"Bowl ({dim} argument(s)):")
        print(f"  Time per run: {results['time_per_run_sec'] * 1e3:.2f} ms")
        print(f"  Mean iterations: {results['mean_nit']:.1f}")
        print(f"  Mean evaluations: {results['mean_nfev']:.1f}")

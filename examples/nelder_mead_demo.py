"""
Example: minimizing functions of several arguments with Nelder-Mead.

Shows the fluent builder, the functional entry point, and how a run that
runs out of iterations still reports its best vertex.
"""

import numpy as np

from quipu import NelderMead, Start, Status, nelder_mead


def bowl(x, y):
    return (x - 1.0) ** 2 + (y - 2.0) ** 2 + 42.0


def rosenbrock(x):
    return float((1 - x[0]) ** 2 + 100 * (x[1] - x[0] ** 2) ** 2)


def example_builder():
    print("=" * 60)
    print("Example 1: Fluent builder on a shifted bowl")
    print("=" * 60)

    result = (
        NelderMead.objective(bowl)
        .with_maximum_iterations(100)
        .with_tolerance(0.001)
        .start_from(Start.around(100.0, 100.0))
        .minimize()
    )
    print(f"Status: {result.status.value}")
    if result.status == Status.OPTIMAL:
        print(f"Minimizer: {result.candidate.arguments}")
        print(f"Minimum value: {result.candidate.value:.6f}")
    print(f"Iterations: {result.nit}, evaluations: {result.nfev}")
    print()


def example_budget():
    print("=" * 60)
    print("Example 2: Rosenbrock with a small iteration budget")
    print("=" * 60)

    result = nelder_mead(rosenbrock, np.array([-1.2, 1.0]), maxiter=25, vectorized=True)
    print(f"Status: {result.status.value}")
    print(f"Best point so far: {result.x}")
    print(f"Best value so far: {result.fun:.6f}")
    print()


if __name__ == "__main__":
    example_builder()
    example_budget()
    print("Examples complete.")

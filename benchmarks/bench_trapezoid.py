import sys
import gc
import time
import pprint
import numpy as np
from pquad import trapezoid, cumulative_trapezoid


def benchmark_trapezoid(rng, n_samples, x, dx, integrate_func):
    """Benchmark an integration function on a batch of curves."""
    gc.collect()  # Clear garbage collector to avoid interference
    y = np.sin(x)[np.newaxis, :] + 0.5 * rng.standard_normal((n_samples, x.size))
    start_time = time.time_ns()
    if dx is None:
        val = integrate_func(y, x, axis=1)
    else:
        val = integrate_func(y, dx=dx, axis=1)
    elapsed_time = time.time_ns() - start_time
    del y, val  # Free memory
    return elapsed_time


if __name__ == "__main__":
    n_samples = 1000
    n_points = int(1e4)
    x = np.linspace(0.0, 2.0 * np.pi, n_points, dtype=np.float64)
    dx = x[1] - x[0]
    rng = np.random.default_rng(42)
    cases = {
        "trapezoid (uniform)": (trapezoid, dx),
        "trapezoid (sample points)": (trapezoid, None),
        "cumulative_trapezoid (uniform)": (cumulative_trapezoid, dx),
        "cumulative_trapezoid (sample points)": (cumulative_trapezoid, None),
    }

    print("Python Information:\n", sys.version)
    np.show_config()

    num_replications = 30
    run_times = dict()
    for name, (integrate_func, case_dx) in cases.items():
        run_times[name] = []
        for i in range(num_replications):
            run_times[name].append(benchmark_trapezoid(rng, n_samples, x, case_dx, integrate_func))

    for name in cases:
        # remove fastest and slowest
        run_times_remove = np.sort(run_times[name])[1:-1]

        print(
            f"Average time (remove fastest and slowest) for {num_replications} replications with {n_samples} curves of " +
            f"{n_points} points on {name}: {np.mean(run_times_remove) / 1e9:.6f} seconds"
        )
        print(f"Standard deviation of run times: {np.std(run_times_remove) / 1e9:.6f} seconds")

    for name, run_time in run_times.items():
        print(f"case - {name}, run_time:")
        pprint.pprint(np.array(run_time) / 1e9)

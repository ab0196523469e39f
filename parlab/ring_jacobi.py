"""One-dimensional Jacobi smoothing on a ring split between processes."""

from __future__ import annotations

import argparse
import sys

DEFAULT_TOLERANCE = 0.001
DEFAULT_MAX_ITERATIONS = 100_000
DEFAULT_PROCESSES = 2
PROBLEM_SIZE = 6


def read_problem() -> list[float]:
    """Return the built-in problem: ``i * 20`` for each of six positions."""
    return [i * 20.0 for i in range(PROBLEM_SIZE)]


def do_one_step(local) -> tuple[list[float], float]:
    """Average each interior cell's neighbours.

    ``local`` holds a ghost cell at each end. Returns the updated cells,
    ghosts unchanged, and the largest change made to any interior cell.
    """
    if len(local) < 2:
        raise ValueError("local data must include two ghost cells")
    updated = [local[0]]
    max_error = 0.0
    for left, old, right in zip(local, local[1:], local[2:]):
        new = 0.5 * (left + right)
        max_error = max(max_error, abs(new - old))
        updated.append(new)
    updated.append(local[-1])
    return updated, max_error


def solve(
    values,
    processes,
    tolerance=DEFAULT_TOLERANCE,
    max_iterations=DEFAULT_MAX_ITERATIONS,
) -> tuple[list[float], int, float]:
    """Smooth ``values`` on a ring of ``processes`` blocks until the change is small.

    Each step the blocks swap boundary values with their ring neighbours,
    take one Jacobi step and agree on the largest change. Stops once that
    change is within ``tolerance`` or the step count exceeds
    ``max_iterations``. Returns the values, the steps taken and the last change.
    """
    values = list(values)
    if processes < 1:
        raise ValueError("at least one process is required")
    size = len(values)
    if size <= 0 or size % processes != 0:
        raise ValueError(
            f"array size {size} is not divisible by the number of processes {processes}"
        )
    per = size // processes
    blocks = [values[p * per : (p + 1) * per] for p in range(processes)]

    iterations = 0
    while True:
        stepped = []
        errors = []
        for rank, block in enumerate(blocks):
            left_ghost = blocks[(rank - 1) % processes][-1]
            right_ghost = blocks[(rank + 1) % processes][0]
            updated, error = do_one_step([left_ghost, *block, right_ghost])
            stepped.append(updated[1:-1])
            errors.append(error)
        blocks = stepped
        global_error = max(errors)
        iterations += 1
        if iterations > max_iterations or global_error <= tolerance:
            break

    return [v for block in blocks for v in block], iterations, global_error


def format_results(values) -> str:
    """Join the values with single spaces in general number format."""
    return " ".join(f"{v:g}" for v in values)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Jacobi smoothing on a ring.")
    parser.add_argument("--processes", type=int, default=DEFAULT_PROCESSES)
    parser.add_argument("--tolerance", type=float, default=DEFAULT_TOLERANCE)
    parser.add_argument(
        "--max-iterations", type=int, default=DEFAULT_MAX_ITERATIONS
    )
    args = parser.parse_args(argv)

    work = read_problem()
    print(f"Problem size: {len(work)}")
    print(f"Number of processes: {args.processes}")
    if args.processes < 1 or len(work) % args.processes != 0:
        print(
            f"Error: Array size {len(work)} is not divisible by the number of "
            f"processes {args.processes}. Exiting.",
            file=sys.stderr,
        )
        return 1

    result, iterations, error = solve(
        work, args.processes, args.tolerance, args.max_iterations
    )
    if iterations > args.max_iterations:
        print(f"Warning: Exceeded max iterations. Error: {error:g}")
    print(f"Converged after {iterations} iterations with final error: {error:g}")
    print("Final Results:")
    print(format_results(result))
    return 0
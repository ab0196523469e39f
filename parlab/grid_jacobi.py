"""Jacobi relaxation on a square grid, shared out in strips between threads."""

from __future__ import annotations

import argparse
import threading
import time
from dataclasses import dataclass
from pathlib import Path

from parlab.barrier import Barrier

MAX_GRID = 256
MAX_WORKERS = 4
BOUNDARY = 1.0
INTERIOR = 0.0

Grid = list[list[float]]


@dataclass(frozen=True)
class JacobiResult:
    """Outcome of a run: the interior of the final grid and its last change."""

    iterations: int
    max_diff: float
    grid: Grid
    elapsed: float


def initialize_grids(size) -> tuple[Grid, Grid]:
    """Return two grids of ``size + 2`` rows with boundaries 1.0 and interiors 0.0."""
    if size < 1:
        raise ValueError("grid size must be at least 1")
    width = size + 2

    def make() -> Grid:
        grid = [[INTERIOR] * width for _ in range(width)]
        grid[0] = [BOUNDARY] * width
        grid[-1] = [BOUNDARY] * width
        for row in grid:
            row[0] = BOUNDARY
            row[-1] = BOUNDARY
        return grid

    return make(), make()


def _relax(src: Grid, dst: Grid, rows: range, cols: range) -> None:
    for i in rows:
        above, row, below, out = src[i - 1], src[i], src[i + 1], dst[i]
        for j in cols:
            out[j] = (above[j] + below[j] + row[j - 1] + row[j + 1]) * 0.25


def solve(grid_size, workers, iterations) -> JacobiResult:
    """Run ``iterations`` double sweeps with ``workers`` threads, each owning a strip of rows."""
    if workers < 1:
        raise ValueError("at least one worker is required")
    if workers > MAX_WORKERS:
        raise ValueError(f"at most {MAX_WORKERS} workers are supported")
    if grid_size > MAX_GRID:
        raise ValueError(f"grid size must not exceed {MAX_GRID}")
    if iterations < 0:
        raise ValueError("iterations must not be negative")

    grid1, grid2 = initialize_grids(grid_size)
    strip = grid_size // workers
    barrier = Barrier(workers)
    diffs = [0.0] * workers
    cols = range(1, grid_size + 1)

    def worker(my_id: int) -> None:
        print(f"worker {my_id} (thread id {threading.get_ident()}) has started")
        first = my_id * strip + 1
        rows = range(first, first + strip)
        for _ in range(iterations):
            _relax(grid1, grid2, rows, cols)
            barrier.wait()
            _relax(grid2, grid1, rows, cols)
            barrier.wait()
        diffs[my_id] = max(
            (abs(grid1[i][j] - grid2[i][j]) for i in rows for j in cols),
            default=0.0,
        )

    start = time.perf_counter()
    pool = [threading.Thread(target=worker, args=(i,)) for i in range(workers)]
    for t in pool:
        t.start()
    for t in pool:
        t.join()
    elapsed = time.perf_counter() - start

    interior = [row[1 : grid_size + 1] for row in grid2[1 : grid_size + 1]]
    return JacobiResult(iterations, max(diffs, default=0.0), interior, elapsed)


def write_results(grid, path) -> None:
    """Write each row of ``grid`` as space-terminated fixed-point values."""
    with Path(path).open("w") as out:
        for row in grid:
            out.write("".join(f"{value:f} " for value in row))
            out.write("\n")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Jacobi relaxation with threads.")
    parser.add_argument("grid_size", type=int)
    parser.add_argument("workers", type=int)
    parser.add_argument("iterations", type=int)
    parser.add_argument("--output", default="results")
    args = parser.parse_args(argv)

    try:
        result = solve(args.grid_size, args.workers, args.iterations)
    except ValueError as exc:
        print(f"Error: {exc}")
        return 1
    print(f"number of iterations:  {result.iterations}")
    print(f"maximum difference:  {result.max_diff:e}")
    print(f"elapsed time:  {result.elapsed:f}")
    write_results(result.grid, args.output)
    return 0
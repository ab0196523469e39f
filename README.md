# parlab

Small, self-contained demonstrations of classic parallel programming
patterns. Each is a library function and a command. The package needs only
the standard library.

## Modules

| Module | Pattern |
| --- | --- |
| `parlab.barrier` | `Barrier(parties)`: a reusable barrier on a condition variable. A round counter guards each wait. `wait()` returns `True` in the thread that arrived last. `round` gives the number of completed rounds. |
| `parlab.counter` | A shared counter incremented by several threads. `safe_count(threads, increments)` guards each increment with a semaphore. `unsafe_count(threads, increments)` does not, so updates may be lost. |
| `parlab.hello` | `hello_threads(count, max_sleep, shared_id)` starts threads that greet after a random sleep. It returns the ids in the order they were printed. With `shared_id` the threads read their id from one cell that keeps changing. |
| `parlab.producer_consumer` | A one-slot buffer between a producer and a consumer. `produce_consume(iterations)` uses two semaphores. `unsafe_produce_consume(iterations)` uses none. `expected_total(iterations)` gives the correct sum. |
| `parlab.prefix_sum` | A three-phase parallel prefix sum over chunks (`split_chunks`, `Chunk`). `parallel_prefix_sum` synchronises with a barrier. `monitor_prefix_sum` uses a monitor with two condition queues. `sequential_prefix_sum` and `check_result` are the reference and the check. |
| `parlab.grid_jacobi` | Jacobi relaxation on a square grid. Boundaries are 1.0 and interiors start at 0.0. `solve(grid_size, workers, iterations)` shares out strips of rows between threads that meet at a barrier, and returns a `JacobiResult`. `initialize_grids` builds the starting grids. `write_results` writes a grid to a file. |
| `parlab.ring_jacobi` | One-dimensional Jacobi smoothing on a ring of blocks that swap boundary cells each step. The functions are `read_problem`, `do_one_step`, `solve(values, processes, tolerance, max_iterations)` and `format_results`. |
| `parlab.task_farm` | `farm(tasks, workers)` hands tasks to worker threads and collects the results in task order. `compute(task_value)` simulates work and returns ten times the value. |
| `parlab.prime_sieve` | `sieve(limit)` runs a pipeline of siever threads, each keeping one prime. It returns the primes below `limit`. |

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

```
parlab-counter [--unsafe] [--threads N] [--increments N]
parlab-hello [--threads N] [--max-sleep SECONDS] [--shared]
parlab-producer-consumer ITERATIONS [--unsafe]
parlab-prefix-sum [--items N] [--threads N] [--monitor] [--quiet] [--seed N]
parlab-grid-jacobi GRID_SIZE WORKERS ITERATIONS [--output PATH]
parlab-ring-jacobi [--processes N] [--tolerance X] [--max-iterations N]
parlab-task-farm [--workers N] [--tasks N]
parlab-prime-sieve LIMIT
```

- `parlab-counter` uses 4 threads by default. Each makes 200,000 increments, or 20,000,000 with `--unsafe`. It prints the final value next to the expected one.
- `parlab-producer-consumer` prints the total the consumer reached and the expected total.
- `parlab-prefix-sum` fills the array with random values from 0 to 4. The defaults are 10,000 items and 25 threads. It prints the data unless `--quiet` is given, then says whether the parallel and sequential results match. It refuses more than 10,000,000 items or more than 32 threads.
- `parlab-grid-jacobi` accepts a grid of at most 256 and at most 4 workers. It prints the iteration count, the maximum difference and the elapsed time. It writes the final grid to `results`, or to the path given with `--output`.
- `parlab-ring-jacobi` smooths the six built-in values `0 20 40 … 100` over 2 blocks by default. The number of blocks must divide six.
- `parlab-task-farm` farms tasks `1..N` (10 by default) out to 3 workers by default. It logs every message.
- `parlab-prime-sieve` prints each prime below `LIMIT` as a siever finds it.

## Using the library

```python
from parlab.prefix_sum import sequential_prefix_sum, parallel_prefix_sum, check_result
from parlab.prime_sieve import sieve
from parlab.task_farm import farm

data = [3, 1, 4, 1, 5, 9, 2, 6]
assert check_result(sequential_prefix_sum(data), parallel_prefix_sum(data, 4))
print(sieve(30))            # [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]
print(farm([1, 2, 3], 2))   # [10, 20, 30]
```

The "unsafe" variants show what goes wrong without synchronisation. Their
results are not guaranteed to be correct and may differ from run to run.

## What it does not do

All the patterns run as threads inside one Python process. The ring, the
task farm and the sieve pipeline pass messages through in-process queues and
shared lists. Nothing here starts separate processes or talks over a network
or a message-passing runtime.
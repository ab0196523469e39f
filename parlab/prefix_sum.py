"""Prefix sums computed sequentially and by a team of threads in three phases."""

from __future__ import annotations

import argparse
import random
import threading
from dataclasses import dataclass
from itertools import accumulate, pairwise
from typing import Iterable, Sequence

from parlab.barrier import Barrier

DEFAULT_ITEMS = 10_000
DEFAULT_THREADS = 25
MAX_ITEMS = 10_000_000
MAX_THREADS = 32


@dataclass(frozen=True)
class Chunk:
    """The slice of the array owned by one worker: indices ``start`` to ``end - 1``."""

    worker_id: int
    start: int
    end: int

    @property
    def size(self) -> int:
        return self.end - self.start


def split_chunks(n, threads) -> list[Chunk]:
    """Split ``n`` items into ``threads`` equal chunks; the last takes the surplus."""
    if threads < 1:
        raise ValueError("at least one thread is required")
    if n < threads:
        raise ValueError("there must be at least as many items as threads")
    slice_size = n // threads
    chunks = []
    first = 0
    for worker_id in range(threads):
        end = n if worker_id == threads - 1 else first + slice_size
        chunks.append(Chunk(worker_id, first, end))
        first = end
    return chunks


def sequential_prefix_sum(data) -> list[int]:
    """Return the running totals of ``data``."""
    return list(accumulate(data))


def check_result(expected, actual) -> bool:
    """True when both sequences hold the same values in the same order."""
    return list(expected) == list(actual)


def _phase_1(data: list[int], chunk: Chunk) -> None:
    """Prefix sum within one chunk."""
    for i in range(chunk.start + 1, chunk.end):
        data[i] += data[i - 1]


def _phase_2(data: list[int], chunks: Sequence[Chunk]) -> None:
    """Carry the running total across the last element of each chunk."""
    for prev, cur in pairwise(chunks):
        data[cur.end - 1] += data[prev.end - 1]


def _phase_3(data: list[int], chunk: Chunk) -> None:
    """Add the previous chunk's total to every element but this chunk's last."""
    offset = data[chunk.start - 1]
    for i in range(chunk.start, chunk.end - 1):
        data[i] += offset


def _run_workers(chunks: Sequence[Chunk], body) -> None:
    pool = [threading.Thread(target=body, args=(chunk,)) for chunk in chunks]
    for t in pool:
        t.start()
    for t in pool:
        t.join()


def parallel_prefix_sum(data, threads) -> list[int]:
    """Compute the prefix sum with ``threads`` workers synchronised by a barrier."""
    result = list(data)
    chunks = split_chunks(len(result), threads)
    barrier = Barrier(threads)

    def worker(chunk: Chunk) -> None:
        _phase_1(result, chunk)
        barrier.wait()
        if chunk.worker_id == 0:
            _phase_2(result, chunks)
        barrier.wait()
        if chunk.worker_id != 0:
            _phase_3(result, chunk)

    _run_workers(chunks, worker)
    return result


class _PhaseMonitor:
    """Two condition queues over one lock and a single shared round counter.

    Worker 0 waits on its own queue until every worker has finished phase 1;
    the others wait until worker 0 has finished phase 2. Because one round
    counter guards both queues, the scheme is only sound where a waiting
    thread is never woken without a notification.
    """

    def __init__(self, parties: int) -> None:
        self.parties = parties
        self._lock = threading.Lock()
        self._worker0_cond = threading.Condition(self._lock)
        self._others_cond = threading.Condition(self._lock)
        self._arrived = 0
        self._round = 0

    def arrive(self, chunk: Chunk, phase_2) -> None:
        with self._lock:
            self._arrived += 1
            if chunk.worker_id == 0:
                if self._arrived != self.parties:
                    current = self._round
                    while self._round == current:
                        self._worker0_cond.wait()
                phase_2()
                self._round += 1
                self._others_cond.notify_all()
            else:
                if self._arrived == self.parties:
                    self._round += 1
                    self._worker0_cond.notify_all()
                current = self._round
                while self._round == current:
                    self._others_cond.wait()


def monitor_prefix_sum(data, threads) -> list[int]:
    """Compute the prefix sum with worker 0 doing phase 2 inside a monitor."""
    result = list(data)
    chunks = split_chunks(len(result), threads)
    monitor = _PhaseMonitor(threads)

    def worker(chunk: Chunk) -> None:
        _phase_1(result, chunk)
        monitor.arrive(chunk, lambda: _phase_2(result, chunks))
        if chunk.worker_id != 0:
            _phase_3(result, chunk)

    _run_workers(chunks, worker)
    return result


def _show(message: str, values: Iterable[int], enabled: bool) -> None:
    if enabled:
        print(message + "".join(f" {v}" for v in values))


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Parallel prefix sum.")
    parser.add_argument("--items", type=int, default=DEFAULT_ITEMS)
    parser.add_argument("--threads", type=int, default=DEFAULT_THREADS)
    parser.add_argument(
        "--monitor", action="store_true", help="use the two-queue monitor"
    )
    parser.add_argument("--quiet", action="store_true", help="do not print the data")
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    if args.items > MAX_ITEMS or args.threads > MAX_THREADS:
        print("So much data or so many threads may not be a good idea! .... exiting")
        return 1

    rng = random.Random(args.seed)
    original = [rng.randrange(5) for _ in range(args.items)]
    show = not args.quiet
    _show("initial data          : ", original, show)

    expected = sequential_prefix_sum(original)
    _show("sequential prefix sum : ", expected, show)

    run = monitor_prefix_sum if args.monitor else parallel_prefix_sum
    try:
        actual = run(original, args.threads)
    except ValueError as exc:
        print(f"Error: {exc}")
        return 1
    _show("parallel prefix sum   : ", actual, show)

    if check_result(expected, actual):
        print("Well done, the sequential and parallel prefix sum arrays match.")
    else:
        print("Error: The sequential and parallel prefix sum arrays don't match.")
    return 0
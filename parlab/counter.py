"""Shared counter incremented by several threads, with and without a lock."""

from __future__ import annotations

import argparse
import threading

DEFAULT_THREADS = 4
UNSAFE_INCREMENTS = 20_000_000
SAFE_INCREMENTS = 200_000


class _Target:
    __slots__ = ("value",)

    def __init__(self) -> None:
        self.value = 0


def _validate(threads: int, increments: int) -> None:
    if threads < 1:
        raise ValueError("at least one thread is required")
    if increments < 0:
        raise ValueError("increments must not be negative")


def _run(threads: int, worker) -> None:
    pool = [threading.Thread(target=worker) for _ in range(threads)]
    for t in pool:
        t.start()
    for t in pool:
        t.join()


def unsafe_count(threads, increments) -> int:
    """Increment a shared counter with no protection; updates may be lost."""
    _validate(threads, increments)
    target = _Target()

    def adder() -> None:
        for _ in range(increments):
            current = target.value
            target.value = current + 1

    _run(threads, adder)
    return target.value


def safe_count(threads, increments) -> int:
    """Increment a shared counter guarded by a binary semaphore."""
    _validate(threads, increments)
    target = _Target()
    lock = threading.Semaphore(1)

    def adder() -> None:
        for _ in range(increments):
            with lock:
                target.value = target.value + 1

    _run(threads, adder)
    return target.value


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Count with several threads.")
    parser.add_argument("--unsafe", action="store_true", help="skip the lock")
    parser.add_argument("--threads", type=int, default=DEFAULT_THREADS)
    parser.add_argument("--increments", type=int, default=None)
    args = parser.parse_args(argv)

    increments = args.increments
    if increments is None:
        increments = UNSAFE_INCREMENTS if args.unsafe else SAFE_INCREMENTS
    print(
        f"Used {args.threads} threads, each making {increments} "
        "increments to a counter "
    )
    count = unsafe_count if args.unsafe else safe_count
    value = count(args.threads, increments)
    print(f"Final counter value was {value} (should be {args.threads * increments})")
    return 0
"""One producer and one consumer sharing a single-slot buffer."""

from __future__ import annotations

import argparse
import threading


def expected_total(iterations) -> int:
    """Sum of 1..iterations, the total a correct consumer must reach."""
    return iterations * (iterations + 1) // 2


def _validate(iterations: int) -> None:
    if iterations < 0:
        raise ValueError("iterations must not be negative")


def _run(producer, consumer) -> None:
    threads = [threading.Thread(target=producer), threading.Thread(target=consumer)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()


def produce_consume(iterations) -> int:
    """Pass 1..iterations through the buffer guarded by two semaphores; return the sum."""
    _validate(iterations)
    empty = threading.Semaphore(1)
    full = threading.Semaphore(0)
    buffer = [0]
    total = [0]

    def producer() -> None:
        for produced in range(1, iterations + 1):
            empty.acquire()
            buffer[0] = produced
            full.release()

    def consumer() -> None:
        for _ in range(iterations):
            full.acquire()
            total[0] += buffer[0]
            empty.release()

    _run(producer, consumer)
    return total[0]


def unsafe_produce_consume(iterations) -> int:
    """Same exchange with no synchronisation; the sum depends on timing."""
    _validate(iterations)
    buffer = [0]
    total = [0]

    def producer() -> None:
        for produced in range(1, iterations + 1):
            buffer[0] = produced

    def consumer() -> None:
        for _ in range(iterations):
            total[0] += buffer[0]

    _run(producer, consumer)
    return total[0]


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Producer/consumer over one slot.")
    parser.add_argument("iterations", type=int)
    parser.add_argument("--unsafe", action="store_true", help="skip the semaphores")
    args = parser.parse_args(argv)

    n = args.iterations
    print(f"running for {n} iterations")
    print("main started")
    print("Producer created")
    print("Consumer created")
    run = unsafe_produce_consume if args.unsafe else produce_consume
    total = run(n)
    print(f"after {n} iterations, the total is {total} (should be {expected_total(n)})")
    print("main done")
    return 0
"""Prime sieve as a pipeline: a generator feeds a growing chain of sievers."""

from __future__ import annotations

import argparse
import queue
import threading

_END = None


def _siever(inbox: queue.Queue, primes: list[int], lock: threading.Lock) -> None:
    prime = inbox.get()
    if prime is _END:
        return
    with lock:
        print(f"Siever: {prime} is a prime number.")
        primes.append(prime)

    successor: queue.Queue | None = None
    successor_thread: threading.Thread | None = None
    candidate = inbox.get()
    while candidate is not _END:
        if candidate % prime != 0:
            if successor is None:
                successor = queue.Queue()
                successor_thread = threading.Thread(
                    target=_siever, args=(successor, primes, lock)
                )
                successor_thread.start()
            successor.put(candidate)
        candidate = inbox.get()

    if successor is not None:
        successor.put(_END)
        successor_thread.join()


def sieve(limit) -> list[int]:
    """Return the primes below ``limit`` in the order the pipeline finds them.

    The generator sends 2, 3, ... ``limit - 1`` and then an end signal to the
    first siever. Each siever keeps the first number it receives as its prime
    and forwards to a successor, started on demand, every later number that
    its prime does not divide.
    """
    primes: list[int] = []
    lock = threading.Lock()
    first: queue.Queue = queue.Queue()
    head = threading.Thread(target=_siever, args=(first, primes, lock))
    head.start()
    for candidate in range(2, limit):
        first.put(candidate)
    first.put(_END)
    head.join()
    return primes


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Pipeline prime sieve.")
    parser.add_argument("limit", type=int, help="find primes below this number")
    args = parser.parse_args(argv)
    sieve(args.limit)
    return 0
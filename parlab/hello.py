"""Threads greeting the world, each with its own id or a shared one."""

from __future__ import annotations

import argparse
import random
import threading
import time

DEFAULT_THREADS = 10
DEFAULT_MAX_SLEEP = 5


def hello_threads(count, max_sleep, shared_id) -> list[int]:
    """Start ``count`` threads that print a greeting after a random sleep.

    With ``shared_id`` each thread reads the id from one cell that the main
    thread keeps changing, so the ids reported depend on timing. Returns the
    ids in the order they were printed.
    """
    if count < 0:
        raise ValueError("count must not be negative")
    if max_sleep < 0:
        raise ValueError("max_sleep must not be negative")

    printed: list[int] = []
    out_lock = threading.Lock()
    shared = [0]

    def say_hello(own_id: int) -> None:
        if max_sleep > 0:
            time.sleep(random.randrange(max_sleep))
        ident = shared[0] if shared_id else own_id
        with out_lock:
            print(f"Hello from thread {ident}")
            printed.append(ident)

    pool = []
    for i in range(count):
        shared[0] = i
        t = threading.Thread(target=say_hello, args=(i,))
        pool.append(t)
        t.start()
    shared[0] = count
    for i, t in enumerate(pool):
        shared[0] = i
        t.join()
    shared[0] = count
    return printed


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Say hello from several threads.")
    parser.add_argument("--threads", type=int, default=DEFAULT_THREADS)
    parser.add_argument("--max-sleep", type=int, default=DEFAULT_MAX_SLEEP)
    parser.add_argument(
        "--shared", action="store_true", help="pass the id through a shared cell"
    )
    args = parser.parse_args(argv)

    print("Hello from the main thread")
    hello_threads(args.threads, args.max_sleep, args.shared)
    print("Goodbye from the main thread")
    return 0
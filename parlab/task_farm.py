"""A farmer handing out tasks to a pool of workers and collecting the results."""

from __future__ import annotations

import argparse
import queue
import sys
import threading
import time
from dataclasses import dataclass

MAX_TASKS = 10
DEFAULT_WORKERS = 3
FARMER = 0
WORK_UNIT = 0.001


@dataclass(frozen=True)
class _Message:
    """A single value sent between ranks; ``tag`` is a task id or None to stop."""

    source: int
    tag: int | None
    value: int


def compute(task_value) -> int:
    """Simulate some work proportional to ``task_value % 5`` and return ten times the value."""
    if task_value > 0:
        wait_time = task_value % 5
        if wait_time:
            time.sleep(wait_time * WORK_UNIT)
    return task_value * 10


def _worker(rank: int, inbox: queue.Queue, outbox: queue.Queue) -> None:
    message = inbox.get()
    if message.tag is not None:
        print(
            f" Worker {rank}: Received initial Task ID {message.tag} "
            f"(Value: {message.value}) from Rank {message.source}"
        )
    while message.tag is not None:
        result = compute(message.value)
        print(f" Worker {rank}: Computed result {result} for Task ID {message.tag}")
        outbox.put(_Message(rank, message.tag, result))
        print(f" Worker {rank}: Sent result for Task ID {message.tag} to Farmer")

        message = inbox.get()
        if message.tag is not None:
            print(
                f" Worker {rank}: Received next Task ID {message.tag} "
                f"(Value: {message.value}) from Rank {message.source}"
            )
        else:
            print(
                f" Worker {rank}: Received NO_MORE_TASKS signal from Rank "
                f"{message.source}"
            )
    print(f" Worker {rank}: Exiting.")


def farm(tasks, workers) -> list[int]:
    """Distribute ``tasks`` over ``workers`` threads and return the results in task order.

    Each worker first gets one task, or a stop signal when there are fewer
    tasks than workers. Whenever a result comes back, the worker that sent it
    gets the next unassigned task. Once every result is in, each worker is
    told to stop.
    """
    task_data = list(tasks)
    if workers < 1:
        raise ValueError("at least one worker is required besides the farmer")

    inboxes = {rank: queue.Queue() for rank in range(1, workers + 1)}
    results_box: queue.Queue = queue.Queue()
    pool = [
        threading.Thread(target=_worker, args=(rank, inboxes[rank], results_box))
        for rank in inboxes
    ]
    for t in pool:
        t.start()

    results: dict[int, int] = {}
    pending = iter(enumerate(task_data, start=1))

    def send_next(rank: int) -> bool:
        nxt = next(pending, None)
        if nxt is None:
            return False
        task_id, value = nxt
        print(
            f"Farmer: Sending Task {task_id} (Value: {value}) to Worker Rank {rank}"
        )
        inboxes[rank].put(_Message(FARMER, task_id, value))
        return True

    try:
        print("Farmer: Starting Phase 1 (Initial Task Distribution)...")
        for rank in inboxes:
            if not send_next(rank):
                print(
                    f"Farmer: No initial task for Worker Rank {rank}. "
                    "Sending termination signal."
                )
                inboxes[rank].put(_Message(FARMER, None, 0))
        print("Farmer: Finished Phase 1.")

        print("Farmer: Starting Phase 2 (Dynamic Task Assignment)...")
        while len(results) < len(task_data):
            message = results_box.get()
            print(
                f"Farmer: Received Result {message.value} for Task {message.tag} "
                f"from Worker Rank {message.source}"
            )
            results[message.tag] = message.value
            send_next(message.source)
        print("Farmer: Finished Phase 2.")
    finally:
        print("Farmer: Starting Phase 3 (Termination)...")
        for rank, inbox in inboxes.items():
            print(f"Farmer: Sending Terminate Signal to Worker {rank}")
            inbox.put(_Message(FARMER, None, 0))
        for t in pool:
            t.join()

    return [results[task_id] for task_id in range(1, len(task_data) + 1)]


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Farm tasks out to workers.")
    parser.add_argument("--workers", type=int, default=DEFAULT_WORKERS)
    parser.add_argument("--tasks", type=int, default=MAX_TASKS)
    args = parser.parse_args(argv)

    if args.workers < 1:
        print(
            "Error: This program requires at least 2 processes "
            "(1 farmer, 1+ workers).",
            file=sys.stderr,
        )
        return 1
    farm(range(1, args.tasks + 1), args.workers)
    return 0
"""A reusable counting barrier built on a condition variable."""

from __future__ import annotations

import threading


class Barrier:
    """Block each caller of :meth:`wait` until ``parties`` threads have arrived.

    The barrier can be reused. A round counter guards the wait so that
    spurious wake-ups never release a thread early.
    """

    def __init__(self, parties):
        if parties < 1:
            raise ValueError("a barrier needs at least one party")
        self.parties = parties
        self._cond = threading.Condition()
        self._arrived = 0
        self._round = 0

    @property
    def round(self) -> int:
        """Number of rounds completed so far."""
        with self._cond:
            return self._round

    def wait(self) -> bool:
        """Wait for the other parties; return True in the thread that arrived last."""
        with self._cond:
            self._arrived += 1
            if self._arrived == self.parties:
                self._round += 1
                self._arrived = 0
                self._cond.notify_all()
                return True
            current = self._round
            while self._round == current:
                self._cond.wait()
            return False
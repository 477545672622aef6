"""Round-robin scheduling with a fixed time quantum."""

from __future__ import annotations

from collections import deque

from .scheduler import Scheduler
from .thread import Thread


class RoundRobin(Scheduler):
    """Runs ready threads in arrival order, each for at most ``quantum`` ticks."""

    def __init__(self, quantum: int) -> None:
        self.quantum = quantum
        self.remaining = quantum
        self._queue: deque[Thread] = deque()

    def __len__(self) -> int:
        return len(self._queue)

    def handle_new_thread(self, thread: Thread) -> None:
        self._queue.append(thread)

    def select_thread(self) -> Thread | None:
        if not self._queue:
            return None
        self.remaining = self.quantum
        return self._queue.popleft()

    def handle_thread_block(self, thread: Thread) -> None:
        """Nothing to do: a blocked thread simply leaves the rotation."""

    def handle_thread_done(self, thread: Thread) -> None:
        """Nothing to do: a finished thread simply leaves the rotation."""

    def handle_tick(self, current_thread: Thread | None) -> None:
        if current_thread is None:
            return
        self.remaining -= 1
        if self.remaining == 0:
            current_thread.preempt()
            self._queue.append(current_thread)
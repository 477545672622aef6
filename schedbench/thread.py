"""Simulated threads and their lifecycle states."""

from __future__ import annotations

import enum
import random
from dataclasses import dataclass, field


class ThreadState(enum.Enum):
    """Lifecycle state of a simulated thread."""

    READY = enum.auto()
    RUNNING = enum.auto()
    BLOCKED = enum.auto()
    TERMINATED = enum.auto()


@dataclass(eq=False)
class Thread:
    """A simulated thread that needs CPU time and may block at random.

    ``block_chance`` is the probability of blocking in any one time slice;
    ``avg_block_duration`` and ``sd_block_duration`` shape how long a block
    lasts. ``rng`` supplies the randomness and can be seeded for repeatable runs.
    """

    id: int
    remaining_run_time: int
    block_chance: float
    avg_block_duration: int
    sd_block_duration: int
    arrival_time: int
    state: ThreadState = ThreadState.READY
    rng: random.Random = field(default_factory=random.Random, repr=False)

    def make_ready(self) -> None:
        """Put the thread in the ready state."""
        self.state = ThreadState.READY

    def should_block(self) -> bool:
        """Decide whether the thread blocks in the current time slice."""
        return self.rng.random() < self.block_chance

    def block_time(self) -> int:
        """Draw how many time slices the thread stays blocked.

        The result lies within ``sd_block_duration - 1`` of the average,
        above or below it with equal chance.
        """
        if self.sd_block_duration <= 0:
            raise ValueError("sd_block_duration must be positive")
        sign = 1 if self.rng.randrange(2) == 0 else -1
        return self.avg_block_duration + sign * self.rng.randrange(self.sd_block_duration)

    def preempt(self) -> None:
        """Take the thread off the CPU, leaving it ready to run again."""
        self.state = ThreadState.READY

    def run(self) -> None:
        """Run the thread for one time slice; it may block or finish."""
        if self.should_block():
            self.state = ThreadState.BLOCKED
            return
        self.remaining_run_time -= 1
        if self.remaining_run_time == 0:
            self.state = ThreadState.TERMINATED
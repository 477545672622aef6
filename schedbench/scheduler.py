"""The interface every scheduling policy implements."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .thread import Thread


class Scheduler(ABC):
    """A scheduling policy driven by the simulator."""

    @abstractmethod
    def handle_new_thread(self, thread: Thread) -> None:
        """Accept a thread that has become ready."""

    @abstractmethod
    def select_thread(self) -> Thread | None:
        """Choose the next thread to run, or None if none is ready."""

    @abstractmethod
    def handle_thread_block(self, thread: Thread) -> None:
        """React to a thread blocking."""

    @abstractmethod
    def handle_thread_done(self, thread: Thread) -> None:
        """React to a thread finishing."""

    @abstractmethod
    def handle_tick(self, current_thread: Thread | None) -> None:
        """Do per-time-slice bookkeeping for the running thread, if any."""
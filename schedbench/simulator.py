"""Discrete time-slice simulation of a scheduler."""

from __future__ import annotations

import enum
import heapq
import itertools
from dataclasses import dataclass

from .scheduler import Scheduler
from .thread import Thread, ThreadState


class EventType(enum.Enum):
    """Kinds of event the simulator can process."""

    THREAD_ARRIVAL = enum.auto()
    TICK = enum.auto()


@dataclass(frozen=True, eq=False)
class Event:
    """Something that happens at a given time slice."""

    time: int
    type: EventType
    thread: Thread | None = None


class Simulator:
    """Advances time slice by slice, feeding events and ticks to a scheduler."""

    def __init__(self, scheduler: Scheduler) -> None:
        self.scheduler = scheduler
        self.current_thread: Thread | None = None
        self.current_time = 0
        self._events: list[tuple[int, int, Event]] = []
        self._order = itertools.count()

    def add_event(self, event: Event) -> None:
        """Queue an event; events come out earliest first."""
        heapq.heappush(self._events, (event.time, next(self._order), event))

    def _process_due_events(self) -> None:
        while self._events:
            time, _, event = self._events[0]
            if time < self.current_time:
                raise RuntimeError(
                    f"event at time {time} lies before current time {self.current_time}"
                )
            if time != self.current_time:
                return
            heapq.heappop(self._events)
            if event.type is EventType.THREAD_ARRIVAL:
                event.thread.make_ready()
                self.scheduler.handle_new_thread(event.thread)

    def _run_current(self) -> None:
        thread = self.current_thread
        if thread.state is ThreadState.RUNNING:
            raise RuntimeError("current thread is unexpectedly in the running state")
        thread.run()
        if thread.state is ThreadState.BLOCKED:
            # The thread comes back once its block time has passed.
            self.add_event(
                Event(self.current_time + thread.block_time(), EventType.THREAD_ARRIVAL, thread)
            )
            self.current_thread = None
        elif thread.state is ThreadState.READY:
            self.scheduler.handle_new_thread(thread)
            self.current_thread = self.scheduler.select_thread()
        elif thread.state is ThreadState.TERMINATED:
            self.current_thread = None

    def simulate_events(self) -> None:
        """Run until no events are pending and no thread is running."""
        while self._events or self.current_thread is not None:
            self.current_time += 1
            self._process_due_events()
            if self.current_thread is None:
                self.current_thread = self.scheduler.select_thread()
            else:
                self._run_current()
            self.scheduler.handle_tick(self.current_thread)
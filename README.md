# schedbench

A small discrete-time simulator for trying out CPU thread schedulers.

The simulator advances time one tick at a time. Threads arrive at set times, run
for a number of ticks and may block at random. A blocked thread is queued to
arrive again after its block time has passed. A scheduler decides which ready
thread runs next.

## Installing

```
pip install .
```

## Command line

```
schedbench
```

This sets up a round-robin scheduler with a quantum of 10, prints the banner
`Scheduler Benchmarker` and exits with status 0. It takes no options beyond
`--help`.

## Library use

```python
from schedbench.thread import Thread
from schedbench.round_robin import RoundRobin
from schedbench.simulator import Simulator, Event, EventType

simulator = Simulator(RoundRobin(4))
for thread in (
    Thread(id=1, remaining_run_time=5, block_chance=0.0,
           avg_block_duration=3, sd_block_duration=1, arrival_time=1),
    Thread(id=2, remaining_run_time=3, block_chance=0.1,
           avg_block_duration=3, sd_block_duration=1, arrival_time=2),
):
    simulator.add_event(Event(thread.arrival_time, EventType.THREAD_ARRIVAL, thread))

simulator.simulate_events()
print(simulator.current_time)
```

`simulate_events` runs until no events are pending and no thread is running.
Afterwards `simulator.current_time` holds the last tick simulated, and each
thread's `state` and `remaining_run_time` show where it ended up.

Each `Thread` draws its randomness from its `rng` field, a `random.Random`.
Pass a seeded one, for example `rng=random.Random(42)`, for repeatable runs.

### Pieces

- `schedbench.thread`
  - `Thread` holds the remaining run time and the blocking behaviour.
  - `ThreadState` has the states `READY`, `RUNNING`, `BLOCKED` and `TERMINATED`.
  - `Thread.run()` runs one tick. The thread blocks with probability
    `block_chance`; if it does not block, its remaining run time goes down by
    one, and it terminates when that reaches zero.
  - `Thread.block_time()` returns a block length that lies within
    `sd_block_duration - 1` of `avg_block_duration`. It raises `ValueError` if
    `sd_block_duration` is not positive.
- `schedbench.scheduler`
  - The abstract `Scheduler` base class. A scheduler implements
    `handle_new_thread`, `select_thread`, `handle_thread_block`,
    `handle_thread_done` and `handle_tick`.
- `schedbench.round_robin`
  - `RoundRobin` is a first-in, first-out scheduler with a fixed time quantum.
    When the running thread uses up its quantum, it is preempted and put at the
    back of the queue.
  - `len(scheduler)` gives the number of queued threads.
- `schedbench.simulator`
  - `Simulator`, `Event` and `EventType`.
  - Events come out earliest first. Events with the same time come out in the
    order they were added.
  - `simulate_events` raises `RuntimeError` if it finds an event queued for a
    time that has already passed.
- `schedbench.cli`
  - `main(argv=None)` is the entry point of the `schedbench` command.

To add a scheduling policy, subclass `Scheduler` and pass an instance to `Simulator`.

## What it does not do

- The package collects no metrics. Nothing records wait, turnaround or blocked time.
- There is no loader for thread sets from files. Threads and events are built in code.
- The `schedbench` command runs no simulation.
- The simulator never calls `handle_thread_block` or `handle_thread_done`.
  `RoundRobin` does nothing in either.

## Tests

```
pip install ".[test]"
pytest
```
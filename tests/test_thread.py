import random

import pytest

from schedbench.thread import Thread, ThreadState


def make_thread(**overrides):
    config = dict(
        id=1,
        remaining_run_time=3,
        block_chance=0.0,
        avg_block_duration=5,
        sd_block_duration=2,
        arrival_time=1,
    )
    config.update(overrides)
    return Thread(**config)


def test_new_thread_is_ready():
    thread = make_thread()
    assert thread.state is ThreadState.READY


def test_run_without_blocking_counts_down_to_termination():
    thread = make_thread(remaining_run_time=3)
    thread.run()
    assert thread.remaining_run_time == 2
    assert thread.state is ThreadState.READY
    thread.run()
    thread.run()
    assert thread.remaining_run_time == 0
    assert thread.state is ThreadState.TERMINATED


def test_certain_block_chance_blocks_without_progress():
    thread = make_thread(block_chance=1.0, remaining_run_time=3)
    thread.run()
    assert thread.state is ThreadState.BLOCKED
    assert thread.remaining_run_time == 3


def test_zero_block_chance_never_blocks():
    thread = make_thread(block_chance=0.0, rng=random.Random(7))
    assert not any(thread.should_block() for _ in range(200))


def test_make_ready_after_block():
    thread = make_thread(block_chance=1.0)
    thread.run()
    thread.make_ready()
    assert thread.state is ThreadState.READY


def test_preempt_sets_ready():
    thread = make_thread()
    thread.state = ThreadState.RUNNING
    thread.preempt()
    assert thread.state is ThreadState.READY


def test_block_time_stays_near_average():
    thread = make_thread(avg_block_duration=10, sd_block_duration=3, rng=random.Random(1))
    samples = {thread.block_time() for _ in range(500)}
    assert samples <= set(range(8, 13))
    assert min(samples) < 10 < max(samples)


def test_block_time_with_unit_deviation_is_the_average():
    thread = make_thread(avg_block_duration=5, sd_block_duration=1)
    assert all(thread.block_time() == 5 for _ in range(50))


@pytest.mark.parametrize("deviation", [0, -2])
def test_block_time_requires_positive_deviation(deviation):
    thread = make_thread(sd_block_duration=deviation)
    with pytest.raises(ValueError):
        thread.block_time()


def test_seeded_threads_behave_identically():
    first = make_thread(block_chance=0.5, rng=random.Random(42))
    second = make_thread(block_chance=0.5, rng=random.Random(42))
    draws_first = [first.should_block() for _ in range(30)]
    draws_second = [second.should_block() for _ in range(30)]
    assert draws_first == draws_second
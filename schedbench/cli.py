"""Command-line entry point for the scheduler benchmarker."""

from __future__ import annotations

import argparse

from .round_robin import RoundRobin
from .simulator import Simulator

DEFAULT_QUANTUM = 10


def main(argv: list[str] | None = None) -> int:
    """Set up a round-robin simulator and announce the benchmarker."""
    parser = argparse.ArgumentParser(
        prog="schedbench", description="Benchmark CPU scheduling policies."
    )
    parser.parse_args(argv)
    Simulator(RoundRobin(DEFAULT_QUANTUM))
    print("Scheduler Benchmarker")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
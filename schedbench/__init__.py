"""Discrete-time simulator for benchmarking CPU thread schedulers."""

__version__ = "0.1.0"
__all__ = ["thread", "scheduler", "round_robin", "simulator", "cli"]
"""Monitors that receive log values emitted by the layout phases."""

from __future__ import annotations

import queue
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

KEY_SKIP = "skip"
KEY_SELF_LOOP = "self-loop"

FilterFn = Callable[[int, str, str], bool]


class Monitor(ABC):
    """Receives values logged by a phase's algorithm under a key."""

    @abstractmethod
    def log(self, phase: int, alg: str, key: str, val: Any) -> None:
        """Record val logged by algorithm alg of the given phase under key."""


class QueueMonitor(Monitor):
    """Puts every logged value on a queue."""

    def __init__(self, q: queue.Queue) -> None:
        self.queue = q

    def log(self, phase: int, alg: str, key: str, val: Any) -> None:
        self.queue.put(val)


@dataclass(frozen=True)
class FilteredMonitor(Monitor):
    """Forwards to the wrapped monitor only what the filter accepts."""

    monitor: Monitor
    filter_fn: FilterFn

    def log(self, phase: int, alg: str, key: str, val: Any) -> None:
        if self.filter_fn(phase, alg, key):
            self.monitor.log(phase, alg, key, val)


class FuncMonitor(Monitor):
    """Calls a function with every logged entry."""

    def __init__(self, fn: Callable[[int, str, str, Any], Any]) -> None:
        self.fn = fn

    def log(self, phase: int, alg: str, key: str, val: Any) -> None:
        self.fn(phase, alg, key, val)


def new_filtered_queue(q: queue.Queue, filter_fn: FilterFn) -> Monitor:
    return wrap_filter(QueueMonitor(q), filter_fn)


def match_all(phase: int, alg: str, key: str) -> FilterFn:
    """Filter that accepts exactly the given phase, algorithm and key."""

    def accept(p: int, a: str, k: str) -> bool:
        return p == phase and a == alg and k == key

    return accept


def wrap_filter(monitor: Monitor, filter_fn: FilterFn) -> Monitor:
    return FilteredMonitor(monitor, filter_fn)


def new_func(fn: Callable[[int, str, str, Any], Any]) -> Monitor:
    return FuncMonitor(fn)


@dataclass
class _Active:
    monitor: Monitor | None = None
    phase: int = 0
    alg: str = ""


_active = _Active()


def set_monitor(monitor: Monitor | None) -> None:
    """Install the monitor that receives log calls; None leaves the current one."""
    if monitor is not None:
        _active.monitor = monitor


def prefix_for(phase: int, alg: str) -> None:
    """Set the phase and algorithm attached to subsequent log calls."""
    if _active.monitor is not None:
        _active.phase = phase
        _active.alg = alg


def reset() -> None:
    """Remove the installed monitor and clear the prefix."""
    if _active.monitor is not None:
        _active.monitor = None
        _active.phase = 0
        _active.alg = ""


def log(key: str, val: Any) -> None:
    """Send val to the installed monitor, if any."""
    if _active.monitor is not None:
        _active.monitor.log(_active.phase, _active.alg, key, val)
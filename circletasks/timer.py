"""Timing helpers built on a high-resolution monotonic tick counter."""

from __future__ import annotations

import re
import time

_DEFAULT_SECONDS_PER_TICK = 1e-9

_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_CPU_MHZ_LINE = re.compile(
    r"cpu\s*MHz\s*:\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
)


def _leading_float(text: str) -> float | None:
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(1)) if match else None


def _scale(unit_seconds: float, frequency: float) -> float:
    if frequency == 0:
        return float("inf")
    return unit_seconds / frequency


def parse_cpuinfo(text: str) -> float:
    """Return seconds per CPU cycle advertised in /proc/cpuinfo-style text.

    The clock rate after the ``@`` in a ``model name`` line is preferred,
    since it does not move with frequency scaling; otherwise the first
    ``cpu MHz`` line is used. Falls back to one nanosecond.
    """
    for line in text.splitlines():
        if "model name" in line:
            at = line.find("@")
            if at < 0:
                continue
            after_at = line[at + 1:]
            ghz = after_at.find("GHz")
            mhz = after_at.find("MHz")
            if ghz >= 0:
                value = _leading_float(after_at[:ghz])
                if value is not None:
                    return _scale(1e-9, value)
            elif mhz >= 0:
                value = _leading_float(after_at[:mhz])
                if value is not None:
                    return _scale(1e-6, value)
        else:
            match = _CPU_MHZ_LINE.match(line)
            if match:
                return _scale(1e-6, float(match.group(1)))
    return _DEFAULT_SECONDS_PER_TICK


def current_ticks() -> int:
    """Return the current tick count; zero is an arbitrary point in the past."""
    return time.perf_counter_ns()


def seconds_per_tick() -> float:
    """Return the length of one tick in seconds."""
    return _DEFAULT_SECONDS_PER_TICK


def ticks_per_second() -> float:
    """Return the number of ticks in one second."""
    return 1.0 / seconds_per_tick()


def ms_per_tick() -> float:
    """Return the length of one tick in milliseconds."""
    return seconds_per_tick() * 1000.0


def tick_units() -> str:
    """Return the name of the tick unit."""
    return "ns"


def current_seconds() -> float:
    """Return the current time in seconds from an arbitrary origin."""
    return current_ticks() * seconds_per_tick()
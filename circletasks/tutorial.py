"""Small demonstrations of a mutex-protected counter and a condition variable."""

from __future__ import annotations

import argparse
import threading
import time

_RULE = "=" * 62


class Counter:
    """An integer counter guarded by a lock."""

    def __init__(self) -> None:
        self.value = 0
        self._lock = threading.Lock()

    def increment(self, times: int) -> None:
        """Add one to the counter ``times`` times, taking the lock for each step."""
        for _ in range(times):
            with self._lock:
                self.value += 1


def mutex_example(num_threads: int = 8, iterations: int = 10000) -> int:
    """Let ``num_threads`` threads each increment a shared counter; return its value."""
    if num_threads < 1:
        raise ValueError(f"num_threads must be at least 1, got {num_threads}")
    print(_RULE)
    print(f"Starting {num_threads} threads to increment counter...")
    counter = Counter()
    threads = [threading.Thread(target=counter.increment, args=(iterations,))
               for _ in range(num_threads)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    print(f"Final counter value: {counter.value}...")
    print(_RULE)
    return counter.value


class _ThreadState:
    def __init__(self, num_waiting_threads: int) -> None:
        self.condition = threading.Condition()
        self.counter = 0
        self.num_waiting_threads = num_waiting_threads


def _signal(state: _ThreadState) -> None:
    # Keep waking waiters until every one of them has reported back.
    while True:
        with state.condition:
            if state.counter >= state.num_waiting_threads:
                return
            state.condition.notify_all()
        time.sleep(0)


def _wait(state: _ThreadState) -> None:
    with state.condition:
        state.condition.wait()
        state.counter += 1
        print("Lock re-acquired after wait()...")


def condition_variable_example(num_threads: int = 3) -> int:
    """Run one signalling thread and ``num_threads - 1`` waiters.

    Returns the number of waiters that were woken.
    """
    if num_threads < 1:
        raise ValueError(f"num_threads must be at least 1, got {num_threads}")
    print(_RULE)
    print(f"Starting {num_threads} threads for signal-and-waiting...")
    state = _ThreadState(num_threads - 1)
    threads = [threading.Thread(target=_signal, args=(state,))]
    threads += [threading.Thread(target=_wait, args=(state,))
                for _ in range(num_threads - 1)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    print(_RULE)
    return state.counter


def main(argv: list[str] | None = None) -> int:
    """Run both demonstrations."""
    parser = argparse.ArgumentParser(
        prog="circletasks-tutorial",
        description="Demonstrate a mutex and a condition variable.",
    )
    parser.parse_args(argv)
    mutex_example()
    condition_variable_example()
    return 0
"""Workers that share a counter guarded by a lock."""

from __future__ import annotations

import argparse
import random
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Optional, Sequence


class Counter:
    """An integer counter that is safe to change from several threads."""

    def __init__(self, value: int = 0) -> None:
        self.value = value
        self.lock = threading.RLock()

    def increment(self) -> int:
        """Add one and return the new value."""
        with self.lock:
            self.value += 1
            return self.value


def _work(counter: Counter, max_sleep: int) -> None:
    with counter.lock:
        print(f"input counter: {counter.value}")
        value = counter.increment()
        time.sleep(random.randrange(max_sleep))
        if value == 5:
            print("Found counter == 5")
        print(f"output counter: {value}")


def run_workers(workers: int = 10, max_sleep: int = 5) -> int:
    """Run workers that each bump the counter once; return its final value.

    Each worker holds the lock while it sleeps for a random whole number of
    seconds below max_sleep.
    """
    if max_sleep < 1:
        raise ValueError(f"max_sleep must be at least 1, got {max_sleep}")
    counter = Counter()
    if workers <= 0:
        return counter.value
    with ThreadPoolExecutor(max_workers=workers) as pool:
        futures = [pool.submit(_work, counter, max_sleep) for _ in range(workers)]
        for future in futures:
            future.result()
    return counter.value


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the workers and print the final count; returns the exit status."""
    parser = argparse.ArgumentParser(prog="mutex-demo", description="Shared counter demo.")
    parser.add_argument("--workers", type=int, default=10, help="number of workers")
    parser.add_argument(
        "--max-sleep", type=int, default=5, help="sleep below this many seconds"
    )
    args = parser.parse_args(argv)
    try:
        total = run_workers(args.workers, args.max_sleep)
    except ValueError as exc:
        print(f"Error: {exc}")
        return 1
    print(f"Counter: {total}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
"""Demonstration of pausing, resuming and prioritised submission."""

from __future__ import annotations

import time
from typing import Sequence

from vcpool.synclogger import println
from vcpool.threadpool import ThreadPool


def normal_func(text: str, value: int) -> bool:
    """Print the arguments, then simulate a second of work."""
    println("normal_func", " ", text, " ", value)
    time.sleep(1.0)
    return True


def high_func(value: bool) -> None:
    """Print a boolean in lower-case form."""
    println("high_func", str(bool(value)).lower())


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demonstration and return the exit status."""
    with ThreadPool(2) as pool:
        text = "Hello World"
        for n in range(4):
            pool.detach(normal_func, text, n)
        time.sleep(0.005)

        pool.pause(True)
        println("wait: ", pool.waiting_tasks(), " running: ", pool.running_tasks())
        time.sleep(2.0)
        # Queued tasks stay queued while paused.
        println("wait: ", pool.waiting_tasks(), " running: ", pool.running_tasks())

        pool.pause(False)

        future = pool.submit(high_func, True, priority=0)
        future.result()

        println("wait: ", pool.waiting_tasks(), " running: ", pool.running_tasks())
        pool.wait()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
"""A fixed-size thread pool with pause, stop, waiting and optional priorities."""

from __future__ import annotations

import functools
import heapq
import itertools
import logging
import os
import threading
import time
from collections import deque
from concurrent.futures import Future
from dataclasses import dataclass, field
from typing import Any, Callable

DEFAULT_PRIORITY = 9
"""Priority given to tasks submitted without one; smaller values run first."""

_log = logging.getLogger(__name__)


@dataclass(order=True)
class _Task:
    priority: int
    sequence: int
    func: Callable[[], Any] = field(compare=False)
    future: Future | None = field(compare=False, default=None)

    def run(self) -> None:
        if self.future is None:
            try:
                self.func()
            except Exception:
                _log.exception("detached task raised")
            return
        if not self.future.set_running_or_notify_cancel():
            return
        try:
            result = self.func()
        except BaseException as exc:
            self.future.set_exception(exc)
        else:
            self.future.set_result(result)


def _detect_thread_count(threads: int | None) -> int:
    max_threads = os.cpu_count() or 1
    if threads is None:
        return max_threads
    if threads < 0:
        raise ValueError(f"thread count must not be negative: {threads}")
    if threads == 0:
        return 1
    return min(threads, max_threads)


class ThreadPool:
    """Runs submitted callables on a fixed set of worker threads.

    The number of workers is capped at the CPU count; zero means one.
    With ``use_priority`` the queue orders tasks by priority (smaller
    first), otherwise tasks run in submission order.
    """

    def __init__(self, threads: int | None = None, use_priority: bool = False) -> None:
        self._thread_count = _detect_thread_count(threads)
        self._use_priority = use_priority
        self._lock = threading.Lock()
        self._task_created = threading.Condition(self._lock)
        self._task_done = threading.Condition(self._lock)
        self._queue: list[_Task] | deque[_Task] = [] if use_priority else deque()
        self._sequence = itertools.count()
        self._running_count = self._thread_count
        self._is_running = True
        self._paused = False
        self._threads = [
            threading.Thread(target=self._worker, name=f"vcpool-worker-{n}", daemon=True)
            for n in range(self._thread_count)
        ]
        for thread in self._threads:
            thread.start()

    def detach(self, func: Callable[..., Any], *args: Any, priority: int = DEFAULT_PRIORITY, **kwargs: Any) -> None:
        """Queue ``func(*args, **kwargs)`` without a way to collect its result."""
        self._enqueue(priority, functools.partial(func, *args, **kwargs), None)

    def submit(self, func: Callable[..., Any], *args: Any, priority: int = DEFAULT_PRIORITY, **kwargs: Any) -> Future:
        """Queue ``func(*args, **kwargs)`` and return a future for its result."""
        future: Future = Future()
        self._enqueue(priority, functools.partial(func, *args, **kwargs), future)
        return future

    def running_tasks(self) -> int:
        """Number of tasks currently executing."""
        with self._lock:
            return self._running_count

    def waiting_tasks(self) -> int:
        """Number of tasks queued but not yet started."""
        with self._lock:
            return len(self._queue)

    def stop(self) -> None:
        """Stop the pool, discarding queued tasks; running tasks finish."""
        with self._lock:
            self._is_running = False
            for task in self._queue:
                if task.future is not None:
                    task.future.cancel()
            self._queue.clear()
            self._task_created.notify_all()
            self._task_done.notify_all()

    def pause(self, paused: bool) -> None:
        """Pause (True) or resume (False) taking tasks from the queue."""
        with self._lock:
            self._paused = bool(paused)
            self._task_created.notify_all()
            self._task_done.notify_all()

    def is_paused(self) -> bool:
        """Whether the pool is paused."""
        return self._paused

    def wait(self) -> None:
        """Block until no task runs and the queue is empty or paused."""
        with self._lock:
            self._task_done.wait_for(self._idle)

    def wait_for(self, timeout: float) -> bool:
        """Like :meth:`wait`, giving up after ``timeout`` seconds; True if idle."""
        with self._lock:
            return self._task_done.wait_for(self._idle, max(0.0, timeout))

    def wait_until(self, deadline: float) -> bool:
        """Like :meth:`wait`, giving up at ``deadline`` on the :func:`time.monotonic` clock."""
        return self.wait_for(deadline - time.monotonic())

    def close(self) -> None:
        """Stop the pool and join its worker threads."""
        self.stop()
        current = threading.current_thread()
        for thread in self._threads:
            if thread is not current:
                thread.join()

    def __enter__(self) -> ThreadPool:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _idle(self) -> bool:
        return not self._is_running or (
            (self._paused or not self._queue) and self._running_count == 0
        )

    def _enqueue(self, priority: int, func: Callable[[], Any], future: Future | None) -> None:
        with self._lock:
            if not self._is_running:
                raise RuntimeError("cannot add tasks to a stopped thread pool")
            task = _Task(priority, next(self._sequence), func, future)
            if self._use_priority:
                heapq.heappush(self._queue, task)
            else:
                self._queue.append(task)
            self._task_created.notify()

    def _pop(self) -> _Task:
        if self._use_priority:
            return heapq.heappop(self._queue)
        return self._queue.popleft()

    def _worker(self) -> None:
        while True:
            with self._lock:
                self._running_count -= 1
                if (self._paused or not self._queue) and self._running_count == 0:
                    self._task_done.notify_all()
                self._task_created.wait_for(
                    lambda: not self._is_running or (not self._paused and bool(self._queue))
                )
                if not self._is_running:
                    return
                task = self._pop()
                self._running_count += 1
            task.run()
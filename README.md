# vcpool

vcpool is a thread pool that runs Python callables on a fixed set of worker threads.

- **Fire and forget:** `ThreadPool.detach` queues a callable and returns nothing. If a detached task raises, the exception is logged through the `vcpool.threadpool` logger.
- **Futures:** `ThreadPool.submit` queues a callable and returns a `concurrent.futures.Future`. The future carries the callable's result or its exception.
- **Priorities:** if a pool is built with `use_priority=True`, tasks with a smaller `priority` run first. The default priority is 9, and tasks with equal priority run in the order they were submitted. Without `use_priority`, tasks run first in, first out, and the priority is ignored.
- **Pause and resume:** `pause(True)` stops workers from taking tasks from the queue. Tasks that are already running finish. `pause(False)` resumes. `is_paused()` reports the current state.
- **Stop:** `stop()` drops every queued task and cancels the futures of those tasks. The workers exit once their current task is done. Adding a task to a stopped pool raises `RuntimeError`.
- **Waiting:**
  - `wait()` blocks until no task is running and the queue is either empty or paused. It also returns once the pool has been stopped.
  - `wait_for(timeout)` blocks for at most `timeout` seconds.
  - `wait_until(deadline)` blocks until a deadline on the `time.monotonic()` clock.
  - Both bounded waits return `True` if the pool became idle in time.
- **Counts:** `running_tasks()` gives the number of tasks executing now. `waiting_tasks()` gives the number still queued.
- **Cleanup:** `close()` stops the pool and joins its threads. A pool can also be used as a context manager, which calls `close()` on exit.

## Installation

```
pip install .
```

To install with the test dependencies:

```
pip install .[test]
```

## Usage

```python
from vcpool.threadpool import ThreadPool

def add(a, b):
    return a + b

with ThreadPool(4) as pool:
    pool.detach(print, "runs in the background")
    future = pool.submit(add, 2, 3)
    print(future.result())          # 5

    pool.pause(True)                # queued tasks are held back
    print(pool.waiting_tasks(), pool.running_tasks())
    pool.pause(False)

    finished = pool.wait_for(1.5)   # True if all work finished within 1.5 s
    pool.wait()                     # block until the queue is drained
```

Keyword arguments other than `priority` are passed on to the callable.

### Priorities

```python
from vcpool.threadpool import ThreadPool

pool = ThreadPool(2, use_priority=True)
pool.detach(print, "urgent", priority=0)
pool.detach(print, "whenever")       # default priority 9
pool.wait()
pool.close()
```

### Thread count

The number of worker threads works as follows:

- With no count given, it is the machine's CPU count.
- A count larger than the CPU count is capped at the CPU count.
- A count of 0 gives one worker thread.
- A negative count raises `ValueError`.

## Synchronised printing

`vcpool.synclogger.write` writes the string forms of its arguments as a single block, with no separators, to `sys.stdout` or to a stream given as `file`. `vcpool.synclogger.println` does the same and adds a newline. Both functions hold one shared lock while they write, so output from several threads does not interleave.

```python
from vcpool.synclogger import println
println("wait: ", 3, " running: ", 2)
```

## Demo

Run the bundled demo:

```
vcpool-demo
```

The demo works in these steps:

1. It queues four one-second tasks on a pool of two threads.
2. It pauses the pool.
3. It prints the waiting and running counts twice, two seconds apart.
4. It resumes the pool and submits a task with priority 0.
5. It waits for all the work to finish.
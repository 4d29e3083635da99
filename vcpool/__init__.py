"""A thread pool with priorities, pausing, stopping and bounded waits, plus synchronised printing."""

__version__ = "0.1.0"
__all__ = ["synclogger", "threadpool", "usecases"]
"""Thread-safe printing helpers sharing one process-wide lock."""

from __future__ import annotations

import sys
import threading
from typing import Any, TextIO

_stream_lock = threading.Lock()


def write(*args: Any, file: TextIO | None = None) -> None:
    """Write the string forms of ``args``, joined without separators, atomically."""
    stream = sys.stdout if file is None else file
    text = "".join(str(item) for item in args)
    with _stream_lock:
        stream.write(text)
        stream.flush()


def println(*args: Any, file: TextIO | None = None) -> None:
    """Like :func:`write`, followed by a newline."""
    write(*args, "\n", file=file)
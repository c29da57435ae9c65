"""Log device: the resource a ``StreamLogger`` writes into.

Wraps either an existing text stream (``sys.stdout``, ``io.StringIO``...)
or a path opened in append mode. Only devices that opened their own file
declare ``file_backed = True``; shared streams are never closed by the
multiplexer.
"""

from __future__ import annotations

import os
import threading
from pathlib import Path
from typing import IO


class LogDevice:
    """Serialized writer over a stream or an owned file.

    Parameters
    ----------
    target:
        A writable text stream, or a filesystem path to append to.
    """

    def __init__(self, target: IO[str] | Path | str) -> None:
        self._lock = threading.Lock()
        if isinstance(target, (str, Path)):
            self.filename: Path | None = Path(target)
            self.filename.parent.mkdir(parents=True, exist_ok=True)
            self.dev: IO[str] = open(self.filename, "a", encoding="utf-8")
            self._owned = True
        else:
            self.filename = None
            self.dev = target
            self._owned = False

    @property
    def file_backed(self) -> bool:
        return self._owned

    @property
    def closed(self) -> bool:
        return bool(getattr(self.dev, "closed", False))

    def write(self, message: str) -> None:
        with self._lock:
            self.dev.write(message)

    def flush(self) -> None:
        with self._lock:
            if not self.closed:
                self.dev.flush()

    def stat(self) -> os.stat_result:
        """``os.fstat`` of the underlying file descriptor."""
        return os.fstat(self.dev.fileno())

    def close(self) -> None:
        """Close the owned file; borrowed streams are left open."""
        with self._lock:
            if self._owned and not self.closed:
                self.dev.close()

    def __repr__(self) -> str:
        target = self.filename if self.filename is not None else type(self.dev).__name__
        return f"LogDevice({target!s})"

"""JSONL tag poster: appends ``post(tag, payload)`` calls as JSON lines.

Line layout: ``{"tag": ..., "time": <ISO 8601 UTC>, **payload}``

This is the tag-poster kind of sink: it has no severity threshold, no
formatter, and no ``logdev``. Whoever creates it is responsible for
calling ``close()``.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import IO, Any

logger = logging.getLogger(__name__)


class JsonlTagPoster:
    """Writes tagged payloads as JSON lines.

    Parameters
    ----------
    target:
        A writable text stream, or a path opened in append mode.
    """

    def __init__(self, target: IO[str] | Path | str) -> None:
        if isinstance(target, (str, Path)):
            self.path: Path | None = Path(target)
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self._fh: IO[str] = open(self.path, "a", encoding="utf-8")
            self._owned = True
        else:
            self.path = None
            self._fh = target
            self._owned = False

    def post(self, tag: str, payload: dict[str, Any]) -> bool:
        record = {"tag": tag, "time": datetime.now(timezone.utc).isoformat()}
        record.update(payload)
        self._fh.write(json.dumps(record, default=str) + "\n")
        self._fh.flush()
        logger.debug("JsonlTagPoster: posted tag %s", tag)
        return True

    def close(self) -> None:
        if self._owned and not self._fh.closed:
            self._fh.close()

    def read_records(self) -> list[dict[str, Any]]:
        """Parse every line written to the backing file so far."""
        if self.path is None or not self.path.exists():
            return []
        with open(self.path, encoding="utf-8") as fh:
            return [json.loads(line) for line in fh if line.strip()]

from __future__ import annotations

import json
import threading
import time
from dataclasses import asdict
from pathlib import Path
from typing import Any


class EventLog:
    """Append-only audit log of basket and redemption notifications."""

    def __init__(self, data_dir: str | None = None, filename: str = "redemption_events.jsonl"):
        self.path: Path | None = None
        if data_dir is not None:
            self.path = Path(data_dir) / filename
            self.path.parent.mkdir(parents=True, exist_ok=True)
        self._lock = threading.Lock()
        self._records: list[Any] = []

    def emit(self, event: Any) -> None:
        payload = {
            "ts": time.time(),
            "event": event.name,
            **asdict(event),
        }
        row = json.dumps(payload, separators=(",", ":"), ensure_ascii=True)
        with self._lock:
            if self.path is not None:
                with self.path.open("a", encoding="utf-8") as f:
                    f.write(row + "\n")
            self._records.append(event)

    def records(self) -> tuple[Any, ...]:
        with self._lock:
            return tuple(self._records)

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from redemptions.domain.errors import ReentrancyError


class TransactionScope:
    """Serializes mutating calls and undoes participant writes when one fails.

    Every participant exposes ``checkpoint() -> state`` and ``rollback(state)``.
    A call made from the thread already inside the scope is rejected rather than
    allowed to observe half-applied state.
    """

    def __init__(self, *participants: Any):
        self._participants = participants
        self._lock = threading.Lock()
        self._owner: int | None = None

    @property
    def active(self) -> bool:
        return self._owner is not None

    @contextmanager
    def atomic(self, operation: str) -> Iterator[None]:
        me = threading.get_ident()
        if self._owner == me:
            raise ReentrancyError(f"{operation} called while another operation is in progress")
        with self._lock:
            self._owner = me
            try:
                saved = [(p, p.checkpoint()) for p in self._participants]
                try:
                    yield
                except BaseException:
                    for p, state in reversed(saved):
                        p.rollback(state)
                    raise
            finally:
                self._owner = None

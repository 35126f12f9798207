"""Issuing player IDs."""

from itertools import count
from threading import Lock
from typing import Protocol


class IdGenerator(Protocol):
    def next_id(self) -> int: ...


class SequentialIdGenerator:
    """Hands out increasing integers, starting at `start`. Safe to share between threads."""

    def __init__(self, start: int = 0) -> None:
        self._counter = count(start)
        self._lock = Lock()

    def next_id(self) -> int:
        with self._lock:
            return next(self._counter)

from __future__ import annotations
from collections import deque
from typing import Deque, NamedTuple, Set

from lightsout_core.moves import Move, PathMoves


class SearchRecord(NamedTuple):
    depth: int
    move: Move
    board: int
    played: PathMoves


class Frontier:
    """FIFO queue of search records (level order).

    With dedup=True a record is dropped when a record for the same board is
    still waiting in the queue. The earlier record is the one the search would
    pop first anyway, so only memory use changes.
    """
    def __init__(self, dedup: bool = False) -> None:
        self._q: Deque[SearchRecord] = deque()
        self._queued: Set[int] = set()
        self.dedup = dedup
        self.pushed = 0

    def push(self, record: SearchRecord) -> bool:
        if self.dedup:
            if record.board in self._queued:
                return False
            self._queued.add(record.board)
        self._q.append(record)
        self.pushed += 1
        return True

    def pop(self) -> SearchRecord:
        record = self._q.popleft()
        if self.dedup:
            self._queued.discard(record.board)
        return record

    def __len__(self) -> int:
        return len(self._q)

    def __bool__(self) -> bool:
        return bool(self._q)

from __future__ import annotations
from typing import Dict, Optional, Set, Tuple

from lightsout_core.moves import Move


class VisitedSet:
    """Boards already expanded, at any depth. Append-only for one search."""
    def __init__(self) -> None:
        self._seen: Set[int] = set()

    def add(self, board: int) -> bool:
        """True if the board was not seen before."""
        if board in self._seen:
            return False
        self._seen.add(board)
        return True

    def __contains__(self, board: int) -> bool:
        return board in self._seen

    def __len__(self) -> int:
        return len(self._seen)


class PredecessorIndex:
    """Move that first produced each (board, depth); first seen wins."""
    def __init__(self) -> None:
        self._moves: Dict[Tuple[int, int], Move] = {}

    def record(self, board: int, depth: int, move: Move) -> bool:
        key = (board, depth)
        if key in self._moves:
            return False
        self._moves[key] = move
        return True

    def lookup(self, board: int, depth: int) -> Optional[Move]:
        return self._moves.get((board, depth))

    def __contains__(self, key: Tuple[int, int]) -> bool:
        return key in self._moves

    def __len__(self) -> int:
        return len(self._moves)

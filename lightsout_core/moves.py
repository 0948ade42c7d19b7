from dataclasses import dataclass
from typing import Iterable, Iterator, List, NamedTuple, Tuple
from .state import Board, check_size, set_bit, has_bit, popcount

# plus shape: the cell itself and its orthogonal neighbours
OFFSETS: Tuple[Tuple[int, int], ...] = ((0, 0), (0, 1), (0, -1), (1, 0), (-1, 0))


class Move(NamedTuple):
    y: int
    x: int

    @property
    def is_sentinel(self) -> bool:
        return self.y < 0


# marks the search root: no move produced it
SENTINEL = Move(-1, -1)


def iter_bits(mask: int) -> Iterable[int]:
    """Iterates over the indices of set bits."""
    idx = 0
    m = mask
    while m:
        if m & 1:
            yield idx
        m >>= 1
        idx += 1


class MoveCatalog:
    """Toggle masks for every cell of a size x size grid.

    mask[cell] has a bit for the cell and each in-bounds neighbour in OFFSETS.
    Built once; applying a move is a single XOR.
    """
    def __init__(self, size: int) -> None:
        self.size = check_size(size)
        self.cells = size * size
        self.masks: List[int] = [0] * self.cells
        for y in range(size):
            for x in range(size):
                m = 0
                for dy, dx in OFFSETS:
                    yy, xx = y + dy, x + dx
                    if 0 <= yy < size and 0 <= xx < size:
                        m = set_bit(m, yy * size + xx)
                self.masks[y * size + x] = m

    def mask_for(self, cell: int) -> int:
        return self.masks[cell]

    def apply(self, board: int, cell: int) -> int:
        return board ^ self.masks[cell]

    def apply_move(self, board: Board, move: Move) -> Board:
        return board.toggled(self.masks[self.cell_of(move)])

    def is_productive(self, board: int, cell: int) -> bool:
        """At least one cell of the toggle neighbourhood is lit."""
        return board & self.masks[cell] != 0

    def cell_of(self, move: Move) -> int:
        if move.is_sentinel:
            raise ValueError("sentinel move has no cell")
        return move.y * self.size + move.x

    def move_of(self, cell: int) -> Move:
        return Move(cell // self.size, cell % self.size)


@dataclass(frozen=True, slots=True)
class PathMoves:
    """Cells already toggled on the path from the root to a frontier node."""

    played: int = 0 # bitset

    def has_played(self, cell: int) -> bool:
        return has_bit(self.played, cell)

    def with_move(self, cell: int) -> "PathMoves":
        return PathMoves(set_bit(self.played, cell))

    def cells(self) -> List[int]:
        return list(iter_bits(self.played))

    def __len__(self) -> int:
        return popcount(self.played)


def successors(board: int, played: PathMoves, catalog: MoveCatalog) -> Iterator[Tuple[int, int]]:
    """Yields (cell, board after toggling cell) in row-major order.

    Skips cells already played on this path, and cells whose neighbourhood
    has no lit cell: such a toggle can be deferred and is never needed by a
    minimal solution of the plus-shaped puzzle.
    """
    masks = catalog.masks
    for cell in range(catalog.cells):
        if played.has_played(cell):
            continue
        m = masks[cell]
        if board & m:
            yield cell, board ^ m

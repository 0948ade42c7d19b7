from dataclasses import dataclass
from typing import Iterable, List, Tuple, Union

# Bit helpers
__all__ = [
    "Board",
    "ConfigurationError",
    "WORD_BITS",
    "bit",
    "has_bit",
    "set_bit",
    "popcount",
    "check_size",
    "is_goal",
]

# Boards are stored in one machine word; N*N must fit.
WORD_BITS = 64


class ConfigurationError(ValueError):
    """Grid geometry does not fit the board word."""


def bit(idx: int) -> int:
    return 1 << idx

def has_bit(mask: int, idx: int) -> bool:
    return (mask >> idx) & 1 == 1

def set_bit(mask: int, idx: int) -> int:
    return mask | bit(idx)

def popcount(mask: int) -> int:
    return bin(mask).count("1")


def check_size(size: int) -> int:
    """Validate the grid dimension once, before any search starts."""
    if size < 1:
        raise ConfigurationError(f"grid size must be positive, got {size}")
    if size * size > WORD_BITS:
        raise ConfigurationError(
            f"{size}x{size} grid needs {size * size} bits, board word has {WORD_BITS}"
        )
    return size


@dataclass(frozen=True, slots=True)
class Board:
    """
    Immutable Lights Out board.

    Stores the lit cells as one bitset.
    Cell indexing: idx = y*size + x.
    Boards compare (and hash) by size and raw bit value.
    """

    size: int
    lit: int # bitset


    def __post_init__(self) -> None:
        check_size(self.size)
        if self.lit < 0 or self.lit >> (self.size * self.size):
            raise ValueError(f"lit bits {self.lit:#x} outside {self.size}x{self.size} grid")


    @classmethod
    def empty(cls, size: int) -> "Board":
        return cls(size=check_size(size), lit=0)


    @classmethod
    def from_cells(cls, size: int, cells: Iterable[Tuple[int, int]]) -> "Board":
        check_size(size)
        lit = 0
        for y, x in cells:
            if not (0 <= y < size and 0 <= x < size):
                raise ValueError(f"cell ({y}, {x}) outside {size}x{size} grid")
            lit = set_bit(lit, y * size + x)
        return cls(size=size, lit=lit)


    # ---- state properties
    def is_goal(self) -> bool:
        """No lit cells left."""
        return self.lit == 0


    def count_lit(self) -> int:
        return popcount(self.lit)


    # ---- convenient checks/conversions
    @property
    def cells(self) -> int:
        return self.size * self.size


    def idx_to_rc(self, idx: int) -> Tuple[int, int]:
        return (idx // self.size, idx % self.size)


    def rc_to_idx(self, y: int, x: int) -> int:
        return y * self.size + x


    def is_lit(self, y: int, x: int) -> bool:
        return has_bit(self.lit, self.rc_to_idx(y, x))


    def lit_cells(self) -> List[Tuple[int, int]]:
        return [self.idx_to_rc(i) for i in range(self.cells) if has_bit(self.lit, i)]


    def toggled(self, mask: int) -> "Board":
        return Board(size=self.size, lit=self.lit ^ mask)


    def __lt__(self, other: "Board") -> bool:
        return (self.size, self.lit) < (other.size, other.lit)


def is_goal(board: Union[Board, int]) -> bool:
    if isinstance(board, Board):
        return board.is_goal()
    return board == 0

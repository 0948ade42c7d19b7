from __future__ import annotations
from typing import Tuple

from ..parser import parse_board_str
from ..state import Board
from .io import split_boards


def parse_puzzle_id(puzzle_id: str) -> Tuple[str, int]:
    """Parses a string of the form "path/to/pack.txt#3" into (path, index)."""
    if "#" not in puzzle_id:
        return puzzle_id, 0
    path, idx = puzzle_id.rsplit("#", 1)
    try:
        k = int(idx)
    except ValueError:
        raise ValueError(f"Bad puzzle index in {puzzle_id!r}") from None
    return path, k


def load_puzzle_by_id(puzzle_id: str) -> Board:
    """Loads a SPECIFIC puzzle file#idx from a pack of blank-line separated boards."""
    path, wanted = parse_puzzle_id(puzzle_id)
    with open(path, "r", encoding="utf-8") as f:
        content = f.read()
    blocks = split_boards(content)
    if not blocks:
        raise ValueError(f"No puzzles found in {path}")
    if wanted < 0 or wanted >= len(blocks):
        raise IndexError(f"Index {wanted} out of range for {path} (total {len(blocks)})")
    return parse_board_str(blocks[wanted])

from __future__ import annotations
from dataclasses import dataclass
from itertools import groupby
from pathlib import Path
from typing import Iterator, List, Tuple, Optional

from lightsout_core.parser import parse_board_str, LIT_CHARS

@dataclass
class PuzzleRef:
    path: str
    index: int  # index of the puzzle inside the pack file
    square: bool = True  # N lines of N cells

    @property
    def puzzle_id(self) -> str:
        return f"{self.path}#{self.index}"


def split_boards(text: str) -> List[str]:
    """Blank-line separated boards, each line stripped of surrounding whitespace."""
    rows = (line.strip() for line in text.splitlines())
    return ["\n".join(group) for filled, group in groupby(rows, key=bool) if filled]


def is_square(block: str) -> bool:
    rows = block.splitlines()
    return all(len(row) == len(rows) for row in rows)


def iterate_puzzle_strings(root_dir: str, rel_dirs: List[str]) -> Iterator[Tuple[PuzzleRef, str]]:
    """Yield (puzzle reference, board string) for every board of every .txt pack in the given subfolders."""
    for rel in rel_dirs:
        pack_dir = Path(root_dir) / rel
        if not pack_dir.is_dir():
            continue
        for pack in sorted(pack_dir.glob("*.txt")):
            boards = split_boards(pack.read_text(encoding="utf-8"))
            for i, block in enumerate(boards):
                yield PuzzleRef(path=str(pack), index=i, square=is_square(block)), block


def count_lit(board_str: str) -> int:
    return sum(1 for ch in board_str if ch in LIT_CHARS)


def dims(board_str: str) -> int:
    return len([ln for ln in board_str.splitlines() if ln.strip() != ""])


def filter_puzzle(board_str: str, *, min_size: Optional[int], max_size: Optional[int], min_lit: Optional[int], max_lit: Optional[int]) -> bool:
    n = dims(board_str)
    k = count_lit(board_str)
    if min_size is not None and n < min_size: return False
    if max_size is not None and n > max_size: return False
    if min_lit is not None and k < min_lit: return False
    if max_lit is not None and k > max_lit: return False
    # check if it parses
    try:
        _ = parse_board_str(board_str)
    except ValueError:
        return False
    return True

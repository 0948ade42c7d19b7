from typing import List
from .state import Board, check_size, set_bit

TOK_LIT = "X"
TOK_OFF = "."
LIT_CHARS = frozenset("Xx#1*")
OFF_CHARS = frozenset(".0-_o")


def parse_board_str(board_str: str) -> Board:
    """Parses an ASCII board into Board.

    Supported characters:
      'X', 'x', '#', '1', '*': lit cell
      '.', '0', '-', '_', 'o': unlit cell
    The board must be square: N non-blank lines of N characters each.
    Surrounding whitespace on a line is ignored.
    """
    lines: List[str] = [line.strip() for line in board_str.splitlines() if line.strip() != ""]
    if not lines:
        raise ValueError("Empty board")
    size = len(lines)
    for r, line in enumerate(lines):
        if len(line) != size:
            raise ValueError(f"Board is not square: line {r} has {len(line)} cells, expected {size}")
    check_size(size)

    lit = 0
    for r, line in enumerate(lines):
        for c, ch in enumerate(line):
            if ch in LIT_CHARS:
                lit = set_bit(lit, r * size + c)
            elif ch not in OFF_CHARS:
                raise ValueError(f"Unknown board character {ch!r} at ({r}, {c})")

    return Board(size=size, lit=lit)


def parse_board_file(path: str) -> Board:
    with open(path, "r", encoding="utf-8") as f:
        return parse_board_str(f.read())


def board_to_str(board: Board) -> str:
    """Inverse of parse_board_str."""
    return "\n".join(
        "".join(TOK_LIT if board.is_lit(y, x) else TOK_OFF for x in range(board.size))
        for y in range(board.size)
    )

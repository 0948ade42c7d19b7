from typing import Optional, Sequence
from .state import Board
from .moves import Move


def render_ascii(board: Board, move: Optional[Move] = None) -> str:
    """ASCII visualization of the board, the toggled cell shown as [X]."""
    border = "+" + "-" * (3 * board.size) + "+"
    out_lines = [border]
    for y in range(board.size):
        row_chars = []
        for x in range(board.size):
            c = 'X' if board.is_lit(y, x) else ' '
            if move is not None and move.y == y and move.x == x:
                row_chars.append('[' + c + ']')
            else:
                row_chars.append(' ' + c + ' ')
        out_lines.append('|' + ''.join(row_chars) + '|')
    out_lines.append(border)
    return "\n".join(out_lines)


def render_solution(start: Board, steps: Sequence) -> str:
    """Initial board, then each step: the board the move is played on with the move marked."""
    blocks = [f"-- start ({start.count_lit()} lit) --\n{render_ascii(start)}"]
    for i, step in enumerate(steps, 1):
        blocks.append(f"-- move {i}: ({step.move.y}, {step.move.x}) --\n{render_ascii(step.before, step.move)}")
    if steps:
        blocks.append(f"-- done --\n{render_ascii(steps[-1].after)}")
    return "\n\n".join(blocks)

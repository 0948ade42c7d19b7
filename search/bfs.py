from __future__ import annotations
from typing import Dict, List, NamedTuple, Optional
import logging
import time

from lightsout_core.state import Board, is_goal
from lightsout_core.moves import SENTINEL, Move, MoveCatalog, PathMoves, successors
from .frontier import Frontier, SearchRecord
from .transposition import PredecessorIndex, VisitedSet

logger = logging.getLogger(__name__)

Result = Dict[str, object]


class InvariantViolation(AssertionError):
    """Predecessor bookkeeping is inconsistent with a found goal."""


class Step(NamedTuple):
    move: Move
    before: Board  # board the move is played on
    after: Board   # board the move produces


def reconstruct(preds: PredecessorIndex, catalog: MoveCatalog, goal: int, depth: int) -> List[Step]:
    """Walk back from the goal to the root, returning steps first move first."""
    steps: List[Step] = []
    cur = goal
    level = depth
    while True:
        move = preds.lookup(cur, level)
        if move is None:
            raise InvariantViolation(f"no predecessor for board {cur:#x} at depth {level}")
        if move.is_sentinel:
            break
        prev = catalog.apply(cur, catalog.cell_of(move))
        steps.append(Step(move, Board(catalog.size, prev), Board(catalog.size, cur)))
        cur = prev
        level -= 1
    if level != 0:
        raise InvariantViolation(f"reached the root at depth {level}, expected 0")
    steps.reverse()
    return steps


def bfs(
    start: int,
    catalog: MoveCatalog,
    time_limit_s: Optional[float] = None,
    node_limit: Optional[int] = None,
    max_depth: Optional[int] = None,
    dedup: bool = True,
) -> Result:
    """Breadth-first search for the shortest toggle sequence clearing `start`.

    Boards are expanded in level order, so the first goal popped is at its
    minimum depth. Each path toggles a cell at most once.

    `reason` in the result is "solved", "unsolvable" (frontier exhausted),
    or the budget that stopped the search: "time_limit", "node_limit", "max_depth".
    """
    if start < 0 or start >> catalog.cells:
        raise ValueError(f"start board {start:#x} has lit bits outside the {catalog.size}x{catalog.size} grid")

    t0 = time.time()
    frontier = Frontier(dedup=dedup)
    visited = VisitedSet()
    preds = PredecessorIndex()

    preds.record(start, 0, SENTINEL)
    frontier.push(SearchRecord(0, SENTINEL, start, PathMoves()))

    old_level = 0
    expanded = 0
    depth_cut = False
    found: Optional[SearchRecord] = None
    reason = "unsolvable"

    while frontier:
        rec = frontier.pop()

        if rec.depth > old_level:
            logger.info("depth searched: %2d, states to check in queue: %d", rec.depth, len(frontier))
            old_level = rec.depth

        # lazy deletion: only the first record popped for a board counts
        if not visited.add(rec.board):
            continue
        preds.record(rec.board, rec.depth, rec.move)

        if is_goal(rec.board):
            found = rec
            reason = "solved"
            break

        if time_limit_s is not None and (time.time() - t0) > time_limit_s:
            reason = "time_limit"
            break

        if max_depth is not None and rec.depth >= max_depth:
            depth_cut = True
            continue
        expanded += 1

        nd = rec.depth + 1
        for cell, nb in successors(rec.board, rec.played, catalog):
            if nb not in visited:
                frontier.push(SearchRecord(nd, catalog.move_of(cell), nb, rec.played.with_move(cell)))

        if node_limit is not None and expanded >= node_limit and frontier:
            reason = "node_limit"
            break
    else:
        if depth_cut:
            reason = "max_depth"

    runtime = time.time() - t0
    logger.debug("search %s: expanded=%d visited=%d pushed=%d runtime=%.3fs",
                 reason, expanded, len(visited), frontier.pushed, runtime)
    if found is None:
        return {"success": False, "reason": reason, "nodes": expanded, "visited": len(visited), "runtime": runtime}
    steps = reconstruct(preds, catalog, found.board, found.depth)
    return {
        "success": True,
        "reason": reason,
        "nodes": expanded,
        "visited": len(visited),
        "runtime": runtime,
        "solution_len": len(steps),
        "moves": [s.move for s in steps],
        "steps": steps,
    }


def solve(board: Board, **budgets) -> Result:
    """Solve a Board; keyword budgets are passed through to bfs()."""
    return bfs(board.lit, MoveCatalog(board.size), **budgets)

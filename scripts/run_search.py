from __future__ import annotations
import argparse
import logging
import sys

from lightsout_core.parser import parse_board_file, parse_board_str
from lightsout_core.puzzles.resolve import load_puzzle_by_id
from lightsout_core.render import render_ascii, render_solution
from search.bfs import solve

# reference 5x5 puzzle
PUZZLE = """
.....
X....
.X...
.X...
.X.XX
"""

def main():
    p = argparse.ArgumentParser(description="Shortest Lights Out solution by breadth-first search")
    p.add_argument(
        "puzzle_id",
        nargs="?",
        default=None,
        help="Puzzle id like 'path/to/pack.txt#idx'; the reference puzzle if omitted.",
    )
    p.add_argument("--board", type=str, default=None, help="path to a single-board .txt file")
    p.add_argument("--time_limit", type=float, default=None)
    p.add_argument("--node_limit", type=int, default=None)
    p.add_argument("--max_depth", type=int, default=None)
    p.add_argument("--no_dedup", action="store_true", help="keep duplicate boards in the queue (lazy deletion only)")
    p.add_argument("-v", "--verbose", action="store_true", help="report depth increases")
    args = p.parse_args()

    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    if args.board is not None:
        b = parse_board_file(args.board)
    elif args.puzzle_id is not None:
        b = load_puzzle_by_id(args.puzzle_id)
    else:
        b = parse_board_str(PUZZLE)

    print(f"Searching for a solution ({b.size}x{b.size}, {b.count_lit()} lit)...")
    print(render_ascii(b))
    res = solve(b, time_limit_s=args.time_limit, node_limit=args.node_limit,
                max_depth=args.max_depth, dedup=not args.no_dedup)
    print("Result:", {k: v for k, v in res.items() if k not in ("moves", "steps")})
    if not res.get("success"):
        print("No solution found." if res["reason"] == "unsolvable" else f"Search stopped: {res['reason']}")
        sys.exit(1)
    moves = res["moves"]  # type: ignore
    print(f"\nSolved at depth {res['solution_len']}: " + " ".join(f"({m.y},{m.x})" for m in moves))
    print()
    print(render_solution(b, res["steps"]))  # type: ignore

if __name__ == "__main__":
    main()

from __future__ import annotations
import argparse, yaml, os, random
from typing import List

from lightsout_core.moves import MoveCatalog
from lightsout_core.parser import board_to_str
from lightsout_core.state import Board


"""
Generate random solvable puzzles by pressing random cells on an empty board.

Usage:
  python -m scripts.make_puzzles --config configs/puzzles.yaml --seed 42 --count 50
"""

def write_list(path: str, items: List[str]) -> None:
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        for it in items:
            f.write(it + "\n")


def scramble(size: int, presses: int, rng: random.Random) -> Board:
    """Distinct random presses from the empty board; the result is solvable by construction."""
    catalog = MoveCatalog(size)
    lit = 0
    for cell in rng.sample(range(catalog.cells), min(presses, catalog.cells)):
        lit = catalog.apply(lit, cell)
    return Board(size, lit)


def main():
    p = argparse.ArgumentParser()
    p.add_argument("--config", type=str, default="configs/puzzles.yaml")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--count", type=int, default=None, help="how many puzzles")
    p.add_argument("--size", type=int, default=None)
    p.add_argument("--presses", type=int, default=None, help="random presses per puzzle")
    args = p.parse_args()

    with open(args.config, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f)

    gen = cfg.get("generate", {})
    size = args.size or gen.get("size", 4)
    count = args.count or gen.get("count", 50)
    presses = args.presses or gen.get("presses", 6)
    seed = args.seed if args.seed is not None else gen.get("seed", 42)
    out = gen.get("out", f"lightsout_core/puzzles/generated/random_{size}x{size}.txt")

    rng = random.Random(seed)
    boards: List[str] = []
    while len(boards) < count:
        b = scramble(size, presses, rng)
        if b.is_goal():
            continue
        boards.append(board_to_str(b))

    os.makedirs(os.path.dirname(out) or ".", exist_ok=True)
    with open(out, "w", encoding="utf-8") as f:
        f.write("\n\n".join(boards) + "\n")

    ids = [f"{out}#{i}" for i in range(len(boards))]
    write_list(gen.get("list", "lightsout_core/puzzles/splits/generated.txt"), ids)
    print(f"generated {len(boards)} puzzles ({size}x{size}, {presses} presses, seed={seed}) → {out}")

if __name__ == "__main__":
    main()

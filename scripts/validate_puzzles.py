from __future__ import annotations
import argparse, yaml
from lightsout_core.algebra import min_moves
from lightsout_core.parser import parse_board_str
from lightsout_core.puzzles.io import iterate_puzzle_strings, filter_puzzle


def main():
    p = argparse.ArgumentParser()
    p.add_argument("--config", type=str, default="configs/puzzles.yaml")
    args = p.parse_args()

    with open(args.config, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f)

    root = cfg["puzzles"]["root_dir"]
    rels = cfg["puzzles"]["sources"]
    flt  = cfg.get("filters", {})

    ok = 0
    bad = 0
    unsolvable = 0
    for ref, s in iterate_puzzle_strings(root, rels):
        if not ref.square:
            bad += 1
            print(f"[not square] {ref.puzzle_id}")
            continue
        if not filter_puzzle(s,
                             min_size=flt.get("min_size"),
                             max_size=flt.get("max_size"),
                             min_lit=flt.get("min_lit"),
                             max_lit=flt.get("max_lit")):
            bad += 1
            print(f"[skip] {ref.puzzle_id}")
            continue
        k = min_moves(parse_board_str(s))
        if k is None:
            unsolvable += 1
            print(f"[unsolvable] {ref.puzzle_id}")
        else:
            ok += 1
            print(f"[ok] {ref.puzzle_id}: optimal {k} moves")
    print(f"solvable: {ok}, unsolvable: {unsolvable}, skipped: {bad}")

if __name__ == "__main__":
    main()

from __future__ import annotations
import argparse, csv, os, time
from typing import List, Dict
from multiprocessing import Pool, cpu_count
from tqdm import tqdm

from lightsout_core.puzzles.resolve import load_puzzle_by_id
from search.bfs import solve

FIELDS = ["puzzle_id", "size", "lit", "success", "reason", "nodes", "visited", "runtime", "solution_len", "moves"]


def _run_one(args_tuple) -> Dict[str, object]:
    puzzle_id, time_limit, node_limit, max_depth = args_tuple
    try:
        b = load_puzzle_by_id(puzzle_id)
        res = solve(b, time_limit_s=time_limit, node_limit=node_limit, max_depth=max_depth)
        moves = res.get("moves") or []
        return {
            "puzzle_id": puzzle_id,
            "size": b.size,
            "lit": b.count_lit(),
            "success": bool(res.get("success", False)),
            "reason": res.get("reason"),
            "nodes": int(res.get("nodes", 0)),
            "visited": int(res.get("visited", 0)),
            "runtime": float(res.get("runtime", 0.0)),
            "solution_len": int(res.get("solution_len", -1)),
            "moves": " ".join(f"{m.y},{m.x}" for m in moves),
        }
    except (OSError, ValueError, IndexError) as e:
        return {"puzzle_id": puzzle_id, "size": -1, "lit": -1, "success": False, "reason": f"error: {e}",
                "nodes": 0, "visited": 0, "runtime": 0.0, "solution_len": -1, "moves": ""}


def main():
    p = argparse.ArgumentParser(description="Batch BFS runs → CSV (flags, parallel)")
    p.add_argument("--list", required=True, help="file with one puzzle id (path#idx) per line")
    p.add_argument("--out", default="results/batch.csv")
    p.add_argument("--time_limit", type=float, default=60.0)
    p.add_argument("--node_limit", type=int, default=2000000)
    p.add_argument("--max_depth", type=int, default=None)
    p.add_argument("--jobs", type=int, default=0, help="processes (0→cpu_count)")
    args = p.parse_args()

    os.makedirs(os.path.dirname(args.out) or ".", exist_ok=True)

    with open(args.list, "r", encoding="utf-8") as f:
        puzzle_ids = [ln.strip() for ln in f if ln.strip() and not ln.strip().startswith("#")]

    jobs = args.jobs or cpu_count()
    payload = [(pid, args.time_limit, args.node_limit, args.max_depth) for pid in puzzle_ids]

    started = time.time()
    if jobs == 1:
        rows = [_run_one(t) for t in tqdm(payload, desc="Running BFS", unit="puzzle")]
    else:
        with Pool(processes=jobs) as pool:
            rows: List[Dict[str, object]] = list(tqdm(pool.imap_unordered(_run_one, payload), total=len(payload), desc="Running BFS", unit="puzzle"))

    with open(args.out, "w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=FIELDS)
        w.writeheader()
        for r in rows:
            w.writerow(r)

    solved = sum(1 for r in rows if r["success"])
    print(f"done: {len(rows)} puzzles ({solved} solved) → {args.out}; total_time={time.time()-started:.2f}s; jobs={jobs}")


if __name__ == "__main__":
    main()

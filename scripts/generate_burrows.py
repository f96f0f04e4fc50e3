#!/usr/bin/env python3
"""
Generate random burrow layouts and, optionally, their minimum energies.

Example:
    python scripts/generate_burrows.py \
        --count 10 \
        --depth 2 \
        --seed 42 \
        --solve \
        --output data/random_burrows.json
"""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
for path in (ROOT, SRC):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from core.board import AMPHIPOD_BOARD
from core.errors import NoSolutionError
from core.solver import solve
from utils.burrow_loader import format_burrow, random_burrow


def main():
    parser = argparse.ArgumentParser(description="Generate random amphipod burrows.")
    parser.add_argument("--count", type=int, default=10, help="Number of burrows")
    parser.add_argument("--depth", type=int, default=2, help="Room depth")
    parser.add_argument("--seed", type=int, default=0, help="RNG seed")
    parser.add_argument("--solve", action="store_true", help="Also compute the minimum energy")
    parser.add_argument("--output", required=True, help="Output JSON file")
    args = parser.parse_args()

    burrows = []
    for i in range(args.count):
        start = random_burrow(args.depth, seed=args.seed + i)
        entry = {"seed": args.seed + i, "layout": format_burrow(start)}
        if args.solve:
            try:
                entry["energy"] = solve(start, AMPHIPOD_BOARD.goal_for(args.depth))
            except NoSolutionError:
                entry["energy"] = None
            print(f"  burrow {i}: energy {entry['energy']}")
        burrows.append(entry)

    out_data = {
        "depth": args.depth,
        "count": args.count,
        "seed": args.seed,
        "burrows": burrows,
    }
    output_path = Path(args.output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(out_data, indent=2))
    print(f"Saved burrows to {output_path}")


if __name__ == "__main__":
    main()

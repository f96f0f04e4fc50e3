#!/usr/bin/env python3
"""
Solve an amphipod burrow: print the minimum energy needed to sort it.

Example:
    python scripts/solve_burrow.py --input data/burrow.txt
    python scripts/solve_burrow.py --input data/burrow.txt --unfold --path --stats
    cat data/burrow.txt | BURROW_VERBOSE=1 python scripts/solve_burrow.py
"""
from __future__ import annotations

import argparse
import json
import os
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
for path in (ROOT, SRC):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from core.errors import InvalidConfiguration
from core.solver import UniformCostSearch
from utils.burrow_loader import format_burrow, parse_burrow, unfold_burrow


_VERBOSE_ENV = os.environ.get("BURROW_VERBOSE", "")
_VERBOSE_FLAG = _VERBOSE_ENV.lower() in {"1", "true", "yes", "on"}


def main() -> int:
    parser = argparse.ArgumentParser(description="Minimum energy to organize an amphipod burrow.")
    parser.add_argument("--input", help="Path to the burrow layout (stdin if omitted)")
    parser.add_argument("--unfold", action="store_true", help="Insert the two hidden rows (depth 4)")
    parser.add_argument("--path", action="store_true", help="Print every configuration of the optimal plan")
    parser.add_argument("--stats", action="store_true", help="Print search statistics as JSON")
    parser.add_argument("--verbose", action="store_true", help="Print search progress")
    args = parser.parse_args()

    text = Path(args.input).read_text() if args.input else sys.stdin.read()
    lines = text.splitlines()

    try:
        if args.unfold:
            lines = unfold_burrow(lines)
        start, goal = parse_burrow(lines)
    except InvalidConfiguration as exc:
        print(f"Invalid burrow: {exc}", file=sys.stderr)
        return 2

    search = UniformCostSearch(start=start, goal=goal)
    node = search.run(verbose=args.verbose or _VERBOSE_FLAG)
    if node is None:
        print("No solution: goal configuration is unreachable", file=sys.stderr)
        return 1

    if args.path:
        for step, (config, cost) in enumerate(zip(node.reconstruct_path(), [0] + node.path_costs())):
            print(f"Step {step} (+{cost}):")
            print("\n".join(format_burrow(config)))
            print()
    print(f"Minimum energy: {node.cost}")
    if args.stats:
        print(json.dumps(search.get_statistics(), indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

"""Command line entry: read a task's input from stdin and print its answer."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence

from algoworks.avl import solve_soldiers
from algoworks.boxes import solve_boxes
from algoworks.bst import solve_all_equal, solve_min_depth, solve_preorder
from algoworks.contemporaries import solve_contemporaries
from algoworks.hashtable import solve_hash_commands
from algoworks.kmerge import solve_merge
from algoworks.msdsort import solve_msd
from algoworks.paths import solve_dijkstra, solve_path_count
from algoworks.ringdeque import solve_deque_commands, solve_stack_anagram
from algoworks.search import solve_insertion, solve_peak
from algoworks.selection import solve_percentiles

TASKS: dict[str, Callable[[str], str]] = {
    "dijkstra": solve_dijkstra,
    "path-count": solve_path_count,
    "peak": solve_peak,
    "insertion": solve_insertion,
    "deque": solve_deque_commands,
    "stack-anagram": solve_stack_anagram,
    "boxes": solve_boxes,
    "merge": solve_merge,
    "contemporaries": solve_contemporaries,
    "percentiles": solve_percentiles,
    "msd": solve_msd,
    "hash": solve_hash_commands,
    "preorder": solve_preorder,
    "all-equal": solve_all_equal,
    "min-depth": solve_min_depth,
    "soldiers": solve_soldiers,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run the chosen task (shortest distance by default) on standard input."""
    parser = argparse.ArgumentParser(
        prog="algoworks", description="Solve an algorithm task read from standard input."
    )
    parser.add_argument("task", nargs="?", default="dijkstra", choices=sorted(TASKS))
    args = parser.parse_args(argv)
    try:
        answer = TASKS[args.task](sys.stdin.read())
    except (ValueError, IndexError) as error:
        print(f"algoworks: {error}", file=sys.stderr)
        return 1
    sys.stdout.write(answer)
    return 0


if __name__ == "__main__":
    sys.exit(main())
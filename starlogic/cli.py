# cli.py
#
# Description:
# A command-line tool for generating Star Logic Grid puzzles. It grows a
# random region partition, solves it with the backtracking solver and prints
# the regions followed by the stored solution.
#
# Usage:
# starlogic-generate [--size {5,6,8}] [--difficulty {Easy,Medium,Hard}] [--unique] [--seed N]

import sys
import random
import logging
import argparse

from starlogic import puzzle_handler as pz
from starlogic.constants import SUPPORTED_GRID_SIZES, DIFFICULTIES, DEFAULT_GRID_SIZE, DEFAULT_DIFFICULTY

def build_parser():
    parser = argparse.ArgumentParser(description="Generate a solvable Star Logic Grid puzzle.")
    parser.add_argument("-s", "--size", type=int, choices=SUPPORTED_GRID_SIZES, default=DEFAULT_GRID_SIZE, help="Grid dimension.")
    parser.add_argument("-d", "--difficulty", choices=DIFFICULTIES, default=DEFAULT_DIFFICULTY, help="Difficulty label shown with the puzzle.")
    parser.add_argument("--unique", action='store_true', help="Only accept partitions with exactly one solution (checked with Z3).")
    parser.add_argument("--seed", type=int, help="Seed the random generator for a reproducible puzzle.")
    parser.add_argument("-v", "--verbose", action='store_true', help="Log every generation attempt.")
    return parser

def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(asctime)s - %(levelname)s - %(message)s')
    if args.seed is not None:
        random.seed(args.seed)

    puzzle = pz.new_puzzle(args.size, args.difficulty, require_unique=args.unique)
    if puzzle is None:
        print("Failed to generate puzzle. Please try again!")
        return 1

    print(pz.display_terminal_grid(puzzle.regions, f"{args.size}x{args.size} {args.difficulty} Puzzle Regions"))
    print(pz.display_terminal_grid(puzzle.regions, "Solution", content_grid=puzzle.solution_grid))
    return 0

if __name__ == "__main__":
    sys.exit(main())

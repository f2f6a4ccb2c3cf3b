#!/usr/bin/env python
"""Find every dictionary word on a board and print them, highest score first.

$ python -m wordgrid.find_words lpefaoarweesdlhd --dictionary words.txt
"""

import argparse
import sys
import time

from tqdm import tqdm

from wordgrid.args import add_standard_args, get_board_from_args
from wordgrid.board import Board, Match, SearchBudgetExceeded


def find_all_words(board: Board, words, *, progress=False) -> list[Match]:
    """Locate each word on the board. The result is sorted by score, descending."""
    matches = []
    for word in tqdm(words, disable=not progress, smoothing=0):
        word = word.strip()
        if not word:
            continue
        try:
            match = board.find_word(word)
        except SearchBudgetExceeded as e:
            sys.stderr.write(f"Skipping {e.word}: {e}\n")
            continue
        if match is not None:
            matches.append(match)
    # sort() is stable, so equal scores stay in dictionary order.
    matches.sort(key=lambda m: -m.score)
    return matches


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Find the best placement of every dictionary word on a 4x4 board."
    )
    add_standard_args(parser)
    parser.add_argument(
        "board", type=str, help="The 16 letters on the board, in row-major order."
    )
    parser.add_argument(
        "--attributes",
        type=str,
        default=None,
        help="Space-separated multipliers for each cell: '.' for none or some of "
        "d (double letter), t (triple letter), D (double word), T (triple word).",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=0,
        help="Only print this many of the highest-scoring words (0 for all).",
    )
    parser.add_argument(
        "--progress",
        action="store_true",
        help="Show a progress bar while scanning the dictionary.",
    )
    args = parser.parse_args(argv)

    try:
        board = get_board_from_args(args, args.board, args.attributes)
    except ValueError as e:
        parser.error(str(e))

    start_s = time.time()
    with open(args.dictionary) as words:
        matches = find_all_words(board, words, progress=args.progress)
    elapsed_s = time.time() - start_s

    shown = matches[: args.limit] if args.limit > 0 else matches
    for match in shown:
        print(match)

    sys.stderr.write(f"{len(matches)} words found in {elapsed_s:.2f}s\n")
    if board.cache is not None:
        sys.stderr.write(f"prefix cache: {board.cache.num_nodes()} nodes\n")


if __name__ == "__main__":
    main()

#!/usr/bin/env python
"""I/O-free performance test.

Generates random boards and words spelled by random walks over them (plus
random letter strings, most of which can't be found) and times find_word
with each combination of the k-prefix filter and the prefix cache.

$ python -m wordgrid.perf 200 --random_seed 808813
"""

import argparse
import random
import time
from dataclasses import dataclass

from tqdm import tqdm

from wordgrid.args import add_standard_args
from wordgrid.board import Board, SearchBudgetExceeded, SearchOptions
from wordgrid.neighbors import NEIGHBORS
from wordgrid.prefix_cache import LETTER_A


def random_board(n: int = Board.NUM_TILES) -> str:
    return "".join(chr(LETTER_A + random.randint(0, 25)) for _ in range(n))


def random_walk(length: int, dims=(Board.NUM_ROWS, Board.NUM_COLS)) -> list[int]:
    """A random non-repeating path of cell indices; may be shorter than length."""
    neighbors = NEIGHBORS[dims]
    cell = random.randrange(dims[0] * dims[1])
    path = [cell]
    used = {cell}
    while len(path) < length:
        options = [n for n in neighbors[cell] if n not in used]
        if not options:
            break
        cell = random.choice(options)
        path.append(cell)
        used.add(cell)
    return path


def random_words(board: str, num_words: int) -> list[str]:
    words = []
    for _ in range(num_words):
        length = random.randint(2, 8)
        if random.random() < 0.5:
            words.append("".join(board[i] for i in random_walk(length)))
        else:
            words.append(random_board(length))
    return words


@dataclass
class LookupStats:
    num_words: int
    num_found: int
    total_score: int
    num_skipped: int
    """Searches abandoned for exceeding --max_nodes"""
    elapsed_s: float


def time_lookups(
    boards: list[str], words: dict[str, list[str]], options: SearchOptions, desc=None
) -> LookupStats:
    """Look up each board's words. Searches that exceed the budget are counted, not fatal."""
    num_words = 0
    total_score = 0
    num_found = 0
    num_skipped = 0
    start_s = time.time()
    for letters in tqdm(boards, desc=desc, disable=desc is None, smoothing=0):
        board = Board.from_string(letters, options=options)
        for word in words[letters]:
            num_words += 1
            try:
                match = board.find_word(word)
            except SearchBudgetExceeded:
                num_skipped += 1
                continue
            if match:
                total_score += match.score
                num_found += 1
    elapsed_s = time.time() - start_s
    return LookupStats(num_words, num_found, total_score, num_skipped, elapsed_s)


def main():
    parser = argparse.ArgumentParser(
        prog="find_word perf test",
        description="Measure the speed of find_word, free from I/O.",
    )
    add_standard_args(parser, random_seed=True, dictionary=False, prefix_cache=False)
    parser.add_argument(
        "num_boards",
        type=int,
        help="Number of boards to generate",
        default=100,
        nargs="?",
    )
    parser.add_argument(
        "--words_per_board",
        type=int,
        default=1000,
        help="Number of words to look up on each board.",
    )
    args = parser.parse_args()
    if args.random_seed >= 0:
        random.seed(args.random_seed)

    k = args.k_prefix or None
    configs = {
        "plain": SearchOptions(k_prefix=None, max_nodes=args.max_nodes),
        "k_prefix": SearchOptions(k_prefix=k or 4, max_nodes=args.max_nodes),
        "prefix_cache": SearchOptions(
            k_prefix=None, prefix_cache=True, max_nodes=args.max_nodes
        ),
        "both": SearchOptions(k_prefix=k or 4, prefix_cache=True, max_nodes=args.max_nodes),
    }

    print(f"Generating {args.num_boards} boards x {args.words_per_board} words...")
    boards = [random_board() for _ in range(args.num_boards)]
    words = {board: random_words(board, args.words_per_board) for board in boards}

    for name, options in configs.items():
        stats = time_lookups(boards, words, options, desc=name)
        pace = stats.num_words / stats.elapsed_s
        print(f"{name}: {stats.num_found=} {stats.total_score=} {stats.num_skipped=}")
        print(f"{name}: {stats.elapsed_s:.02f}s, {pace:.02f} words/sec")


if __name__ == "__main__":
    main()

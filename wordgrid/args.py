"""Standard command-line arguments shared across tools."""

import argparse

from wordgrid.board import Board, SearchOptions
from wordgrid.layout import parse_attributes, parse_grid


def add_standard_args(
    parser: argparse.ArgumentParser, *, random_seed=False, dictionary=True, prefix_cache=True
):
    if dictionary:
        parser.add_argument(
            "--dictionary",
            type=str,
            default="wordlists/twl06.txt",
            help="Path to dictionary file with one word per line.",
        )
    parser.add_argument(
        "--k_prefix",
        type=int,
        default=4,
        help="Length of the prefixes used to reject unspellable words. "
        "Set to 0 to search for every word.",
    )
    if prefix_cache:
        parser.add_argument(
            "--prefix_cache",
            action="store_true",
            help="Reuse the best path found for each word prefix. This is faster but "
            "may report lower scores than an exhaustive search.",
        )
    parser.add_argument(
        "--max_nodes",
        type=int,
        default=None,
        help="Give up on a word after expanding this many tiles.",
    )

    if random_seed:
        parser.add_argument(
            "--random_seed",
            help="Explicitly set the random seed.",
            type=int,
            default=-1,
        )


def get_options_from_args(args: argparse.Namespace) -> SearchOptions:
    assert args.k_prefix >= 0
    return SearchOptions(
        k_prefix=args.k_prefix or None,
        prefix_cache=getattr(args, "prefix_cache", False),
        max_nodes=args.max_nodes,
    )


def get_board_from_args(
    args: argparse.Namespace, letters: str, layout: str | None = None
) -> Board:
    grid = parse_grid(letters, Board.NUM_TILES)
    attributes = parse_attributes(layout, Board.NUM_TILES) if layout else None
    return Board.from_string(grid, attributes, get_options_from_args(args))

"""Memo trie of the best tile path found so far for each word prefix on a board.

This is a heuristic: the path stored for a prefix is the best one seen among
all the words recorded through it, which is not necessarily the best path for
the prefix on its own. See Board.find_word.
"""

from typing import Callable, Self, Sequence

from wordgrid.tile import Tile

LETTER_A = ord("a")


def improves(current_score: int, candidate_score: int) -> bool:
    """Should a cached path be replaced by one with candidate_score?"""
    return candidate_score > current_score


class PrefixCache:
    _children: list[Self | None]
    tiles: tuple[Tile, ...]
    score: int

    def __init__(self, tiles: Sequence[Tile] = (), score: int = 0):
        self._children = [None] * 26
        self.tiles = tuple(tiles)
        self.score = score

    def descend(self, i: int):
        return self._children[i]

    def set_tiles_and_score(self, tiles: Sequence[Tile], score: int):
        self.tiles = tuple(tiles)
        self.score = score

    def find_node(self, word: str) -> Self | None:
        node = self
        for let in word:
            node = node.descend(ord(let) - LETTER_A)
            if node is None:
                return None
        return node

    def add_word(
        self,
        word: str,
        tiles: Sequence[Tile],
        scorer: Callable[[Sequence[Tile]], int],
    ):
        """Record every prefix of word, keeping whichever path scores higher."""
        assert len(word) == len(tiles)
        node = self
        for i, let in enumerate(word):
            c = ord(let) - LETTER_A
            sub_tiles = tiles[: i + 1]
            sub_score = scorer(sub_tiles)
            child = node.descend(c)
            if child is None:
                child = node._children[c] = PrefixCache(sub_tiles, sub_score)
            elif improves(child.score, sub_score):
                child.set_tiles_and_score(sub_tiles, sub_score)
            node = child

    def num_nodes(self):
        return 1 + sum(c.num_nodes() for c in self._children if c)

    def prefixes(self, prefix="") -> dict[str, int]:
        """prefix -> cached score for every node below this one; for debugging."""
        out = {}
        for i, child in enumerate(self._children):
            if child:
                let = prefix + chr(i + LETTER_A)
                out[let] = child.score
                out.update(child.prefixes(let))
        return out

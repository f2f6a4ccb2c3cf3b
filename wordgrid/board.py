"""Find the highest-scoring path that spells a word on a 4x4 grid.

Each word is located by backtracking from every tile with its first letter.
Two optional optimizations can skip that search:

- A k-prefix filter: the set of every k-letter sequence that can be spelled
  on the board. Words whose first k letters aren't in it can't be spelled
  either, so this never rejects a findable word.
- A prefix cache (see prefix_cache.py). This returns the best path recorded
  for a word without searching again. It can return a sub-optimal path, so
  it's off by default.
"""

import math
from dataclasses import dataclass
from typing import Sequence

from wordgrid.neighbors import NEIGHBORS
from wordgrid.prefix_cache import PrefixCache
from wordgrid.tile import ATTR_NONE, Tile
from wordgrid.util import group_by

MIN_WORD_LENGTH = 2


@dataclass
class SearchOptions:
    k_prefix: int | None = 4
    """Length of prefixes in the feasibility filter; None to disable it."""
    prefix_cache: bool = False
    """Reuse the best path recorded for a word or prefix, without re-searching."""
    max_nodes: int | None = None
    """Raise SearchBudgetExceeded if a search expands more tiles than this."""


class SearchBudgetExceeded(Exception):
    def __init__(self, word: str, max_nodes: int):
        super().__init__(f"Search for {word!r} expanded more than {max_nodes} tiles")
        self.word = word
        self.max_nodes = max_nodes


@dataclass(frozen=True)
class Match:
    word: str
    start_coord: tuple[int, int]
    tiles: tuple[Tile, ...]
    score: int

    @property
    def coords(self) -> list[tuple[int, int]]:
        return [tile.coords for tile in self.tiles]

    def __str__(self):
        tiles = ", ".join(f"({r}, {c})" for r, c in self.coords)
        return f"{self.word} score:{self.score} tiles:{tiles}"


class Board:
    NUM_ROWS = 4
    NUM_COLS = 4
    NUM_TILES = NUM_ROWS * NUM_COLS

    _tiles: list[Tile]
    _tiles_by_letter: dict[str, list[Tile]]
    _k_prefixes: frozenset[str] | None
    _cache: PrefixCache | None

    def __init__(self, options: SearchOptions | None = None):
        self.options = options or SearchOptions()
        if self.options.k_prefix is not None:
            assert self.options.k_prefix >= 1
        self._tiles = []
        self._tiles_by_letter = {}
        self._k_prefixes = None
        self._cache = None
        self._is_built = False

    @classmethod
    def from_string(
        cls,
        letters: str,
        attributes: Sequence[int] | None = None,
        options: SearchOptions | None = None,
    ):
        if len(letters) != cls.NUM_TILES:
            raise ValueError(f"Board must be exactly {cls.NUM_TILES} letters: {letters!r}")
        attributes = attributes or [ATTR_NONE] * cls.NUM_TILES
        if len(attributes) != cls.NUM_TILES:
            raise ValueError(f"Expected {cls.NUM_TILES} attributes, got {len(attributes)}")
        board = cls(options)
        for letter, attr in zip(letters, attributes):
            board.add_tile(letter, attr)
        return board

    def add_tile(self, letter: str, attributes: int = ATTR_NONE) -> Tile:
        """Add the next tile in row-major order."""
        n = len(self._tiles)
        if n >= self.NUM_TILES:
            raise ValueError(f"Board already has {self.NUM_TILES} tiles")
        tile = Tile(letter, attributes, divmod(n, self.NUM_COLS), n)
        self._tiles.append(tile)
        if n + 1 == self.NUM_TILES:
            self.build_if_needed()
        return tile

    def tile(self, row: int, col: int) -> Tile:
        assert 0 <= row < self.NUM_ROWS and 0 <= col < self.NUM_COLS, (row, col)
        return self._tiles[row * self.NUM_COLS + col]

    @property
    def tiles(self) -> tuple[Tile, ...]:
        return tuple(self._tiles)

    @property
    def is_built(self):
        return self._is_built

    @property
    def k_prefixes(self) -> frozenset[str] | None:
        self.build_if_needed()
        return self._k_prefixes

    @property
    def cache(self) -> PrefixCache | None:
        self.build_if_needed()
        return self._cache

    def build_if_needed(self):
        if self._is_built:
            return
        if len(self._tiles) != self.NUM_TILES:
            raise ValueError(
                f"Board has {len(self._tiles)} of {self.NUM_TILES} tiles; can't search it yet"
            )
        neighbors = NEIGHBORS[(self.NUM_ROWS, self.NUM_COLS)]
        for tile, ns in zip(self._tiles, neighbors):
            tile.set_neighbors(self._tiles[i] for i in ns)
        self._tiles_by_letter = group_by(self._tiles, lambda t: t.letter)
        k = self.options.k_prefix
        if k is not None:
            self._k_prefixes = frozenset(
                prefix for tile in self._tiles for prefix in tile.k_prefixes(k, self._tiles)
            )
        if self.options.prefix_cache:
            self._cache = PrefixCache()
        self._is_built = True

    def score_word(self, tiles: Sequence[Tile]) -> int:
        word_score = sum(tile.value for tile in tiles)
        return word_score * math.prod(tile.word_multiplier() for tile in tiles)

    def find_word(self, word: str) -> Match | None:
        """Find the highest-scoring path for word, or None if it can't be spelled."""
        self.build_if_needed()
        word = word.strip().lower()
        if len(word) > self.NUM_TILES or len(word) < MIN_WORD_LENGTH:
            return None
        if word[0] not in self._tiles_by_letter:
            return None
        if not all("a" <= let <= "z" for let in word):
            return None
        k = self.options.k_prefix
        if k is not None and len(word) >= k and word[:k] not in self._k_prefixes:
            return None
        if self._cache is not None:
            node = self._cache.find_node(word)
            if node is not None:
                return Match(word, node.tiles[0].coords, node.tiles, node.score)

        paths = self.find_paths(word)
        if not paths:
            return None
        # max() keeps the first of equal scores, i.e. the first path found.
        tiles = max(paths, key=self.score_word)
        if self._cache is not None:
            self._cache.add_word(word, tiles, self.score_word)
        return Match(word, tiles[0].coords, tuple(tiles), self.score_word(tiles))

    def find_paths(self, word: str) -> list[list[Tile]]:
        """Every path spelling word, in the order they're discovered.

        This ignores the k-prefix filter and the prefix cache.
        """
        self.build_if_needed()
        word = word.strip().lower()
        starts = self._tiles_by_letter.get(word[:1], [])
        max_nodes = self.options.max_nodes
        tiles = self._tiles
        num_expanded = 0

        def extend(candidates: list[int], suffix: str, used: int) -> list[list[int]]:
            nonlocal num_expanded
            if not suffix:
                return [[i] for i in candidates]
            out = []
            for i in candidates:
                num_expanded += 1
                if max_nodes is not None and num_expanded > max_nodes:
                    raise SearchBudgetExceeded(word, max_nodes)
                tile = tiles[i]
                if not tile.has_neighbor_with_letter(suffix[0]):
                    continue
                now_used = used | (1 << i)
                next_tiles = tile.neighbors_with_letter(suffix[0], now_used)
                for path in extend(next_tiles, suffix[1:], now_used):
                    out.append([i, *path])
            return out

        paths = extend([t.index for t in starts], word[1:], 0)
        return [[tiles[i] for i in path] for path in paths]

    def __str__(self):
        letters = "".join(t.letter for t in self._tiles)
        return "\n".join(
            " ".join(letters[r * self.NUM_COLS : (r + 1) * self.NUM_COLS])
            for r in range(self.NUM_ROWS)
        )

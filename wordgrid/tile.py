"""A single lettered cell on a word grid, with its point value and multipliers."""

from typing import Iterable, Sequence

ATTR_NONE = 0x0
ATTR_DOUBLE_LETTER = 0x1
ATTR_TRIPLE_LETTER = 0x2
ATTR_DOUBLE_WORD = 0x4
ATTR_TRIPLE_WORD = 0x8
ATTR_ALL = ATTR_DOUBLE_LETTER | ATTR_TRIPLE_LETTER | ATTR_DOUBLE_WORD | ATTR_TRIPLE_WORD

# fmt: off
LETTER_POINTS = {
    "a": 1, "b": 4, "c": 4, "d": 2, "e": 1, "f": 4, "g": 1, "h": 4,
    "i": 1, "j": 10, "k": 1, "l": 1, "m": 3, "n": 1, "o": 1, "p": 4,
    "q": 10, "r": 1, "s": 1, "t": 1, "u": 2, "v": 4, "w": 4, "x": 1,
    "y": 4, "z": 1,
}
# fmt: on
assert len(LETTER_POINTS) == 26


def check_attributes(attributes: int):
    if attributes & ~ATTR_ALL:
        raise ValueError(f"Unknown attribute bits in {attributes:#x}")
    if attributes & ATTR_DOUBLE_LETTER and attributes & ATTR_TRIPLE_LETTER:
        raise ValueError("A tile can't be both double and triple letter")
    if attributes & ATTR_DOUBLE_WORD and attributes & ATTR_TRIPLE_WORD:
        raise ValueError("A tile can't be both double and triple word")


class Tile:
    """One cell of the grid.

    Neighbors are stored as indices into the owning Board's tile list, keyed by
    letter. They're set once, after all the tiles on the board exist.
    """

    __slots__ = (
        "letter",
        "coords",
        "index",
        "attributes",
        "base_value",
        "value",
        "neighbors",
    )

    letter: str
    coords: tuple[int, int]
    index: int
    attributes: int
    base_value: int
    value: int
    neighbors: dict[str, list[int]]

    def __init__(self, letter: str, attributes: int, coords: tuple[int, int], index: int):
        if len(letter) != 1 or not letter.isascii() or letter.lower() not in LETTER_POINTS:
            raise ValueError(f"Invalid letter [{letter}]")
        check_attributes(attributes)
        self.letter = letter.lower()
        self.coords = coords
        self.index = index
        self.attributes = attributes
        self.base_value = LETTER_POINTS[self.letter]
        self.value = self.base_value
        if attributes & ATTR_DOUBLE_LETTER:
            self.value *= 2
        elif attributes & ATTR_TRIPLE_LETTER:
            self.value *= 3
        self.neighbors = {}

    def word_multiplier(self) -> int:
        if self.attributes & ATTR_DOUBLE_WORD:
            return 2
        elif self.attributes & ATTR_TRIPLE_WORD:
            return 3
        return 1

    def adjacent_to(self, other: "Tile") -> bool:
        r1, c1 = self.coords
        r2, c2 = other.coords
        return other is not self and max(abs(r1 - r2), abs(c1 - c2)) == 1

    def set_neighbors(self, tiles: Iterable["Tile"]):
        self.neighbors = {}
        for tile in tiles:
            self.neighbors.setdefault(tile.letter, []).append(tile.index)

    def has_neighbor_with_letter(self, letter: str) -> bool:
        return letter in self.neighbors

    def neighbors_with_letter(self, letter: str, used: int = 0) -> list[int]:
        """Indices of adjacent tiles with this letter, skipping any set in `used`."""
        return [i for i in self.neighbors.get(letter, ()) if not used & (1 << i)]

    def k_prefixes(self, k: int, tiles: Sequence["Tile"], used: int = 0) -> set[str]:
        """All distinct k-letter sequences spelled by paths starting on this tile.

        This is exponential in k, so keep it small (<= 4).
        """
        if k == 1:
            return {self.letter}
        used |= 1 << self.index
        out = set[str]()
        for indices in self.neighbors.values():
            for i in indices:
                if used & (1 << i):
                    continue
                for suffix in tiles[i].k_prefixes(k - 1, tiles, used):
                    out.add(self.letter + suffix)
        return out

    def __str__(self):
        r, c = self.coords
        return f"Tile[{self.letter}, ({r}, {c})]"

    def __repr__(self):
        return str(self)

"""Parse boards and multiplier layouts from the command line.

A layout has one space-separated token per cell, in row-major order. Each
token is "." for a plain tile or a combination of:

  d: double letter   t: triple letter
  D: double word     T: triple word

For example, a board with a double-word tile in each corner and a
double-letter, double-word tile in the middle:

  "D . . D . dD . . . . . . D . . D"
"""

from typing import Sequence

from wordgrid.tile import (
    ATTR_DOUBLE_LETTER,
    ATTR_DOUBLE_WORD,
    ATTR_NONE,
    ATTR_TRIPLE_LETTER,
    ATTR_TRIPLE_WORD,
    check_attributes,
)

CODES = {
    "d": ATTR_DOUBLE_LETTER,
    "t": ATTR_TRIPLE_LETTER,
    "D": ATTR_DOUBLE_WORD,
    "T": ATTR_TRIPLE_WORD,
}


def parse_grid(letters: str, num_tiles: int = 16) -> str:
    letters = letters.strip()
    if not letters.isascii():
        raise ValueError(f"Grid may only contain the letters a-z, got {letters!r}")
    letters = letters.lower()
    if len(letters) != num_tiles:
        raise ValueError(f"Grid must be exactly {num_tiles} letters, got {letters!r}")
    if not all("a" <= let <= "z" for let in letters):
        raise ValueError(f"Grid may only contain the letters a-z, got {letters!r}")
    return letters


def parse_attribute(token: str) -> int:
    if token == ".":
        return ATTR_NONE
    attr = ATTR_NONE
    for code in token:
        if code not in CODES:
            raise ValueError(f"Invalid attribute code {code!r} in {token!r}")
        if attr & CODES[code]:
            raise ValueError(f"Repeated attribute code {code!r} in {token!r}")
        attr |= CODES[code]
    check_attributes(attr)
    return attr


def parse_attributes(layout: str, num_tiles: int = 16) -> list[int]:
    tokens = layout.split()
    if len(tokens) != num_tiles:
        raise ValueError(f"Layout must have {num_tiles} cells, got {len(tokens)}")
    return [parse_attribute(token) for token in tokens]


def format_attributes(attributes: Sequence[int]) -> str:
    return " ".join(
        "".join(code for code, flag in CODES.items() if attr & flag) or "."
        for attr in attributes
    )

"""
Hand notation parsing and multiset validation.

Notation is the usual compact form: runs of digits followed by a suit
letter, e.g. "123m456p789s11122z". Honors are 1z-7z (東南西北白發中) and
0 stands for a red five.
"""

import re
from typing import Collection, List

import numpy as np

from .errors import HandParseError, InvalidHandError
from .tiles import MAX_COPIES, NUM_TILE_TYPES, Tile, to_counts


HAND_SIZES = (13, 14)

_GROUP_RE = re.compile(r"(\d+)([mpsz])")


def parse_hand(notation: str) -> List[Tile]:
    """
    Parse hand notation into a list of tiles.

    Args:
        notation: String like "123m456p789s11122z"; whitespace is ignored

    Returns:
        Tiles in notation order

    Raises:
        HandParseError: if the notation is malformed
    """
    text = "".join(notation.split())
    if not text:
        raise HandParseError("Empty hand notation")

    tiles = []
    pos = 0
    for match in _GROUP_RE.finditer(text):
        if match.start() != pos:
            raise HandParseError(
                f"Unexpected {text[pos:match.start()]!r} at position {pos} in {notation!r}"
            )
        digits, suit = match.groups()
        for digit in digits:
            try:
                tiles.append(Tile.from_string(digit + suit))
            except ValueError as e:
                raise HandParseError(f"Invalid tile {digit}{suit} in {notation!r}") from e
        pos = match.end()

    if pos != len(text):
        raise HandParseError(f"Trailing {text[pos:]!r} in {notation!r} (missing suit letter?)")

    return tiles


def parse_counts(notation: str) -> np.ndarray:
    """Parse hand notation straight into a 34-element count array."""
    return to_counts(parse_hand(notation))


def validate_counts(counts: np.ndarray, sizes: Collection[int] = HAND_SIZES) -> None:
    """
    Check the hand multiset invariants.

    Raises:
        InvalidHandError: on a wrong shape, a count outside 0-4, or a tile
            total not in `sizes`
    """
    counts = np.asarray(counts)
    if counts.shape != (NUM_TILE_TYPES,):
        raise InvalidHandError(
            f"Expected a {NUM_TILE_TYPES}-element count array, got shape {counts.shape}"
        )
    if (counts < 0).any():
        bad = [str(Tile.from_index(i)) for i in np.flatnonzero(counts < 0)]
        raise InvalidHandError(f"Negative counts for {', '.join(bad)}")
    if (counts > MAX_COPIES).any():
        bad = [str(Tile.from_index(i)) for i in np.flatnonzero(counts > MAX_COPIES)]
        raise InvalidHandError(f"More than {MAX_COPIES} copies of {', '.join(bad)}")

    total = int(counts.sum())
    if total not in sizes:
        expected = " or ".join(str(s) for s in sorted(sizes))
        raise InvalidHandError(f"Hand has {total} tiles, expected {expected}")

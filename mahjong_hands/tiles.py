"""
Riichi Mahjong Tiles

Defines the 34 tile kinds used in Japanese Mahjong:
- 9 Man (萬) 1m-9m
- 9 Pin (筒) 1p-9p
- 9 Sou (索) 1s-9s
- 4 Winds (東南西北) 1z-4z
- 3 Dragons (白發中) 5z-7z

Hands are handled as 34-element count arrays indexed by tile kind.
"""

from enum import IntEnum
from dataclasses import dataclass
from typing import Iterable, List, Sequence
import numpy as np


NUM_TILE_TYPES = 34
MAX_COPIES = 4

NUMBERED_SUIT_LETTERS = "mps"


class TileSuit(IntEnum):
    """Tile suits, in sort order"""
    MAN = 0      # 萬子 - Characters 1-9
    PIN = 1      # 筒子 - Dots 1-9
    SOU = 2      # 索子 - Bamboo 1-9
    WINDS = 3    # 風牌 - East, South, West, North
    DRAGONS = 4  # 三元牌 - White, Green, Red


class WindType(IntEnum):
    """Wind tile types"""
    EAST = 0   # 東
    SOUTH = 1  # 南
    WEST = 2   # 西
    NORTH = 3  # 北


class DragonType(IntEnum):
    """Dragon tile types"""
    WHITE = 0  # 白 (Haku)
    GREEN = 1  # 發 (Hatsu)
    RED = 2    # 中 (Chun)


NUMBERED_SUITS = (TileSuit.MAN, TileSuit.PIN, TileSuit.SOU)


@dataclass(frozen=True, order=True)
class Tile:
    """
    A tile kind (not an instance).

    Attributes:
        suit: The suit of the tile
        value: 1-9 for numbered suits, 0-3 for winds, 0-2 for dragons

    Field order makes the dataclass ordering identical to the index order.
    """
    suit: TileSuit
    value: int

    def __post_init__(self):
        """Validate tile values"""
        if self.suit in NUMBERED_SUITS:
            if not 1 <= self.value <= 9:
                raise ValueError(f"Numbered suits must have value 1-9, got {self.value}")
        elif self.suit == TileSuit.WINDS:
            if not 0 <= self.value <= 3:
                raise ValueError(f"Wind tiles must have value 0-3, got {self.value}")
        elif self.suit == TileSuit.DRAGONS:
            if not 0 <= self.value <= 2:
                raise ValueError(f"Dragon tiles must have value 0-2, got {self.value}")
        else:
            raise ValueError(f"Unknown suit: {self.suit}")

    @property
    def is_numbered(self) -> bool:
        return self.suit in NUMBERED_SUITS

    @property
    def is_honor(self) -> bool:
        """Check if tile is an honor tile (Wind or Dragon)"""
        return self.suit in (TileSuit.WINDS, TileSuit.DRAGONS)

    @property
    def is_terminal(self) -> bool:
        """Check if tile is a terminal (1 or 9 of numbered suits)"""
        return self.is_numbered and self.value in (1, 9)

    @property
    def is_terminal_or_honor(self) -> bool:
        """Check if tile is terminal or honor (yaochuuhai)"""
        return self.is_terminal or self.is_honor

    @property
    def index(self) -> int:
        """
        Get the dense index for this tile kind (0-33).

        0-8 man, 9-17 pin, 18-26 sou, 27-30 winds, 31-33 dragons.
        """
        if self.is_numbered:
            return self.suit * 9 + self.value - 1
        if self.suit == TileSuit.WINDS:
            return 27 + self.value
        return 31 + self.value

    def __repr__(self) -> str:
        return f"Tile({self.suit.name}, {self.value})"

    def __str__(self) -> str:
        """Hand notation, e.g. 5m or 7z"""
        if self.is_numbered:
            return f"{self.value}{NUMBERED_SUIT_LETTERS[self.suit]}"
        return f"{self.index - 26}z"

    @classmethod
    def from_index(cls, tile_index: int) -> 'Tile':
        """Create a tile from its index (0-33)"""
        if not 0 <= tile_index < NUM_TILE_TYPES:
            raise ValueError(f"Tile index must be 0-33, got {tile_index}")
        if tile_index < 27:
            return cls(TileSuit(tile_index // 9), tile_index % 9 + 1)
        if tile_index < 31:
            return cls(TileSuit.WINDS, tile_index - 27)
        return cls(TileSuit.DRAGONS, tile_index - 31)

    @classmethod
    def from_string(cls, s: str) -> 'Tile':
        """
        Create tile from a two-character notation.

        Args:
            s: String like "1m", "9p", "0s" (red five), "1z" (East), "7z" (Red)
        """
        s = s.strip()
        if len(s) != 2 or not s[0].isdigit():
            raise ValueError(f"Cannot parse tile string: {s!r}")

        value = int(s[0])
        suit_char = s[1]
        if suit_char in NUMBERED_SUIT_LETTERS:
            # 0 is the red five
            return cls(TileSuit(NUMBERED_SUIT_LETTERS.index(suit_char)), value or 5)
        if suit_char == "z":
            if not 1 <= value <= 7:
                raise ValueError(f"Honor tiles must be 1z-7z, got {s!r}")
            return cls.from_index(26 + value)

        raise ValueError(f"Cannot parse tile string: {s!r}")


# Convenience functions for creating specific tiles
def man(value: int) -> Tile:
    """Create a Man tile (1-9m)"""
    return Tile(TileSuit.MAN, value)

def pin(value: int) -> Tile:
    """Create a Pin tile (1-9p)"""
    return Tile(TileSuit.PIN, value)

def sou(value: int) -> Tile:
    """Create a Sou tile (1-9s)"""
    return Tile(TileSuit.SOU, value)

def wind(wind_type: WindType) -> Tile:
    """Create a Wind tile (東南西北)"""
    return Tile(TileSuit.WINDS, wind_type)

def dragon(dragon_type: DragonType) -> Tile:
    """Create a Dragon tile (白發中)"""
    return Tile(TileSuit.DRAGONS, dragon_type)


# Named wind tiles
EAST = wind(WindType.EAST)
SOUTH = wind(WindType.SOUTH)
WEST = wind(WindType.WEST)
NORTH = wind(WindType.NORTH)

# Named dragon tiles
WHITE_DRAGON = dragon(DragonType.WHITE)
GREEN_DRAGON = dragon(DragonType.GREEN)
RED_DRAGON = dragon(DragonType.RED)

# 1m 9m 1p 9p 1s 9s + all honors, in index order
KOKUSHI_TILES: List[Tile] = [
    Tile.from_index(i) for i in range(NUM_TILE_TYPES)
    if Tile.from_index(i).is_terminal_or_honor
]
KOKUSHI_INDICES: List[int] = [t.index for t in KOKUSHI_TILES]


def to_counts(tiles: Iterable[Tile]) -> np.ndarray:
    """Convert tiles to a 34-element count array."""
    counts = np.zeros(NUM_TILE_TYPES, dtype=np.int8)
    for tile in tiles:
        counts[tile.index] += 1
    return counts


def counts_to_tiles(counts: Sequence[int]) -> List[Tile]:
    """Expand a count array back into a sorted tile list."""
    tiles = []
    for idx, count in enumerate(counts):
        tiles.extend([Tile.from_index(idx)] * int(count))
    return tiles

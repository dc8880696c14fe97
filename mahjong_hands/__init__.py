"""
Riichi Mahjong Hand Shapes
Winning-shape classification and decomposition for 14-tile hands
"""

from .tiles import Tile, TileSuit, WindType, DragonType, KOKUSHI_TILES, to_counts, counts_to_tiles
from .parse import parse_hand, parse_counts, validate_counts
from .errors import HandParseError, InvalidHandError
from .rules import RuleSet, DEFAULT_RULES, STANDARD_ONLY_RULES
from .hand import (
    Meld,
    MeldType,
    HandKind,
    HandStructure,
    StandardHand,
    SevenPairs,
    ThirteenOrphans,
    decompose_hand,
    is_winning_hand,
    is_standard_hand,
    is_chiitoitsu,
    is_kokushi_13_wait,
    check_kokushi,
    find_all_meld_combinations,
    can_form_melds,
)

__version__ = "0.1.0"
__all__ = [
    "Tile",
    "TileSuit",
    "WindType",
    "DragonType",
    "KOKUSHI_TILES",
    "to_counts",
    "counts_to_tiles",
    "parse_hand",
    "parse_counts",
    "validate_counts",
    "HandParseError",
    "InvalidHandError",
    "RuleSet",
    "DEFAULT_RULES",
    "STANDARD_ONLY_RULES",
    "Meld",
    "MeldType",
    "HandKind",
    "HandStructure",
    "StandardHand",
    "SevenPairs",
    "ThirteenOrphans",
    "decompose_hand",
    "is_winning_hand",
    "is_standard_hand",
    "is_chiitoitsu",
    "is_kokushi_13_wait",
    "check_kokushi",
    "find_all_meld_combinations",
    "can_form_melds",
]

"""
Hand Shape Decomposition for Riichi Mahjong

Classifies a hand (34-element count array) into winning shapes:
- Standard form (4 melds + 1 pair), every distinct decomposition
- Chiitoitsu (7 pairs)
- Kokushi musou (13 orphans)

Two entry points share the same meld search:
- decompose_hand: exhaustive, returns every distinct hand structure
- is_winning_hand: yes/no only, stops at the first success

Meld search always takes the lowest tile still in the hand (the pivot).
Nothing lower is left to put in front of it, so the pivot is either part
of a triplet or the lowest tile of a sequence; those are the only two
branches that need to be tried.
"""

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import List, Optional, Tuple, Union

import numpy as np

from .parse import validate_counts
from .rules import DEFAULT_RULES, RuleSet
from .tiles import KOKUSHI_INDICES, KOKUSHI_TILES, NUM_TILE_TYPES, Tile

logger = logging.getLogger(__name__)


MELDS_PER_HAND = 4


class MeldType(IntEnum):
    """Types of concealed groups of three"""
    SEQUENCE = 0  # 順子 (shuntsu) - 3 consecutive tiles of one suit
    TRIPLET = 1   # 刻子 (koutsu) - 3 identical tiles


@dataclass(frozen=True)
class Meld:
    """
    A group of three tiles.

    Attributes:
        meld_type: Sequence or triplet
        tile: The triplet's tile, or the lowest tile of the sequence
    """
    meld_type: MeldType
    tile: Tile

    def __post_init__(self):
        if self.meld_type == MeldType.SEQUENCE:
            if not self.tile.is_numbered:
                raise ValueError(f"Sequence cannot start with honor tile {self.tile}")
            if self.tile.value > 7:
                raise ValueError(f"Sequence cannot start above 7, got {self.tile}")

    @property
    def sort_key(self) -> Tuple[int, int]:
        return (self.tile.index, int(self.meld_type))

    def tiles(self) -> List[Tile]:
        """The three tiles of this meld, lowest first"""
        if self.meld_type == MeldType.TRIPLET:
            return [self.tile] * 3
        idx = self.tile.index
        return [Tile.from_index(idx + i) for i in range(3)]

    def to_count_array(self) -> np.ndarray:
        """Convert meld to 34-element count array"""
        counts = np.zeros(NUM_TILE_TYPES, dtype=np.int8)
        for tile in self.tiles():
            counts[tile.index] += 1
        return counts

    def __repr__(self) -> str:
        return f"Meld({self.meld_type.name}, {self.tile})"

    def __str__(self) -> str:
        suit = str(self.tile)[1]
        return "".join(str(t)[0] for t in self.tiles()) + suit


class HandKind(IntEnum):
    """Tag for the three hand structure variants"""
    STANDARD = 0
    CHIITOITSU = 1
    KOKUSHI = 2


def _pair_str(tile: Tile) -> str:
    """Pair in compact notation, e.g. 22z"""
    text = str(tile)
    return text[0] * 2 + text[1]


@dataclass(frozen=True)
class StandardHand:
    """4 melds + 1 pair. Melds are kept in canonical (sorted) order."""
    melds: Tuple[Meld, ...]
    pair: Tile

    kind = HandKind.STANDARD

    def sort_key(self) -> tuple:
        return (int(self.kind), self.pair.index, tuple(m.sort_key for m in self.melds))

    def to_count_array(self) -> np.ndarray:
        counts = np.zeros(NUM_TILE_TYPES, dtype=np.int8)
        for meld in self.melds:
            counts += meld.to_count_array()
        counts[self.pair.index] += 2
        return counts

    def __str__(self) -> str:
        return " ".join([str(m) for m in self.melds] + [_pair_str(self.pair)])


@dataclass(frozen=True)
class SevenPairs:
    """Chiitoitsu: 7 distinct pairs, in tile order."""
    pairs: Tuple[Tile, ...]

    kind = HandKind.CHIITOITSU

    def sort_key(self) -> tuple:
        return (int(self.kind), tuple(t.index for t in self.pairs))

    def to_count_array(self) -> np.ndarray:
        counts = np.zeros(NUM_TILE_TYPES, dtype=np.int8)
        for tile in self.pairs:
            counts[tile.index] += 2
        return counts

    def __str__(self) -> str:
        return " ".join(_pair_str(t) for t in self.pairs)


@dataclass(frozen=True)
class ThirteenOrphans:
    """Kokushi musou: one of each terminal/honor, `pair` appears twice."""
    pair: Tile

    kind = HandKind.KOKUSHI

    def sort_key(self) -> tuple:
        return (int(self.kind), self.pair.index)

    def to_count_array(self) -> np.ndarray:
        counts = np.zeros(NUM_TILE_TYPES, dtype=np.int8)
        counts[KOKUSHI_INDICES] = 1
        counts[self.pair.index] += 1
        return counts

    def __str__(self) -> str:
        return " ".join(str(t) for t in KOKUSHI_TILES) + f" +{self.pair}"


HandStructure = Union[StandardHand, SevenPairs, ThirteenOrphans]


def _first_tile(counts: np.ndarray) -> int:
    """Index of the lowest tile present, or -1 for an empty hand."""
    for i in range(NUM_TILE_TYPES):
        if counts[i] > 0:
            return i
    return -1


def _can_start_sequence(counts: np.ndarray, idx: int) -> bool:
    """Numbered tile 1-7 with both following tiles of the same suit present."""
    if idx >= 27 or idx % 9 > 6:
        return False
    return bool(counts[idx + 1] > 0 and counts[idx + 2] > 0)


def _take(counts: np.ndarray, indices: List[int], amount: int = 1) -> np.ndarray:
    """Copy of `counts` with `amount` removed at each index."""
    remaining = counts.copy()
    for idx in indices:
        assert remaining[idx] >= amount, f"removing {amount} of absent {Tile.from_index(idx)}"
        remaining[idx] -= amount
    return remaining


def find_all_meld_combinations(counts: np.ndarray, needed: int) -> List[List[Meld]]:
    """
    Find every way to split `counts` into exactly `needed` melds.

    Args:
        counts: 34-element count array (not modified)
        needed: Number of melds to form

    Returns:
        List of meld lists; empty if no split exists. Order within each
        list follows the search, not canonical order.
    """
    first_idx = _first_tile(counts)

    if needed == 0:
        # Leftover tiles mean this path failed
        return [[]] if first_idx == -1 else []

    if first_idx == -1:
        return []

    results = []
    tile = Tile.from_index(first_idx)

    # Try forming a triplet
    if counts[first_idx] >= 3:
        after_triplet = _take(counts, [first_idx], 3)
        for sub_result in find_all_meld_combinations(after_triplet, needed - 1):
            results.append([Meld(MeldType.TRIPLET, tile)] + sub_result)

    # Try forming a sequence starting here
    if _can_start_sequence(counts, first_idx):
        after_seq = _take(counts, [first_idx, first_idx + 1, first_idx + 2])
        for sub_result in find_all_meld_combinations(after_seq, needed - 1):
            results.append([Meld(MeldType.SEQUENCE, tile)] + sub_result)

    return results


def can_form_melds(counts: np.ndarray, needed: int) -> bool:
    """Same search as find_all_meld_combinations, stopping at the first split."""
    first_idx = _first_tile(counts)

    if needed == 0:
        return first_idx == -1

    if first_idx == -1:
        return False

    if counts[first_idx] >= 3:
        if can_form_melds(_take(counts, [first_idx], 3), needed - 1):
            return True

    if _can_start_sequence(counts, first_idx):
        if can_form_melds(_take(counts, [first_idx, first_idx + 1, first_idx + 2]), needed - 1):
            return True

    return False


def is_chiitoitsu(counts: np.ndarray) -> bool:
    """Exactly 7 distinct tiles, two of each."""
    counts = np.asarray(counts)
    present = counts[counts > 0]
    return len(present) == 7 and bool((present == 2).all())


def check_kokushi(counts: np.ndarray) -> Optional[Tile]:
    """
    Check for a completed kokushi musou (thirteen orphans).

    Returns:
        The tile that forms the pair, or None if the hand is not kokushi
    """
    counts = np.asarray(counts)
    if counts.sum() != 14:
        return None

    # Must have no simples
    outside = np.ones(NUM_TILE_TYPES, dtype=bool)
    outside[KOKUSHI_INDICES] = False
    if counts[outside].any():
        return None

    pair_tile = None
    for idx in KOKUSHI_INDICES:
        count = counts[idx]
        if count < 1 or count > 2:
            return None
        if count == 2:
            if pair_tile is not None:
                return None  # More than one pair
            pair_tile = Tile.from_index(idx)

    return pair_tile


def is_kokushi_13_wait(counts: np.ndarray) -> bool:
    """
    Check for the kokushi 13-sided wait: a 13-tile hand holding exactly
    one of every terminal and honor, so any of the 13 completes it.
    """
    counts = np.asarray(counts)
    if counts.sum() != 13:
        return False

    if not (counts[KOKUSHI_INDICES] == 1).all():
        return False

    return int(np.count_nonzero(counts)) == 13


def _pair_candidates(counts: np.ndarray) -> List[int]:
    return [int(i) for i in np.flatnonzero(counts >= 2)]


def is_standard_hand(counts: np.ndarray) -> bool:
    """Check whether the hand splits into 4 melds + 1 pair."""
    counts = np.asarray(counts)
    for idx in _pair_candidates(counts):
        if can_form_melds(_take(counts, [idx], 2), MELDS_PER_HAND):
            return True
    return False


def decompose_hand(counts: np.ndarray, rules: RuleSet = DEFAULT_RULES) -> List[HandStructure]:
    """
    Find every distinct way a 14-tile hand forms a winning shape.

    Args:
        counts: 34-element count array
        rules: Which shape families to report

    Returns:
        Distinct hand structures sorted by kind and then tiles; empty if
        the hand does not win

    Raises:
        InvalidHandError: if rules.validate_input is set and `counts` is
            not a 14-tile hand
    """
    counts = np.asarray(counts)
    if rules.validate_input:
        validate_counts(counts, sizes=(14,))

    results: List[HandStructure] = []

    if rules.allow_kokushi:
        pair = check_kokushi(counts)
        if pair is not None:
            results.append(ThirteenOrphans(pair=pair))

    if rules.allow_chiitoitsu and is_chiitoitsu(counts):
        pairs = tuple(Tile.from_index(int(i)) for i in np.flatnonzero(counts))
        results.append(SevenPairs(pairs=pairs))

    for idx in _pair_candidates(counts):
        pair_tile = Tile.from_index(idx)
        remaining = _take(counts, [idx], 2)
        for melds in find_all_meld_combinations(remaining, MELDS_PER_HAND):
            # The same melds can come out of the search in different orders
            melds = tuple(sorted(melds, key=lambda m: m.sort_key))
            results.append(StandardHand(melds=melds, pair=pair_tile))

    structures = sorted(set(results), key=lambda s: s.sort_key())

    logger.debug(
        f"Decomposed hand into {len(structures)} structure(s)"
        f" ({len(results) - len(structures)} duplicate(s) dropped)"
    )
    if logger.isEnabledFor(logging.DEBUG):
        for structure in structures:
            logger.debug(f"  {structure.kind.name}: {structure}")

    return structures


def is_winning_hand(counts: np.ndarray, rules: RuleSet = DEFAULT_RULES) -> bool:
    """
    Check whether a 14-tile hand is complete.

    Equivalent to bool(decompose_hand(counts, rules)) but never builds melds.
    """
    counts = np.asarray(counts)
    if rules.validate_input:
        validate_counts(counts, sizes=(14,))

    if rules.allow_kokushi and check_kokushi(counts) is not None:
        return True
    if rules.allow_chiitoitsu and is_chiitoitsu(counts):
        return True
    return is_standard_hand(counts)

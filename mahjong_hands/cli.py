"""
Command-line hand classifier

Parses one or more hands and prints whether each is complete and every
distinct way it decomposes.

Usage:
    python -m mahjong_hands 123m456p789s11122z
    python -m mahjong_hands 19m19p19s1234567z --verbose
    python -m mahjong_hands 1122m3344p5566s77z --rules standard-only
"""

import argparse
import logging
import sys
from typing import List, Optional

from .hand import decompose_hand, is_kokushi_13_wait, is_winning_hand
from .parse import parse_counts, validate_counts
from .rules import RULE_PRESETS, RuleSet

logger = logging.getLogger(__name__)


def describe_hand(notation: str, rules: RuleSet) -> List[str]:
    """
    Classify one hand and return the report lines.

    Raises:
        ValueError: if the notation or hand size is invalid
    """
    counts = parse_counts(notation)
    validate_counts(counts)
    total = int(counts.sum())

    lines = [f"Hand: {notation} ({total} tiles)"]

    if total == 13:
        wait = is_kokushi_13_wait(counts)
        lines.append(f"  Kokushi 13-sided wait: {'yes' if wait else 'no'}")
        return lines

    structures = decompose_hand(counts, rules)
    # Both paths must agree; the fast check is what callers normally use
    assert is_winning_hand(counts, rules) == bool(structures)

    if not structures:
        lines.append("  Not a winning hand")
        return lines

    lines.append(f"  Winning hand, {len(structures)} decomposition(s):")
    for structure in structures:
        lines.append(f"    [{structure.kind.name}] {structure}")
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Classify riichi mahjong hands")
    parser.add_argument("hands", nargs="+", help="Hands in notation, e.g. 123m456p789s11122z")
    parser.add_argument("--rules", choices=sorted(RULE_PRESETS), default="default",
                        help="Which winning shapes to recognise")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    rules = RULE_PRESETS[args.rules]
    logger.debug(f"Using {rules!r}")

    for notation in args.hands:
        try:
            lines = describe_hand(notation, rules)
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 2
        print("\n".join(lines))

    return 0


if __name__ == "__main__":
    sys.exit(main())

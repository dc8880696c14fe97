"""
Hand Shape Rule Sets

Defines which winning shapes are recognised:
- Default (standard, seven pairs, thirteen orphans)
- Standard only (4 melds + 1 pair)
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class RuleSet:
    """
    Rule configuration for hand classification.

    The shape search itself never changes; a rule set only decides which
    shape families are reported and whether input is checked first.
    """

    name: str = "Default"

    # Chiitoitsu (seven distinct pairs)
    allow_chiitoitsu: bool = True

    # Kokushi musou (thirteen orphans)
    allow_kokushi: bool = True

    # Check count array shape, per-tile counts and hand size before searching
    validate_input: bool = True

    def __repr__(self) -> str:
        return f"RuleSet({self.name})"


DEFAULT_RULES = RuleSet(
    name="Default",
    allow_chiitoitsu=True,
    allow_kokushi=True,
    validate_input=True,
)


# Only 4 melds + 1 pair counts as a win
STANDARD_ONLY_RULES = RuleSet(
    name="StandardOnly",
    allow_chiitoitsu=False,
    allow_kokushi=False,
    validate_input=True,
)


RULE_PRESETS = {
    "default": DEFAULT_RULES,
    "standard-only": STANDARD_ONLY_RULES,
}

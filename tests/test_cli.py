"""
Tests for the command-line classifier
"""

import pytest

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from mahjong_hands.cli import main, describe_hand
from mahjong_hands.rules import DEFAULT_RULES, STANDARD_ONLY_RULES


class TestDescribeHand:
    """Test report lines"""

    def test_standard(self):
        lines = describe_hand("123m456p789s11122z", DEFAULT_RULES)
        assert lines[0] == "Hand: 123m456p789s11122z (14 tiles)"
        assert lines[1] == "  Winning hand, 1 decomposition(s):"
        assert lines[2] == "    [STANDARD] 123m 456p 789s 111z 22z"

    def test_not_winning(self):
        lines = describe_hand("1234m5678p9s12355z", DEFAULT_RULES)
        assert lines[-1] == "  Not a winning hand"

    def test_kokushi_wait(self):
        lines = describe_hand("19m19p19s1234567z", DEFAULT_RULES)
        assert lines[-1] == "  Kokushi 13-sided wait: yes"

    def test_thirteen_tiles_no_wait(self):
        lines = describe_hand("123m456p789s1112z", DEFAULT_RULES)
        assert lines[-1] == "  Kokushi 13-sided wait: no"

    def test_standard_only_rules(self):
        lines = describe_hand("1122m3344p5566s77z", STANDARD_ONLY_RULES)
        assert lines[-1] == "  Not a winning hand"

    def test_bad_notation(self):
        with pytest.raises(ValueError):
            describe_hand("123q", DEFAULT_RULES)


class TestMain:
    """Test argument handling and exit codes"""

    def test_multiple_hands(self, capsys):
        assert main(["123m456p789s11122z", "1122m3344p5566s77z"]) == 0

        out = capsys.readouterr().out
        assert "[STANDARD] 123m 456p 789s 111z 22z" in out
        assert "[CHIITOITSU] 11m 22m 33p 44p 55s 66s 77z" in out

    def test_rules_option(self, capsys):
        assert main(["--rules", "standard-only", "1122m3344p5566s77z"]) == 0
        assert "Not a winning hand" in capsys.readouterr().out

    def test_invalid_hand(self, capsys):
        assert main(["123m"]) == 2
        assert "Error: Hand has 3 tiles" in capsys.readouterr().err

    def test_parse_error(self, capsys):
        assert main(["12x"]) == 2
        assert "Error:" in capsys.readouterr().err

    def test_unknown_rules(self):
        with pytest.raises(SystemExit):
            main(["--rules", "mcr", "123m456p789s11122z"])

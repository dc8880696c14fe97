#!/usr/bin/env python3
"""
Benchmark for hand classification

Times the yes/no winning check against full decomposition on predefined
hands and verifies that both agree.

Scenarios:
1. Simple standard hands - one decomposition
2. Ambiguous hands - several pair choices or meld splits
3. Special shapes - chiitoitsu, kokushi
4. Non-winning hands - search runs to exhaustion

Usage:
    python benchmark.py --repeat 2000
"""

import argparse
import sys
import time
from pathlib import Path
from typing import List
from dataclasses import dataclass

sys.path.insert(0, str(Path(__file__).parent))

from mahjong_hands.hand import decompose_hand, is_winning_hand
from mahjong_hands.parse import parse_counts


@dataclass
class BenchmarkCase:
    """A benchmark hand."""
    name: str
    hand: str  # Hand notation
    expected_structures: int


BENCHMARK_CASES = [
    BenchmarkCase("Simple standard", "123m456p789s11122z", 1),
    BenchmarkCase("All triplets", "111m222p333s44455z", 1),
    BenchmarkCase("Triplets or sequences", "111222333m11155z", 2),
    BenchmarkCase("Iipeikou", "112233m456p789s55z", 1),
    BenchmarkCase("Ryanpeikou", "112233m445566p77z", 2),
    BenchmarkCase("Nine gates", "11123455678999m", 1),
    BenchmarkCase("Chiitoitsu", "1122m3344p5566s77z", 1),
    BenchmarkCase("Kokushi", "19m19p19s12345677z", 1),
    BenchmarkCase("No shape", "1234m5678p9s12355z", 0),
    BenchmarkCase("Near miss", "1112345678999m1z", 0),
]


def time_call(fn, counts, repeat: int) -> float:
    """Mean seconds per call"""
    start = time.perf_counter()
    for _ in range(repeat):
        fn(counts)
    return (time.perf_counter() - start) / repeat


def run_all(cases: List[BenchmarkCase], repeat: int, verbose: bool = False) -> int:
    """Run every case, returning the number of failures."""
    failures = 0

    print(f"{'Case':<24}{'win (us)':>10}{'decomp (us)':>14}{'found':>7}")
    print("-" * 55)

    for case in cases:
        counts = parse_counts(case.hand)
        structures = decompose_hand(counts)
        wins = is_winning_hand(counts)

        ok = len(structures) == case.expected_structures and wins == bool(structures)
        if not ok:
            failures += 1

        win_time = time_call(is_winning_hand, counts, repeat) * 1e6
        decomp_time = time_call(decompose_hand, counts, repeat) * 1e6
        mark = "" if ok else "  ✗"
        print(f"{case.name:<24}{win_time:>10.1f}{decomp_time:>14.1f}{len(structures):>7}{mark}")

        if verbose:
            for structure in structures:
                print(f"    [{structure.kind.name}] {structure}")

    return failures


def main():
    parser = argparse.ArgumentParser(description="Benchmark hand classification")
    parser.add_argument("--repeat", type=int, default=1000, help="Calls per timing")
    parser.add_argument("--verbose", action="store_true")

    args = parser.parse_args()

    failures = run_all(BENCHMARK_CASES, args.repeat, args.verbose)

    if failures:
        print(f"\n✗ {failures} case(s) disagreed")
        sys.exit(1)
    print("\n✓ All cases agree")
    sys.exit(0)


if __name__ == "__main__":
    main()

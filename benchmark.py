"""
Benchmark: seqedit vs existing Levenshtein tools.

This benchmark compares seqedit against:
    1. rapidfuzz — C++ backed Levenshtein distance and editops
    2. python-Levenshtein — C extension for strings
    3. difflib — standard library SequenceMatcher opcodes

The point is NOT "we're faster" — the point is:
    seqedit works on ANY sequence of ==-comparable elements, takes a
    caller-defined cost per step, and reports relocations as Moves.
"""

import sys
import os
import time
import difflib

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from seqedit.steps import Move
from seqedit.costs import CostModel
from seqedit.core import levenshtein, edits, edits_with_cost_func


# ═══════════════════════════════════════════════════════════════════
#  TEST DATA
# ═══════════════════════════════════════════════════════════════════

WORD_PAIRS = [
    ("kitten", "sitting"),
    ("preterit", "zeitgeist"),
    ("garvey", "avery"),
    ("saturday", "sunday"),
    ("intention", "execution"),
    ("the quick brown fox jumps over the lazy dog",
     "the quick brown dog jumps over the lazy fox"),
]

CONFIG_A = """\
[server]
host = 0.0.0.0
port = 443
workers = 4
[database]
host = db.internal
port = 5432
name = production
[cache]
backend = redis
ttl = 300""".splitlines()

CONFIG_B = """\
[server]
host = 0.0.0.0
port = 8080
workers = 8
[cache]
backend = redis
ttl = 300
[database]
host = db.staging
port = 5432
name = production""".splitlines()


def _try_import(name):
    """Safely attempt to import an optional dependency by name."""
    import importlib
    try:
        return importlib.import_module(name)
    except ImportError:
        return None


def _timed(fn, *args):
    t0 = time.perf_counter()
    result = fn(*args)
    return result, time.perf_counter() - t0


# ═══════════════════════════════════════════════════════════════════
#  BENCHMARKS
# ═══════════════════════════════════════════════════════════════════

def benchmark_known_distances():
    """Distances on the classic word pairs."""
    print("=" * 70)
    print("  §1  KNOWN DISTANCES")
    print("=" * 70)
    print()
    for s1, s2 in WORD_PAIRS:
        d, dt = _timed(levenshtein, s1, s2)
        print(f"  lev(\"{s1[:20]}\", \"{s2[:20]}\") = {d:>3}   {dt*1e6:8.1f}µs")
    print()


def benchmark_line_diff():
    """Line-level edit script on a reordered config file."""
    print("=" * 70)
    print("  §2  LINE-LEVEL EDIT SCRIPT (config reorder)")
    print("=" * 70)
    print()

    script, dt = _timed(edits, CONFIG_A, CONFIG_B)
    moves = [s for s in script if isinstance(s, Move)]
    print(f"  Distance:        {levenshtein(CONFIG_A, CONFIG_B)}")
    print(f"  Edit steps:      {len(script)}  ({len(moves)} moves)")
    print(f"  Time:            {dt*1000:.2f}ms")
    for step in script:
        print(f"    {step!r}")
    print()

    expensive = CostModel(substitute=3)
    script, dt = _timed(edits_with_cost_func, expensive, CONFIG_A, CONFIG_B)
    print(f"  With substitute=3: {len(script)} steps, {dt*1000:.2f}ms")
    print()


def benchmark_vs_others():
    """Compare with rapidfuzz / python-Levenshtein / difflib (if available)."""
    print("=" * 70)
    print("  §3  COMPARISON WITH EXISTING TOOLS")
    print("=" * 70)
    print()

    s1 = "the quick brown fox jumps over the lazy dog" * 5
    s2 = "the quick brown dog jumps over the lazy fox" * 5

    d, dt = _timed(levenshtein, s1, s2)
    print(f"  seqedit:            d={d:>4}  {dt*1000:8.3f}ms")
    script, dt = _timed(edits, s1, s2)
    print(f"  seqedit (edits):    {len(script):>4} steps  {dt*1000:8.3f}ms")

    rapidfuzz = _try_import("rapidfuzz")
    if rapidfuzz:
        from rapidfuzz.distance import Levenshtein as RFLevenshtein
        d, dt = _timed(RFLevenshtein.distance, s1, s2)
        print(f"  rapidfuzz:          d={d:>4}  {dt*1000:8.3f}ms")
        ops, dt = _timed(RFLevenshtein.editops, s1, s2)
        print(f"  rapidfuzz (editops): {len(ops):>3} ops    {dt*1000:8.3f}ms  (no moves, no cost function)")
    else:
        print(f"  rapidfuzz:          NOT INSTALLED (pip install rapidfuzz)")

    python_levenshtein = _try_import("Levenshtein")
    if python_levenshtein:
        d, dt = _timed(python_levenshtein.distance, s1, s2)
        print(f"  python-Levenshtein: d={d:>4}  {dt*1000:8.3f}ms  (strings only)")
    else:
        print(f"  python-Levenshtein: NOT INSTALLED (pip install Levenshtein)")

    matcher = difflib.SequenceMatcher(None, s1, s2, autojunk=False)
    opcodes, dt = _timed(matcher.get_opcodes)
    changed = sum(1 for tag, *_ in opcodes if tag != "equal")
    print(f"  difflib:            {changed:>4} change blocks  {dt*1000:8.3f}ms  (not minimal)")
    print()


def benchmark_scaling():
    """How the two engines scale with sequence length."""
    print("=" * 70)
    print("  §4  SCALING")
    print("=" * 70)
    print()

    for n in [10, 50, 100, 500, 1000]:
        a = list(range(n))
        b = list(range(1, n + 1))  # Shifted by 1
        d, dt = _timed(levenshtein, a, b)
        print(f"  levenshtein  len {n:>5}: d={d:>5}  time={dt*1000:>9.2f}ms")
    print()

    for n in [10, 50, 100, 250, 500]:
        a = list(range(n))
        b = list(range(1, n + 1))
        script, dt = _timed(edits, a, b)
        print(f"  edits        len {n:>5}: steps={len(script):>4}  time={dt*1000:>9.2f}ms")
    print()


def main():
    print()
    print("╔══════════════════════════════════════════════════════════════════════╗")
    print("║          SEQEDIT — BENCHMARK SUITE                                   ║")
    print("╚══════════════════════════════════════════════════════════════════════╝")
    print()

    benchmark_known_distances()
    benchmark_line_diff()
    benchmark_vs_others()
    benchmark_scaling()


if __name__ == "__main__":
    main()

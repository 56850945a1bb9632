"""
seqedit.core — Levenshtein distance and minimum-cost edit scripts
=================================================================

§1  TWO ENGINES
───────────────

    levenshtein(s, t)                → int
    edits_with_cost_func(cost, s, t) → list[EditStep]

They share nothing but the comparison of elements with `==`.  The
edit-script engine does NOT call the distance engine: it runs its own
cost-weighted search, since the caller's cost function can make the
cheapest script differ from the shortest one.

Elements only need equality.  No hashing or ordering is required.


§2  THE DISTANCE
────────────────

    lev(s, [])        = |s|
    lev([], t)        = |t|
    lev(x:s, x:t)     = lev(s, t)                         (match is free)
    lev(x:s, y:t)     = 1 + min(lev(s, y:t),              (delete x)
                                lev(x:s, t),              (insert y)
                                lev(s, t))                (substitute)

The recursion is exponential.  `levenshtein` computes the same value
bottom-up over two rolling rows: O(|s|·|t|) time, O(min(|s|, |t|))
space, with the shorter sequence as the row.


§3  THE EDIT SCRIPT
───────────────────

The search walks from the END of both sequences.  Subproblem (i, j) is
"first i source elements → first j target elements":

    C(0, j) = Σ cost(Insert(t[k], k))  for k < j
    C(i, 0) = Σ cost(Delete(s[k], k))  for k < i
    C(i, j) = C(i-1, j-1)                              if s[i-1] == t[j-1]
            = min( cost(Delete(s[i-1], i-1))     + C(i-1, j),
                   cost(Insert(t[j-1], j-1))     + C(i, j-1),
                   cost(Substitute(t[j-1], j-1)) + C(i-1, j-1) )

Walking backwards is what fixes the index convention: a Delete's index
is the count of source elements still in front of it (its source
position), an Insert's or Substitute's index is the count of target
elements in front of it (its target position).

Ties are broken in the fixed order delete, insert, substitute: the
first minimum wins.  Under a constant cost function this reproduces the
standard minimal Levenshtein alignment.

C only depends on (i, j) and the (pure) cost function, so it is filled
as a table instead of being recomputed by recursion.  The chosen step of
every cell is kept next to its cost and the script is read back from
(|s|, |t|) to (0, 0).

Finally `seqedit.moves.reduce_moves` turns Delete/Insert pairs of equal
values into Moves.  The cost function has already run by then and never
sees a Move.


§4  REPLAY
──────────

`apply_edits` is the inverse operation:

    apply_edits(s, edits(s, t)) == list(t)

Author: seqedit contributors
License: MIT
"""

import logging
from typing import Any, Sequence

from .costs import CostFunction, uniform_cost
from .moves import reduce_moves
from .steps import Delete, EditStep, Insert, Move, Substitute


logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════
#  DISTANCE ENGINE
# ═══════════════════════════════════════════════════════════════════

def levenshtein(source: Sequence[Any], target: Sequence[Any]) -> int:
    """
    Minimum number of insertions, deletions and substitutions turning
    `source` into `target`.

    Symmetric, so the shorter sequence is always used as the DP row.
    """
    if len(target) > len(source):
        source, target = target, source

    m, n = len(source), len(target)
    if n == 0:
        return m

    # Space-optimized DP (two rows)
    prev = list(range(n + 1))
    curr = [0] * (n + 1)

    for i in range(1, m + 1):
        curr[0] = i
        s = source[i - 1]
        for j in range(1, n + 1):
            if s == target[j - 1]:
                curr[j] = prev[j - 1]
            else:
                curr[j] = 1 + min(
                    prev[j],        # deletion
                    curr[j - 1],    # insertion
                    prev[j - 1],    # substitution
                )
        prev, curr = curr, prev

    return prev[n]


def normalized_distance(source: Sequence[Any], target: Sequence[Any]) -> float:
    """
    Levenshtein distance scaled to [0, 1].

    0.0 = identical sequences
    1.0 = nothing in common position-wise (every element rewritten)

    Normalized by max(|source|, |target|); two empty sequences are 0.0.
    """
    longest = max(len(source), len(target))
    if longest == 0:
        return 0.0
    return levenshtein(source, target) / longest


# ═══════════════════════════════════════════════════════════════════
#  EDIT-SCRIPT ENGINE
# ═══════════════════════════════════════════════════════════════════

# Marks a table cell reached by matching equal elements (no step).
_MATCH = None


def _search(cost_fn: CostFunction,
            source: Sequence[Any],
            target: Sequence[Any]) -> list[EditStep]:
    """
    Minimum-cost Insert/Delete/Substitute script, before move reduction.
    """
    m, n = len(source), len(target)

    # cost[i][j], step[i][j]: best total cost of (i, j) and the step that
    # starts it (walking backwards), _MATCH when the elements are equal
    cost = [[0] * (n + 1) for _ in range(m + 1)]
    step: list[list[Any]] = [[_MATCH] * (n + 1) for _ in range(m + 1)]

    for j in range(1, n + 1):
        insert = Insert(target[j - 1], j - 1)
        cost[0][j] = cost[0][j - 1] + cost_fn(insert)
        step[0][j] = insert

    for i in range(1, m + 1):
        delete = Delete(source[i - 1], i - 1)
        cost[i][0] = cost[i - 1][0] + cost_fn(delete)
        step[i][0] = delete

    for i in range(1, m + 1):
        s = source[i - 1]
        row, above = cost[i], cost[i - 1]
        for j in range(1, n + 1):
            t = target[j - 1]
            if s == t:
                row[j] = above[j - 1]
                continue

            delete = Delete(s, i - 1)
            best_cost, best = above[j] + cost_fn(delete), delete

            insert = Insert(t, j - 1)
            c = row[j - 1] + cost_fn(insert)
            if c < best_cost:
                best_cost, best = c, insert

            substitute = Substitute(t, j - 1)
            c = above[j - 1] + cost_fn(substitute)
            if c < best_cost:
                best_cost, best = c, substitute

            row[j] = best_cost
            step[i][j] = best

    logger.debug("edit search: %dx%d table, minimal cost %d", m + 1, n + 1, cost[m][n])

    # Read the script back from the end of both sequences
    script: list[EditStep] = []
    i, j = m, n
    while i > 0 or j > 0:
        chosen = step[i][j]
        if chosen is _MATCH:
            i -= 1
            j -= 1
            continue
        script.append(chosen)
        if isinstance(chosen, Delete):
            i -= 1
        elif isinstance(chosen, Insert):
            j -= 1
        else:
            i -= 1
            j -= 1

    script.reverse()
    return script


def edits_with_cost_func(cost_fn: CostFunction,
                         source: Sequence[Any],
                         target: Sequence[Any]) -> list[EditStep]:
    """
    Minimum-cost edit script from `source` to `target` under `cost_fn`.

    `cost_fn` receives Insert, Delete and Substitute steps (never Move)
    and must return a non-negative int.  It must be pure: its results
    are combined once per (source prefix, target prefix) pair.

    The returned list is in left-to-right application order, with
    Delete/Insert pairs on equal values collapsed into Moves:

        >>> from seqedit.costs import CostModel
        >>> edits_with_cost_func(CostModel(substitute=3), "abc", "adc")
        [Insert('d', 1), Delete('b', 1)]
    """
    return reduce_moves(_search(cost_fn, source, target))


def edits(source: Sequence[Any], target: Sequence[Any]) -> list[EditStep]:
    """
    Edit script under uniform cost 1 per Insert/Delete/Substitute.

        >>> edits("kitten", "sitting")
        [Substitute('s', 0), Substitute('i', 4), Insert('g', 6)]
        >>> edits("garvey", "avery")
        [Delete('g', 0), Move('r', 2, 3)]
    """
    return edits_with_cost_func(uniform_cost, source, target)


# ═══════════════════════════════════════════════════════════════════
#  PATCH (apply edit script)
# ═══════════════════════════════════════════════════════════════════

def apply_edits(source: Sequence[Any], script: Sequence[EditStep]) -> list[Any]:
    """
    Apply an edit script to `source` and return the resulting list.

    Deletions (including the source side of Moves) are applied first,
    by source index.  Insertions, substitutions and Move targets follow,
    in ascending target index.

    Raises ValueError when the script does not fit `source`.
    """
    removed: set[int] = set()
    # (target index, value, replaces existing element)
    placements: list[tuple[int, Any, bool]] = []

    def _remove(value: Any, index: int) -> None:
        if not 0 <= index < len(source):
            raise ValueError(f"Source index {index} out of range for length {len(source)}")
        if index in removed:
            raise ValueError(f"Source index {index} removed twice")
        if source[index] != value:
            raise ValueError(f"Mismatch at source index {index}: {source[index]!r} != {value!r}")
        removed.add(index)

    for entry in script:
        if isinstance(entry, Delete):
            _remove(entry.value, entry.index)
        elif isinstance(entry, Move):
            _remove(entry.value, entry.from_index)
            placements.append((entry.to_index, entry.value, False))
        elif isinstance(entry, Insert):
            placements.append((entry.index, entry.value, False))
        elif isinstance(entry, Substitute):
            placements.append((entry.index, entry.value, True))
        else:
            raise TypeError(f"Not an edit step: {entry!r}")

    result = [item for k, item in enumerate(source) if k not in removed]

    for index, value, replaces in sorted(placements, key=lambda p: p[0]):
        if replaces:
            if not 0 <= index < len(result):
                raise ValueError(f"Substitute index {index} out of range for length {len(result)}")
            result[index] = value
        else:
            if not 0 <= index <= len(result):
                raise ValueError(f"Insert index {index} out of range for length {len(result)}")
            result.insert(index, value)

    return result

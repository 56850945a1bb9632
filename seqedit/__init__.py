"""
seqedit
=======

Levenshtein distance and minimum-cost edit scripts over any ordered
sequences whose elements support ==.

    levenshtein("kitten", "sitting")  → 3
    edits("kitten", "sitting")        → [Substitute('s', 0), Substitute('i', 4), Insert('g', 6)]
    edits("garvey", "avery")          → [Delete('g', 0), Move('r', 2, 3)]

Two independent engines:
  • levenshtein / normalized_distance — the scalar distance
  • edits / edits_with_cost_func — a typed edit script (insert, delete,
    substitute, move) under a pluggable cost function

and apply_edits to replay a script against its source.
"""

from seqedit.steps import EditStep, Insert, Delete, Substitute, Move
from seqedit.costs import CostFunction, CostModel, uniform_cost, script_cost
from seqedit.moves import reduce_moves
from seqedit.core import (
    # Distance
    levenshtein,
    normalized_distance,
    # Edit scripts
    edits,
    edits_with_cost_func,
    apply_edits,
)
from seqedit.formats import (
    string_to_seq, seq_to_string,
    levenshtein_from_strings, edits_from_strings, edits_from_strings_with_cost_func,
    apply_edits_to_string,
    to_records, from_records, to_json, from_json,
)

__version__ = "0.1.0"
__all__ = [
    "EditStep", "Insert", "Delete", "Substitute", "Move",
    "CostFunction", "CostModel", "uniform_cost", "script_cost",
    "reduce_moves",
    "levenshtein", "normalized_distance",
    "edits", "edits_with_cost_func", "apply_edits",
    "string_to_seq", "seq_to_string",
    "levenshtein_from_strings", "edits_from_strings", "edits_from_strings_with_cost_func",
    "apply_edits_to_string",
    "to_records", "from_records", "to_json", "from_json",
]

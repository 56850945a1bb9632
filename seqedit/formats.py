"""
seqedit.formats — Adapters around the sequence engines.

Supported conversions:
    • Strings ↔ character sequences (the "from strings" entry points)
    • Edit scripts ↔ plain records (dicts) ↔ JSON strings
"""

import json
from typing import Any, Iterable, Mapping

from .core import apply_edits, edits, edits_with_cost_func, levenshtein
from .costs import CostFunction
from .steps import Delete, EditStep, Insert, Move, Substitute


# ═══════════════════════════════════════════════════════════════════
#  STRINGS ↔ CHARACTER SEQUENCES
# ═══════════════════════════════════════════════════════════════════

def string_to_seq(s: str) -> tuple[str, ...]:
    """Split a string into its sequence of characters."""
    return tuple(s)


def seq_to_string(seq: Iterable[str]) -> str:
    """Inverse of string_to_seq."""
    return "".join(seq)


def levenshtein_from_strings(a: str, b: str) -> int:
    """Character-level Levenshtein distance between two strings."""
    return levenshtein(string_to_seq(a), string_to_seq(b))


def edits_from_strings(a: str, b: str) -> list[EditStep]:
    """Character-level edit script between two strings (uniform cost)."""
    return edits(string_to_seq(a), string_to_seq(b))


def edits_from_strings_with_cost_func(cost_fn: CostFunction, a: str, b: str) -> list[EditStep]:
    """Character-level edit script between two strings under `cost_fn`."""
    return edits_with_cost_func(cost_fn, string_to_seq(a), string_to_seq(b))


def apply_edits_to_string(s: str, script: Iterable[EditStep]) -> str:
    """
    Apply a character-level edit script to a string.

        apply_edits_to_string(a, edits_from_strings(a, b)) == b
    """
    return seq_to_string(apply_edits(string_to_seq(s), list(script)))


# ═══════════════════════════════════════════════════════════════════
#  EDIT SCRIPTS ↔ RECORDS / JSON
# ═══════════════════════════════════════════════════════════════════

_INDEXED = {cls.kind: cls for cls in (Insert, Delete, Substitute)}


def to_records(script: Iterable[EditStep]) -> list[dict[str, Any]]:
    """
    Convert an edit script to a list of plain dicts:

        Insert('g', 6)    → {"op": "insert", "value": "g", "index": 6}
        Move('r', 2, 3)   → {"op": "move", "value": "r", "from": 2, "to": 3}
    """
    records = []
    for step in script:
        if isinstance(step, Move):
            records.append({"op": step.kind, "value": step.value,
                            "from": step.from_index, "to": step.to_index})
        elif isinstance(step, (Insert, Delete, Substitute)):
            records.append({"op": step.kind, "value": step.value, "index": step.index})
        else:
            raise TypeError(f"Not an edit step: {step!r}")
    return records


def _field(record: Mapping[str, Any], name: str) -> Any:
    try:
        return record[name]
    except KeyError:
        raise ValueError(f"Edit record {record!r} has no {name!r} field") from None


def from_records(records: Iterable[Mapping[str, Any]]) -> list[EditStep]:
    """Inverse of to_records."""
    script: list[EditStep] = []
    for record in records:
        op = _field(record, "op")
        value = _field(record, "value")
        if op == Move.kind:
            script.append(Move(value, _field(record, "from"), _field(record, "to")))
        elif op in _INDEXED:
            script.append(_INDEXED[op](value, _field(record, "index")))
        else:
            raise ValueError(f"Unknown edit op: {op!r}")
    return script


def to_json(script: Iterable[EditStep], **kwargs) -> str:
    """Convert an edit script to a JSON string (values must be JSON-serializable)."""
    return json.dumps(to_records(script), **kwargs)


def from_json(text: str) -> list[EditStep]:
    """Parse a JSON string produced by to_json."""
    return from_records(json.loads(text))

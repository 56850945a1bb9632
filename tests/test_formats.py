"""
Tests for seqedit.formats — string adapters and record/JSON conversion.
"""

import sys
import os
import json
import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import seqedit
from seqedit.steps import Insert, Delete, Substitute, Move
from seqedit.costs import CostModel
from seqedit.formats import (
    string_to_seq, seq_to_string,
    levenshtein_from_strings, edits_from_strings, edits_from_strings_with_cost_func,
    apply_edits_to_string,
    to_records, from_records, to_json, from_json,
)


# ═══════════════════════════════════════════════════════════════════
#  STRING ADAPTERS
# ═══════════════════════════════════════════════════════════════════

class TestStringAdapters:

    def test_string_to_seq(self):
        assert string_to_seq("") == ()
        assert string_to_seq("abc") == ("a", "b", "c")
        assert seq_to_string(string_to_seq("héllo")) == "héllo"

    @pytest.mark.parametrize("a,b,expected", [
        ("kitten", "sitting", 3),
        ("preterit", "zeitgeist", 6),
        ("garvey", "avery", 3),
        ("", "", 0),
    ])
    def test_levenshtein_from_strings(self, a, b, expected):
        assert levenshtein_from_strings(a, b) == expected

    def test_edits_from_strings(self):
        assert edits_from_strings("kitten", "sitting") == [
            Substitute("s", 0), Substitute("i", 4), Insert("g", 6),
        ]
        assert edits_from_strings("garvey", "avery") == [Delete("g", 0), Move("r", 2, 3)]

    def test_edits_from_strings_with_cost_func(self):
        script = edits_from_strings_with_cost_func(CostModel(substitute=3), "abc", "adc")
        assert script == [Insert("d", 1), Delete("b", 1)]

    @pytest.mark.parametrize("a,b", [
        ("kitten", "sitting"),
        ("garvey", "avery"),
        ("preterit", "zeitgeist"),
        ("", "abc"),
        ("abc", ""),
        ("mississippi", "missouri"),
    ])
    def test_apply_edits_to_string(self, a, b):
        assert apply_edits_to_string(a, edits_from_strings(a, b)) == b


# ═══════════════════════════════════════════════════════════════════
#  RECORDS / JSON
# ═══════════════════════════════════════════════════════════════════

class TestRecords:

    def test_to_records(self):
        script = [Delete("g", 0), Move("r", 2, 3), Substitute("x", 1), Insert("y", 4)]
        assert to_records(script) == [
            {"op": "delete", "value": "g", "index": 0},
            {"op": "move", "value": "r", "from": 2, "to": 3},
            {"op": "substitute", "value": "x", "index": 1},
            {"op": "insert", "value": "y", "index": 4},
        ]

    def test_records_preserve_script(self):
        script = edits_from_strings("preterit", "zeitgeist")
        assert from_records(to_records(script)) == script

    def test_json_preserves_script(self):
        script = seqedit.edits([1, 2, 3, 4], [4, 2, 3, 5])
        text = to_json(script)
        assert isinstance(json.loads(text), list)
        assert from_json(text) == script

    def test_json_kwargs_forwarded(self):
        text = to_json([Insert("a", 0)], indent=2)
        assert "\n" in text

    def test_unknown_op(self):
        with pytest.raises(ValueError):
            from_records([{"op": "transpose", "value": "a", "index": 0}])

    def test_missing_field(self):
        with pytest.raises(ValueError):
            from_records([{"op": "insert", "value": "a"}])
        with pytest.raises(ValueError):
            from_records([{"op": "move", "value": "a", "from": 1}])

    def test_not_a_step(self):
        with pytest.raises(TypeError):
            to_records(["insert"])


# ═══════════════════════════════════════════════════════════════════
#  PUBLIC SURFACE
# ═══════════════════════════════════════════════════════════════════

class TestPackage:

    def test_exports(self):
        for name in seqedit.__all__:
            assert hasattr(seqedit, name), name

    def test_top_level_scenarios(self):
        assert seqedit.levenshtein("kitten", "sitting") == 3
        assert seqedit.edits("kitten", "") == [
            Delete(c, i) for i, c in enumerate("kitten")
        ]

"""Tests for the top-level document comparison and its report.

Documents are built in memory from raw text with json.loads so the parsed
value and the raw text always agree.
"""

from __future__ import annotations

import json
import unittest

from jsondelta.core.document_diff import diff_documents
from jsondelta.core.position import SENTINEL_POSITION
from jsondelta.core.types import Change, DiffPolicy, DiffRecord, DiffReport, KeyEntry


def _diff(text_a: str, text_b: str, policy: DiffPolicy | None = None) -> DiffReport:
    return diff_documents(
        json.loads(text_a), json.loads(text_b), text_a, text_b, policy
    )


def _entry(report: DiffReport, segment) -> KeyEntry:
    for entry in report.entries:
        if entry.segment == segment:
            return entry
    raise AssertionError(f"no entry for {segment!r}")


# ============================================================================
# Classification
# ============================================================================


class TestClassification(unittest.TestCase):
    def test_identical_documents(self):
        text = '{"a": 1, "b": {"c": [1, 2]}}'
        report = _diff(text, text)
        self.assertFalse(report.has_differences)
        self.assertEqual(
            [e.change for e in report.entries], [Change.UNCHANGED, Change.UNCHANGED]
        )
        self.assertTrue(all(e.records == [] for e in report.entries))

    def test_disjoint_keys(self):
        report = _diff('{"a":1}', '{"b":1}')
        self.assertEqual(_entry(report, "a").change, Change.ADDED_ON_LEFT)
        self.assertEqual(_entry(report, "b").change, Change.ADDED_ON_RIGHT)
        self.assertEqual(report.changed_entries, [])

    def test_name_and_tags_scenario(self):
        report = _diff(
            '{"name":"x","tags":["a","b"]}',
            '{"name":"y","tags":["a","b","c"]}',
            DiffPolicy.verbose(),
        )
        name = _entry(report, "name")
        tags = _entry(report, "tags")
        self.assertEqual(name.change, Change.CHANGED)
        self.assertEqual(name.records, [])
        self.assertEqual(tags.change, Change.CHANGED)
        self.assertEqual(
            tags.records,
            [
                DiffRecord(("tags", 0), Change.UNCHANGED),
                DiffRecord(("tags", 1), Change.UNCHANGED),
                DiffRecord(("tags", 2), Change.ADDED_ON_RIGHT),
            ],
        )

    def test_default_policy_omits_unchanged_records(self):
        report = _diff('{"tags":["a","b"]}', '{"tags":["a","b","c"]}')
        self.assertEqual(
            _entry(report, "tags").records,
            [DiffRecord(("tags", 2), Change.ADDED_ON_RIGHT)],
        )

    def test_kind_mismatch_at_top_level_is_leaf(self):
        report = _diff('{"x": 1}', '{"x": [1]}')
        entry = _entry(report, "x")
        self.assertEqual(entry.change, Change.CHANGED)
        self.assertEqual(entry.records, [])

    def test_every_key_appears_once(self):
        report = _diff('{"a":1,"b":2,"c":3}', '{"c":4,"d":5,"a":1}')
        segments = [e.segment for e in report.entries]
        self.assertEqual(sorted(segments), ["a", "b", "c", "d"])
        self.assertEqual(len(report.ordered), 4)

    def test_symmetry_of_detection(self):
        text_a = '{"a": 1, "shared": {"x": 1}}'
        text_b = '{"b": 1, "shared": {"x": 2}}'
        forward = {e.segment: e.change for e in _diff(text_a, text_b).entries}
        backward = {e.segment: e.change for e in _diff(text_b, text_a).entries}
        self.assertEqual(forward["a"], Change.ADDED_ON_LEFT)
        self.assertEqual(backward["a"], Change.ADDED_ON_RIGHT)
        self.assertEqual(forward["b"], Change.ADDED_ON_RIGHT)
        self.assertEqual(backward["b"], Change.ADDED_ON_LEFT)
        self.assertEqual(forward["shared"], backward["shared"])

    def test_counts(self):
        report = _diff('{"a":1,"b":2,"c":3}', '{"a":1,"b":5,"d":4}')
        counts = report.counts()
        self.assertEqual(counts[Change.UNCHANGED], 1)
        self.assertEqual(counts[Change.CHANGED], 1)
        self.assertEqual(counts[Change.ADDED_ON_LEFT], 1)
        self.assertEqual(counts[Change.ADDED_ON_RIGHT], 1)


# ============================================================================
# Ordering
# ============================================================================


class TestOrdering(unittest.TestCase):
    def test_listing_follows_text_of_b(self):
        report = _diff('{"a": 2, "b": 1}', '{"b": 1, "a": 2}')
        self.assertEqual([e.segment for e in report.ordered], ["b", "a"])

    def test_discovery_order_follows_a(self):
        report = _diff('{"a": 2, "b": 1}', '{"b": 1, "a": 2}')
        self.assertEqual([e.segment for e in report.entries], ["a", "b"])

    def test_removed_keys_take_sentinel_and_sort_first(self):
        report = _diff('{"z": 1, "gone": 2}', '{\n"z": 1\n}')
        gone = _entry(report, "gone")
        self.assertEqual(gone.position, SENTINEL_POSITION)
        self.assertEqual([e.segment for e in report.ordered], ["gone", "z"])

    def test_removed_key_is_not_looked_up_in_b(self):
        # "gone" appears in B as a string value, but removed keys never look up
        report = _diff('{"gone": 1}', '{"k": "gone"}')
        self.assertEqual(_entry(report, "gone").position, SENTINEL_POSITION)

    def test_sentinel_ties_keep_discovery_order(self):
        report = _diff('{"x": 1, "y": 2, "z": 3}', "{}")
        self.assertEqual([e.segment for e in report.ordered], ["x", "y", "z"])

    def test_row_then_column(self):
        text_b = '{"c": 1, "b": 2,\n "a": 3}'
        report = _diff('{"a": 3, "b": 2, "c": 1}', text_b)
        self.assertEqual([e.segment for e in report.ordered], ["c", "b", "a"])
        self.assertEqual(_entry(report, "a").position, (2, 2))

    def test_positions_from_a(self):
        policy = DiffPolicy(position_source="a")
        report = _diff('{"b": 1, "a": 2}', '{"a": 2, "new": 0, "b": 1}', policy)
        self.assertEqual(_entry(report, "new").position, SENTINEL_POSITION)
        self.assertEqual([e.segment for e in report.ordered], ["new", "b", "a"])


# ============================================================================
# Non-object roots
# ============================================================================


class TestNonObjectRoots(unittest.TestCase):
    def test_array_roots_entry_per_index(self):
        report = _diff("[1, 2, 3]", "[1, 5]")
        self.assertEqual(
            [(e.segment, e.change) for e in report.ordered],
            [
                (0, Change.UNCHANGED),
                (1, Change.CHANGED),
                (2, Change.ADDED_ON_LEFT),
            ],
        )
        self.assertTrue(all(e.position == SENTINEL_POSITION for e in report.entries))

    def test_array_root_nested_records(self):
        report = _diff('[{"a": 1}]', '[{"a": 2}]')
        self.assertEqual(
            report.entries[0].records, [DiffRecord((0, "a"), Change.CHANGED)]
        )

    def test_object_against_array_root(self):
        report = _diff('{"k": 1}', "[1]")
        self.assertEqual(
            [(e.segment, e.change) for e in report.entries],
            [("k", Change.ADDED_ON_LEFT)],
        )

    def test_scalar_roots(self):
        changed = _diff("1", '"1"')
        self.assertEqual(len(changed.entries), 1)
        self.assertIsNone(changed.entries[0].segment)
        self.assertEqual(changed.entries[0].change, Change.CHANGED)

        same = _diff("true", "true")
        self.assertEqual(same.entries[0].change, Change.UNCHANGED)
        self.assertFalse(same.has_differences)

    def test_empty_object_against_scalar(self):
        report = _diff("{}", "5")
        self.assertEqual(
            [(e.segment, e.change) for e in report.entries], [(None, Change.CHANGED)]
        )
        self.assertTrue(report.has_differences)

    def test_empty_object_against_empty_array(self):
        report = _diff("{}", "[]")
        self.assertEqual(report.entries[0].change, Change.CHANGED)

    def test_empty_objects_have_no_entries(self):
        report = _diff("{}", "{ }")
        self.assertEqual(report.entries, [])
        self.assertFalse(report.has_differences)


# ============================================================================
# Report helpers
# ============================================================================


class TestReport(unittest.TestCase):
    def test_sizes_and_length_order(self):
        report = _diff('{"a":1}', '{"a": 1}')
        self.assertEqual((report.size_a, report.size_b), (7, 8))
        self.assertEqual(report.length_order, "Less")

    def test_sizes_count_utf8_bytes(self):
        report = _diff('{"a":"é"}', '{"a":"e"}')
        self.assertEqual(report.size_a, 10)
        self.assertEqual(report.size_b, 9)
        self.assertEqual(report.length_order, "Greater")

    def test_equal_length(self):
        report = _diff('{"a":1}', '{"a":2}')
        self.assertEqual(report.length_order, "Equal")

    def test_invalid_position_source(self):
        with self.assertRaises(ValueError):
            DiffPolicy(position_source="c")

    def test_summary_logged_at_info(self):
        with self.assertLogs("jsondelta.core.document_diff", level="INFO") as logs:
            _diff('{"a":1}', '{"a":2}')
        self.assertIn("changed=1", logs.output[0])


if __name__ == "__main__":
    unittest.main()

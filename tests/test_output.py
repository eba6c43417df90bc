"""
Tests for the JSON artifact in output.py.

Verifies that write_dataset() produces the document layout the viewer
consumes (field names, types, metadata) and that load_dataset() reads it
back into an equal Dataset.

Run: uv run pytest tests/test_output.py -v
"""

import json

from scotus_concurrence.affiliations import Affiliation
from scotus_concurrence.canonicalize import canonicalize
from scotus_concurrence.models import Outcome
from scotus_concurrence.output import (
    dataset_from_dict,
    dataset_to_dict,
    load_dataset,
    write_dataset,
)

# ── Fixtures ─────────────────────────────────────────────────────────────────

_STAMP = "2025-03-20T20:35:13.000Z"


def _make_dataset():
    rows = [
        ("1946-001", "1946", "HLBlack", "1"),
        ("1946-001", "1946", "FFrankfurter", "2"),
        ("1946-002", "1946", "HLBlack", "2"),
        ("1946-002", "1946", "XYUnlisted", "2"),
        ("1947-001", "1947", "FFrankfurter", "1"),
    ]
    return canonicalize(
        [
            {"caseId": c, "term": t, "justiceName": j, "majority": m}
            for c, t, j, m in rows
        ],
        source="unit test",
        generated_at=_STAMP,
    )


# ── dataset_to_dict() ────────────────────────────────────────────────────────


class TestDatasetToDict:
    """Document layout."""

    def test_top_level_keys(self):
        doc = dataset_to_dict(_make_dataset())
        assert list(doc) == ["cases", "justices", "metadata"]

    def test_case_entry(self):
        doc = dataset_to_dict(_make_dataset())
        assert doc["cases"][0] == {
            "id": "1946-001",
            "term": 1946,
            "votes": {"HLBlack": 1, "FFrankfurter": 2},
        }

    def test_vote_codes_are_plain_ints(self):
        doc = dataset_to_dict(_make_dataset())
        code = doc["cases"][0]["votes"]["HLBlack"]
        assert type(code) is int

    def test_justice_entry(self):
        doc = dataset_to_dict(_make_dataset())
        assert doc["justices"]["FFrankfurter"] == {
            "name": "F. Frankfurter",
            "firstTerm": 1946,
            "lastTerm": 1947,
            "party": "D",
        }

    def test_unknown_party_is_null(self):
        doc = dataset_to_dict(_make_dataset())
        assert doc["justices"]["XYUnlisted"]["party"] is None

    def test_metadata(self):
        doc = dataset_to_dict(_make_dataset())
        assert doc["metadata"] == {
            "minTerm": 1946,
            "maxTerm": 1947,
            "totalCases": 3,
            "totalJustices": 3,
            "generatedAt": _STAMP,
            "source": "unit test",
        }


# ── write_dataset() / load_dataset() ─────────────────────────────────────────


class TestWriteAndLoad:
    """Files on disk."""

    def test_creates_parent_dirs(self, tmp_path):
        path = tmp_path / "data" / "nested" / "scdb-votes.json"
        size = write_dataset(_make_dataset(), path)
        assert path.exists()
        assert size == path.stat().st_size

    def test_compact_json(self, tmp_path):
        path = tmp_path / "out.json"
        write_dataset(_make_dataset(), path)
        text = path.read_text(encoding="utf-8")
        assert "\n" not in text
        assert ", " not in text
        assert json.loads(text)["metadata"]["totalCases"] == 3

    def test_load_round_trip(self, tmp_path):
        ds = _make_dataset()
        path = tmp_path / "out.json"
        write_dataset(ds, path)
        loaded = load_dataset(path)
        assert loaded == ds
        loaded.validate()

    def test_loaded_types(self, tmp_path):
        path = tmp_path / "out.json"
        write_dataset(_make_dataset(), path)
        loaded = load_dataset(path)
        assert loaded.cases[0].votes["FFrankfurter"] is Outcome.DISSENT
        assert loaded.members["HLBlack"].affiliation is Affiliation.DEMOCRAT


# ── dataset_from_dict() ──────────────────────────────────────────────────────


class TestDatasetFromDict:
    """Lenient reading of hand-edited or older documents."""

    def test_unrecognized_party_loads_as_unknown(self):
        doc = dataset_to_dict(_make_dataset())
        doc["justices"]["HLBlack"]["party"] = "Bull Moose"
        assert dataset_from_dict(doc).members["HLBlack"].affiliation is None

    def test_missing_name_falls_back_to_id(self):
        doc = dataset_to_dict(_make_dataset())
        del doc["justices"]["HLBlack"]["name"]
        assert dataset_from_dict(doc).members["HLBlack"].name == "HLBlack"

    def test_empty_document(self):
        ds = dataset_from_dict({})
        assert ds.total_cases == 0
        assert ds.min_period is None

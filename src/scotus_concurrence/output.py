"""JSON artifact written by the preprocessing step and read by the viewer.

Field names match the document the browser viewer already consumes
(``cases``/``justices``/``metadata`` with camelCase keys).
"""

import json
from pathlib import Path

from scotus_concurrence.affiliations import parse_affiliation
from scotus_concurrence.models import Case, Dataset, Member, Outcome


def dataset_to_dict(dataset: Dataset) -> dict:
    """Convert a Dataset to the JSON-ready artifact structure."""
    return {
        "cases": [
            {
                "id": case.case_id,
                "term": case.period,
                "votes": {m: int(outcome) for m, outcome in case.votes.items()},
            }
            for case in dataset.cases
        ],
        "justices": {
            member_id: {
                "name": m.name,
                "firstTerm": m.first_period,
                "lastTerm": m.last_period,
                "party": m.affiliation.value if m.affiliation else None,
            }
            for member_id, m in dataset.members.items()
        },
        "metadata": {
            "minTerm": dataset.min_period,
            "maxTerm": dataset.max_period,
            "totalCases": dataset.total_cases,
            "totalJustices": dataset.total_members,
            "generatedAt": dataset.generated_at,
            "source": dataset.source,
        },
    }


def dataset_from_dict(doc: dict) -> Dataset:
    """Rebuild a Dataset from a parsed artifact document."""
    members = {
        member_id: Member(
            member_id=member_id,
            name=info.get("name") or member_id,
            first_period=int(info["firstTerm"]),
            last_period=int(info["lastTerm"]),
            affiliation=parse_affiliation(info.get("party")),
        )
        for member_id, info in doc.get("justices", {}).items()
    }
    cases = tuple(
        Case(
            case_id=str(entry["id"]),
            period=int(entry["term"]),
            votes={m: Outcome(int(code)) for m, code in entry["votes"].items()},
        )
        for entry in doc.get("cases", [])
    )
    metadata = doc.get("metadata", {})
    return Dataset(
        cases=cases,
        members=members,
        min_period=metadata.get("minTerm"),
        max_period=metadata.get("maxTerm"),
        generated_at=metadata.get("generatedAt", ""),
        source=metadata.get("source", ""),
    )


def write_dataset(dataset: Dataset, path: Path) -> int:
    """Write the artifact as compact JSON. Returns the file size in bytes."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(dataset_to_dict(dataset), f, separators=(",", ":"))
    return path.stat().st_size


def load_dataset(path: Path) -> Dataset:
    """Read an artifact written by ``write_dataset``."""
    with open(path, encoding="utf-8") as f:
        return dataset_from_dict(json.load(f))

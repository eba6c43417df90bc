"""Fold parsed SCDB rows into a normalized Dataset.

Sources are folded in the order they are given. When two sources (or two
rows of one source) carry an outcome for the same case and member, the later
one wins. A case keeps the period of the first row that mentioned it.
"""

import re
from collections import Counter
from collections.abc import Iterable, Mapping
from datetime import datetime, timezone

from scotus_concurrence.affiliations import lookup_affiliation
from scotus_concurrence.config import (
    CASE_ID_FIELD,
    MEMBER_ID_FIELD,
    OUTCOME_FIELD,
    PERIOD_FIELD,
    SOURCE_LABEL,
)
from scotus_concurrence.models import Case, Dataset, Member, Outcome, VoteRecord

# Initials, capitalized surname, optional disambiguating digit: "JHarlan2"
_MEMBER_ID_RE = re.compile(r"^([A-Z]+)([A-Z][a-z]+)(\d?)$")
_INT_RE = re.compile(r"^[+-]?[0-9]+$")

# Rejection reasons, in the order they are checked
REJECT_CASE_ID = "missing case id"
REJECT_PERIOD = "unparseable period"
REJECT_MEMBER_ID = "missing member id"
REJECT_OUTCOME = "non-participation"


def format_member_name(member_id: str) -> str:
    """Derive a display name from an SCDB identifier.

    "HLBlack" -> "H.L. Black", "JHarlan2" -> "J. Harlan (II)".
    Identifiers that do not follow the initials+surname pattern are returned
    unchanged.
    """
    match = _MEMBER_ID_RE.match(member_id)
    if not match:
        return member_id
    initials, surname, digit = match.groups()
    suffix = ""
    if digit:
        suffix = " (I)" if digit == "1" else " (II)"
    return f"{'.'.join(initials)}. {surname}{suffix}"


def _parse_int(value: str | None) -> int | None:
    # ASCII digits only; int() alone also takes "1_0" and non-ASCII digits
    text = (value or "").strip()
    if not _INT_RE.match(text):
        return None
    return int(text)


def classify_row(row: Mapping[str, str]) -> VoteRecord | str:
    """Convert a parsed row to a VoteRecord, or return the rejection reason."""
    case_id = (row.get(CASE_ID_FIELD) or "").strip()
    if not case_id:
        return REJECT_CASE_ID
    period = _parse_int(row.get(PERIOD_FIELD))
    if period is None:
        return REJECT_PERIOD
    member_id = (row.get(MEMBER_ID_FIELD) or "").strip()
    if not member_id:
        return REJECT_MEMBER_ID
    code = _parse_int(row.get(OUTCOME_FIELD))
    if code not in (Outcome.MAJORITY, Outcome.DISSENT):
        return REJECT_OUTCOME
    return VoteRecord(case_id=case_id, period=period, member_id=member_id, outcome=Outcome(code))


def to_vote_record(row: Mapping[str, str]) -> VoteRecord | None:
    """Convert a parsed row to a VoteRecord, or None if the row is rejected."""
    result = classify_row(row)
    return result if isinstance(result, VoteRecord) else None


class Canonicalizer:
    """Accumulates vote records and publishes an immutable Dataset."""

    def __init__(self) -> None:
        # case id -> period of the first row that mentioned it
        self._periods: dict[str, int] = {}
        self._votes: dict[str, dict[str, Outcome]] = {}
        self._members: dict[str, Member] = {}
        self.accepted = 0
        self.rejected: Counter[str] = Counter()
        self.sources: list[str] = []

    def add_record(self, record: VoteRecord) -> None:
        """Fold one accepted record into the case and member tables."""
        if record.case_id not in self._periods:
            self._periods[record.case_id] = record.period
            self._votes[record.case_id] = {}
        self._votes[record.case_id][record.member_id] = record.outcome

        member = self._members.get(record.member_id)
        if member is None:
            self._members[record.member_id] = Member(
                member_id=record.member_id,
                name=format_member_name(record.member_id),
                first_period=record.period,
                last_period=record.period,
                affiliation=lookup_affiliation(record.member_id),
            )
        else:
            self._members[record.member_id] = member.observe(record.period)
        self.accepted += 1

    def add_records(self, rows: Iterable[Mapping[str, str]]) -> int:
        """Fold parsed rows in order; returns how many were accepted."""
        accepted = 0
        for row in rows:
            result = classify_row(row)
            if isinstance(result, str):
                self.rejected[result] += 1
                continue
            self.add_record(result)
            accepted += 1
        return accepted

    def add_source(self, rows: Iterable[Mapping[str, str]], label: str) -> int:
        """Fold one named source after any previously added ones."""
        self.sources.append(label)
        return self.add_records(rows)

    def build(self, source: str = SOURCE_LABEL, generated_at: str | None = None) -> Dataset:
        """Snapshot the folded state as a Dataset.

        The snapshot shares no mutable state with the canonicalizer, so
        records added afterwards never show up in an already built Dataset.
        """
        cases = sorted(
            (
                Case(case_id, period, self._votes[case_id])
                for case_id, period in self._periods.items()
            ),
            key=lambda c: c.period,
        )
        if generated_at is None:
            generated_at = (
                datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
            )
        return Dataset(
            cases=tuple(cases),
            members=self._members,
            min_period=cases[0].period if cases else None,
            max_period=cases[-1].period if cases else None,
            generated_at=generated_at,
            source=source,
        )


def canonicalize(
    *sources: Iterable[Mapping[str, str]],
    source: str = SOURCE_LABEL,
    generated_at: str | None = None,
) -> Dataset:
    """Fold every source, first to last, and build the Dataset."""
    canon = Canonicalizer()
    for rows in sources:
        canon.add_records(rows)
    return canon.build(source=source, generated_at=generated_at)

"""Data classes for vote records, the normalized dataset and agreement views."""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field, replace
from enum import IntEnum
from types import MappingProxyType

import numpy as np

from scotus_concurrence.affiliations import Affiliation


class Outcome(IntEnum):
    """SCDB ``majority`` codes that count as participation."""

    MAJORITY = 1
    DISSENT = 2


@dataclass(frozen=True)
class VoteRecord:
    """One member's outcome on one case, as read from a source row."""

    case_id: str
    period: int
    member_id: str
    outcome: Outcome


@dataclass(frozen=True)
class Case:
    """One decided case and the outcome code of every participating member.

    ``votes`` is copied into a read-only mapping on construction.
    """

    case_id: str
    period: int
    votes: Mapping[str, Outcome] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "votes", MappingProxyType(dict(self.votes)))


@dataclass(frozen=True)
class Member:
    """A member of the court and the span of periods they voted in."""

    member_id: str
    name: str
    first_period: int
    last_period: int
    affiliation: Affiliation | None = None

    def observe(self, period: int) -> "Member":
        """Return a copy whose active span includes ``period``."""
        return replace(
            self,
            first_period=min(self.first_period, period),
            last_period=max(self.last_period, period),
        )


@dataclass(frozen=True)
class Dataset:
    """Normalized cases and member metadata, built once per load.

    ``cases`` is ordered by period; ties keep the order in which case
    identifiers were first seen. ``min_period``/``max_period`` are None only
    for a dataset with no cases. Cases, members and both mappings are
    read-only.
    """

    cases: tuple[Case, ...]
    members: Mapping[str, Member]
    min_period: int | None
    max_period: int | None
    generated_at: str = ""
    source: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "cases", tuple(self.cases))
        object.__setattr__(self, "members", MappingProxyType(dict(self.members)))

    @property
    def total_cases(self) -> int:
        return len(self.cases)

    @property
    def total_members(self) -> int:
        return len(self.members)

    def validate(self) -> None:
        """Raise ValueError if any structural invariant is broken."""
        previous = None
        for case in self.cases:
            if not case.votes:
                raise ValueError(f"case {case.case_id} has no votes")
            if previous is not None and case.period < previous:
                raise ValueError(f"case {case.case_id} is out of period order")
            previous = case.period
            missing = [m for m in case.votes if m not in self.members]
            if missing:
                raise ValueError(f"case {case.case_id} references unknown members: {missing}")
        for member in self.members.values():
            if member.first_period > member.last_period:
                raise ValueError(f"member {member.member_id} has first period after last")
        if self.cases:
            periods = [c.period for c in self.cases]
            if (self.min_period, self.max_period) != (min(periods), max(periods)):
                raise ValueError("period bounds do not match the case set")
        elif self.min_period is not None or self.max_period is not None:
            raise ValueError("empty dataset must not carry period bounds")


@dataclass(frozen=True)
class AgreementCell:
    """Agreement counts for one ordered pair of distinct members."""

    agreed: int
    total: int

    @property
    def rate(self) -> float | None:
        """Fraction of shared cases with the same outcome; None without shared cases."""
        if self.total == 0:
            return None
        return self.agreed / self.total


@dataclass(frozen=True)
class ScaleRange:
    """Lowest and highest qualifying agreement rate in a view."""

    low: float
    high: float

    @property
    def mid(self) -> float:
        return (self.low + self.high) / 2


@dataclass(frozen=True, eq=False)
class View:
    """Result of one aggregation call.

    ``agreed`` and ``total`` are square count arrays indexed in ``members``
    order. The diagonal is never filled; use ``cell()`` or ``matrix`` rather
    than reading the arrays for self-pairs. ``scale_range`` is None when no
    pair has enough shared cases to place on a color scale.
    """

    members: tuple[str, ...]
    case_count: int
    agreed: np.ndarray
    total: np.ndarray
    scale_range: ScaleRange | None

    @property
    def is_empty(self) -> bool:
        return not self.members

    def index_of(self, member_id: str) -> int:
        try:
            return self.members.index(member_id)
        except ValueError:
            raise KeyError(member_id) from None

    def cell(self, a: str, b: str) -> AgreementCell:
        """Agreement counts for members ``a`` and ``b``."""
        if a == b:
            raise ValueError(f"no agreement cell for self-pair {a!r}")
        i, j = self.index_of(a), self.index_of(b)
        return AgreementCell(agreed=int(self.agreed[i, j]), total=int(self.total[i, j]))

    @property
    def matrix(self) -> dict[tuple[str, str], AgreementCell]:
        """All ordered off-diagonal pairs."""
        return {
            (a, b): AgreementCell(agreed=int(self.agreed[i, j]), total=int(self.total[i, j]))
            for i, a in enumerate(self.members)
            for j, b in enumerate(self.members)
            if i != j
        }

    def pairs(self) -> Iterator[tuple[str, str, AgreementCell]]:
        """Yield each unordered pair once, in canonical member order."""
        n = len(self.members)
        for i in range(n):
            for j in range(i + 1, n):
                yield (
                    self.members[i],
                    self.members[j],
                    AgreementCell(agreed=int(self.agreed[i, j]), total=int(self.total[i, j])),
                )

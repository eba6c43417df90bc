"""Pairwise agreement between members over a filtered window.

For each pair of distinct members (i, j):
  - total  = number of selected cases in which both participated
  - agreed = number of those cases where both had the same outcome code
  - rate   = agreed / total, or None when they share no case

A rate of 0.0 (always split) and None (never sat together) mean different
things and are kept apart all the way to the caller.

The scale range is the min/max rate over pairs sharing at least
``min_sample`` cases. When no pair qualifies the view carries no range at
all, and the presentation layer falls back to its default styling.
"""

from collections.abc import Iterable, Sequence
from itertools import combinations

import numpy as np
import polars as pl

from scotus_concurrence.filters import Filter
from scotus_concurrence.models import Case, Dataset, ScaleRange, View


def select_cases(dataset: Dataset, filt: Filter) -> list[Case]:
    """Cases whose period falls inside the filter window (inclusive)."""
    return [c for c in dataset.cases if filt.period_start <= c.period <= filt.period_end]


def member_sort_key(dataset: Dataset, member_id: str) -> tuple[int, str, str]:
    """Order by first active period, then case-insensitive display name."""
    member = dataset.members.get(member_id)
    if member is None:
        return (0, member_id.casefold(), member_id)
    return (member.first_period, member.name.casefold(), member_id)


def active_members(
    dataset: Dataset, cases: Iterable[Case], subset: frozenset[str] | None = None
) -> tuple[str, ...]:
    """Members voting in ``cases``, restricted to ``subset``, in canonical order.

    Subset members with no vote in the window are dropped without complaint.
    """
    candidates: set[str] = set()
    for case in cases:
        candidates.update(case.votes)
    if subset is not None:
        candidates &= subset
    return tuple(sorted(candidates, key=lambda m: member_sort_key(dataset, m)))


def count_agreement(
    cases: Iterable[Case], members: Sequence[str]
) -> tuple[np.ndarray, np.ndarray]:
    """Fold cases into symmetric (agreed, total) count arrays.

    Both orientations of a pair are always incremented together, so the
    arrays are symmetric by construction. The diagonal stays zero.
    """
    index = {m: i for i, m in enumerate(members)}
    n = len(members)
    agreed = np.zeros((n, n), dtype=np.int64)
    total = np.zeros((n, n), dtype=np.int64)

    for case in cases:
        voters = [(index[m], outcome) for m, outcome in case.votes.items() if m in index]
        for (i, vote_i), (j, vote_j) in combinations(voters, 2):
            total[i, j] += 1
            total[j, i] += 1
            if vote_i == vote_j:
                agreed[i, j] += 1
                agreed[j, i] += 1

    return agreed, total


def compute_scale_range(
    agreed: np.ndarray, total: np.ndarray, min_sample: int
) -> ScaleRange | None:
    """Min/max rate over off-diagonal cells with ``total >= min_sample``."""
    n = total.shape[0]
    qualifying = (total > 0) & (total >= min_sample) & ~np.eye(n, dtype=bool)
    if not qualifying.any():
        return None
    rates = agreed[qualifying] / total[qualifying]
    return ScaleRange(low=float(rates.min()), high=float(rates.max()))


def compute_view(dataset: Dataset, filt: Filter) -> View:
    """Aggregate agreement for the filter's window and member subset.

    Pure: the dataset is only read, and every call returns fresh arrays.
    """
    cases = select_cases(dataset, filt)
    members = active_members(dataset, cases, filt.member_subset)
    agreed, total = count_agreement(cases, members)
    return View(
        members=members,
        case_count=len(cases),
        agreed=agreed,
        total=total,
        scale_range=compute_scale_range(agreed, total, filt.min_sample),
    )


def view_to_frame(view: View, dataset: Dataset) -> pl.DataFrame:
    """Long-form table with one row per unordered member pair."""
    rows = []
    for a, b, cell in view.pairs():
        rows.append(
            {
                "member_a": a,
                "member_b": b,
                "name_a": dataset.members[a].name if a in dataset.members else a,
                "name_b": dataset.members[b].name if b in dataset.members else b,
                "agreed": cell.agreed,
                "total": cell.total,
                "rate": cell.rate,
            }
        )
    schema = {
        "member_a": pl.Utf8,
        "member_b": pl.Utf8,
        "name_a": pl.Utf8,
        "name_b": pl.Utf8,
        "agreed": pl.Int64,
        "total": pl.Int64,
        "rate": pl.Float64,
    }
    return pl.DataFrame(rows, schema=schema)

"""Filter values for the aggregation engine and the mutable state behind them.

``Filter`` is what ``compute_view`` consumes: an immutable snapshot.
``FilterState`` is the editable copy an interactive front end keeps, with the
range-slider rules of the browser viewer (bounds clamp into the dataset's
period range, and the start never passes the end).
"""

from collections.abc import Iterable
from dataclasses import dataclass

from scotus_concurrence.config import DEFAULT_MIN_SAMPLE, DEFAULT_START_PERIOD
from scotus_concurrence.models import Dataset


@dataclass(frozen=True)
class Filter:
    """Period window (inclusive), member subset and minimum shared cases.

    ``member_subset=None`` selects every member active in the window.
    """

    period_start: int
    period_end: int
    member_subset: frozenset[str] | None = None
    min_sample: int = DEFAULT_MIN_SAMPLE

    def validate(self) -> None:
        if self.period_start > self.period_end:
            raise ValueError(
                f"period_start {self.period_start} is after period_end {self.period_end}"
            )
        if self.min_sample < 0:
            raise ValueError(f"min_sample must be non-negative, got {self.min_sample}")


class FilterState:
    """Editable filter settings bounded by a dataset's period range."""

    def __init__(
        self,
        lower: int,
        upper: int,
        start: int | None = None,
        end: int | None = None,
        min_sample: int = DEFAULT_MIN_SAMPLE,
    ) -> None:
        if lower > upper:
            raise ValueError(f"lower bound {lower} is after upper bound {upper}")
        self.lower = lower
        self.upper = upper
        self.start = self._clamp(lower if start is None else start)
        self.end = self._clamp(upper if end is None else end)
        if self.start > self.end:
            self.start = self.end
        self.member_subset: frozenset[str] | None = None
        self.min_sample = 0
        self.set_min_sample(min_sample)

    @classmethod
    def for_dataset(
        cls, dataset: Dataset, default_start: int = DEFAULT_START_PERIOD
    ) -> "FilterState":
        """Initial state for a loaded dataset: ``default_start`` to the last period."""
        if dataset.min_period is None or dataset.max_period is None:
            raise ValueError("cannot build a filter for an empty dataset")
        return cls(dataset.min_period, dataset.max_period, start=default_start)

    def _clamp(self, period: int) -> int:
        return max(self.lower, min(self.upper, period))

    def set_start(self, period: int) -> None:
        """Move the window start; it stops at the current end."""
        self.start = min(self._clamp(period), self.end)

    def set_end(self, period: int) -> None:
        """Move the window end; it stops at the current start."""
        self.end = max(self._clamp(period), self.start)

    def select(self, member_ids: Iterable[str]) -> None:
        self.member_subset = frozenset(member_ids)

    def select_all(self) -> None:
        self.member_subset = None

    def set_min_sample(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"min_sample must be non-negative, got {n}")
        self.min_sample = n

    def snapshot(self) -> Filter:
        return Filter(
            period_start=self.start,
            period_end=self.end,
            member_subset=self.member_subset,
            min_sample=self.min_sample,
        )

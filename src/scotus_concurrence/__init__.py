"""SCOTUS Concurrence - pairwise voting agreement between Supreme Court justices."""

__version__ = "0.1.0"

from scotus_concurrence.aggregate import compute_view as compute_view
from scotus_concurrence.canonicalize import Canonicalizer as Canonicalizer
from scotus_concurrence.canonicalize import canonicalize as canonicalize
from scotus_concurrence.filters import Filter as Filter
from scotus_concurrence.filters import FilterState as FilterState
from scotus_concurrence.models import AgreementCell as AgreementCell
from scotus_concurrence.models import Dataset as Dataset
from scotus_concurrence.models import View as View

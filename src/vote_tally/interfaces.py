from __future__ import annotations

from collections import Counter
from typing import Iterable, Protocol, Sequence

from vote_tally.models import AggregateReport, Cluster, VoteRecord


class CenterSelector(Protocol):
    """Step 2: choose cluster centers from the candidate frequency table."""

    def select(self, frequencies: Counter[str]) -> list[str]:
        ...


class ClusterBuilder(Protocol):
    """Step 3: partition every distinct candidate name into disjoint clusters."""

    def build(self, centers: Sequence[str], all_names: Sequence[str]) -> list[Cluster]:
        ...


class VoteAggregator(Protocol):
    """Step 4: credit each record to the cluster holding its candidate name."""

    def aggregate(self, records: Iterable[VoteRecord], partition: Sequence[Cluster]) -> AggregateReport:
        ...

from __future__ import annotations

from collections import Counter
from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class VoteRecord:
    """A single parsed vote submission."""

    record_id: str
    timestamp: str
    ip: str
    candidate_name: str

    def to_line(self) -> str:
        return f"id: {self.record_id}, time: {self.timestamp}, ip: {self.ip}, candidate: {self.candidate_name}"


@dataclass(frozen=True, slots=True)
class DedupeStats:
    total_lines: int = 0
    malformed: int = 0
    duplicates: int = 0

    @property
    def discarded(self) -> int:
        return self.malformed + self.duplicates

    @property
    def retained(self) -> int:
        return self.total_lines - self.discarded


@dataclass(frozen=True, slots=True)
class DeduplicatedSet:
    """Records in first-occurrence order, unique by id and by ip."""

    records: tuple[VoteRecord, ...]
    stats: DedupeStats = field(default_factory=DedupeStats)

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[VoteRecord]:
        return iter(self.records)


@dataclass(frozen=True, slots=True)
class Cluster:
    """A group of candidate spellings that likely name the same person."""

    center: str
    members: tuple[str, ...]

    def __post_init__(self) -> None:
        if self.center not in self.members:
            raise ValueError(f"cluster center {self.center!r} must be one of its members")

    @property
    def is_singleton(self) -> bool:
        return self.members == (self.center,)

    @property
    def absorbed(self) -> int:
        return len(self.members) - 1

    def contains(self, name: str) -> bool:
        return name in self.members


@dataclass(frozen=True, slots=True)
class AggregateReport:
    """Votes per cluster center, ordered by descending count."""

    votes: dict[str, int]
    total_votes: int

    @property
    def credited_votes(self) -> int:
        return sum(self.votes.values())

    @property
    def coverage(self) -> float:
        return _percent(self.credited_votes, self.total_votes)

    def percentage(self, center: str) -> float:
        return _percent(self.votes.get(center, 0), self.total_votes)

    def ranking(self) -> list[tuple[str, int, float]]:
        return [(center, count, self.percentage(center)) for center, count in self.votes.items()]


@dataclass(frozen=True, slots=True)
class PipelineResult:
    frequencies: Counter[str]
    centers: list[str]
    partition: list[Cluster]
    report: AggregateReport

    @property
    def center_clusters(self) -> list[Cluster]:
        return self.partition[: len(self.centers)]

    @property
    def remaining_clusters(self) -> list[Cluster]:
        return self.partition[len(self.centers) :]

    @property
    def assigned_count(self) -> int:
        return sum(len(cluster.members) for cluster in self.center_clusters)


def _percent(part: int, whole: int) -> float:
    if whole == 0:
        return 0.0
    return round(part / whole * 100, 2)

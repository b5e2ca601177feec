from __future__ import annotations

import random
import string

from vote_tally.models import VoteRecord

_FIRST_NAMES = [
    "Dominique",
    "Luke",
    "Alex",
    "Sofia",
    "Maya",
    "Daniel",
    "Emma",
    "Chris",
    "Olivia",
    "Noah",
]
_LAST_NAMES = [
    "Smith",
    "Johnson",
    "Brown",
    "Taylor",
    "Wilson",
    "Davies",
    "Martin",
    "Thomas",
]
_MALFORMED = [
    "",
    "id: , time: 2024-01-01 10:00, ip: 10.0.0.1, candidate: Emma Brown",
    "id: 12, time: 2024-01-01 10:00, ip: unknown, candidate: Noah Smith",
    "id: 13 time: 2024-01-01 10:00 ip: 10.0.0.2 candidate: Maya Wilson",
    "-- export truncated --",
]


class ReferenceVoteGenerator:
    """Generate synthetic raw vote lines (with intentional dupes and typos) for tests and benchmarks."""

    def __init__(self, seed: int = 7) -> None:
        self._rng = random.Random(seed)

    def candidates(self, count: int) -> list[str]:
        pool = [f"{first} {last}" for first in _FIRST_NAMES for last in _LAST_NAMES]
        return self._rng.sample(pool, min(count, len(pool)))

    def generate(
        self,
        size: int,
        duplicate_rate: float = 0.1,
        typo_rate: float = 0.2,
        malformed_rate: float = 0.02,
        candidate_count: int = 6,
    ) -> list[str]:
        if size <= 0:
            return []

        malformed_count = min(size, int(size * malformed_rate))
        vote_count = size - malformed_count
        unique_count = max(1, min(int(vote_count * (1.0 - duplicate_rate)), vote_count)) if vote_count else 0

        names = self.candidates(candidate_count)
        # Skewed popularity so the frequency ranking is not flat.
        weights = [len(names) - i for i in range(len(names))]

        records: list[VoteRecord] = []
        for i in range(unique_count):
            name = self._rng.choices(names, weights=weights)[0]
            if self._rng.random() < typo_rate:
                name = self._typo(name)
            records.append(
                VoteRecord(
                    record_id=str(i + 1),
                    timestamp=self._timestamp(i),
                    ip=_ip(10, i),
                    candidate_name=name,
                )
            )

        extra = 0
        while len(records) < vote_count:
            source = self._rng.choice(records[:unique_count])
            records.append(self._resubmission(source, extra))
            extra += 1

        lines = [record.to_line() for record in records]
        lines += [self._rng.choice(_MALFORMED) for _ in range(malformed_count)]
        self._rng.shuffle(lines)
        return lines

    def _timestamp(self, idx: int) -> str:
        return f"2024-{(idx % 12) + 1:02d}-{(idx % 27) + 1:02d} {self._rng.randrange(24):02d}:{self._rng.randrange(60):02d}"

    def _resubmission(self, source: VoteRecord, idx: int) -> VoteRecord:
        reuse = self._rng.choice(["id", "ip", "both"])
        record_id = source.record_id if reuse in {"id", "both"} else str(10_000_000 + idx)
        ip = source.ip if reuse in {"ip", "both"} else _ip(192, idx)
        return VoteRecord(
            record_id=record_id,
            timestamp=self._timestamp(idx),
            ip=ip,
            candidate_name=self._rng.choice([source.candidate_name, self._typo(source.candidate_name)]),
        )

    def _typo(self, name: str) -> str:
        letters = [i for i, ch in enumerate(name) if ch.isalpha() and i > 0 and name[i - 1] != " "]
        if not letters:
            return name
        variant = self._rng.choice(["drop", "swap", "replace", "lower"])
        pos = self._rng.choice(letters)

        if variant == "drop":
            return name[:pos] + name[pos + 1 :]
        if variant == "swap" and pos + 1 < len(name) and name[pos + 1].isalpha():
            return name[:pos] + name[pos + 1] + name[pos] + name[pos + 2 :]
        if variant == "lower":
            return name.lower()
        return name[:pos] + self._rng.choice(string.ascii_lowercase) + name[pos + 1 :]


def _ip(first_octet: int, idx: int) -> str:
    return f"{first_octet}.{(idx >> 16) & 255}.{(idx >> 8) & 255}.{idx & 255}"

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from vote_tally.models import VoteRecord


def count_frequencies(records: Iterable[VoteRecord]) -> Counter[str]:
    """Occurrences per candidate name; iteration follows first-seen order."""
    frequencies: Counter[str] = Counter()
    for record in records:
        frequencies[record.candidate_name] += 1
    return frequencies

from __future__ import annotations

import logging
from collections import Counter

from vote_tally.config import DEFAULT_MAX_CENTERS

logger = logging.getLogger(__name__)


def is_well_formed(name: str) -> bool:
    """Rough check for a "First Last" style name.

    Needs at least two whitespace-separated tokens, each starting with an
    uppercase A-Z letter. Approximate only: no real name validation happens here.
    """
    tokens = name.split()
    if len(tokens) < 2:
        return False
    return all("A" <= token[0] <= "Z" for token in tokens)


class FrequencyCenterSelector:
    """Most frequent well-formed names, looked up among the top ``max_centers``."""

    def __init__(self, max_centers: int = DEFAULT_MAX_CENTERS) -> None:
        self._max_centers = max_centers

    def select(self, frequencies: Counter[str]) -> list[str]:
        # sorted() is stable, so equal counts keep first-seen order.
        ranked = sorted(frequencies, key=lambda name: -frequencies[name])
        centers = [name for name in ranked[: self._max_centers] if is_well_formed(name)]
        logger.info("selected %d centers out of %d distinct candidates", len(centers), len(frequencies))
        return centers


def select_centers(frequencies: Counter[str], max_centers: int = DEFAULT_MAX_CENTERS) -> list[str]:
    return FrequencyCenterSelector(max_centers=max_centers).select(frequencies)

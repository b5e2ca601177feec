from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from concurrent.futures import ProcessPoolExecutor
from functools import partial

from vote_tally.config import DEFAULT_MAX_EDITS, DEFAULT_MAX_LENGTH_DELTA
from vote_tally.models import Cluster
from vote_tally.steps.distance import within_edit_threshold

logger = logging.getLogger(__name__)


class GreedyClusterBuilder:
    """Greedy first-fit partitioning of candidate names around ordered centers.

    Centers are processed in the order given. Each center absorbs every name
    that is not itself a center, is not yet assigned, and passes both the
    length-difference and edit-distance gates. A name close to two centers
    therefore lands with whichever center comes first. Names left over after
    all centers become singleton clusters in first-seen order.

    With ``workers > 1`` the per-center similarity scans run in a process
    pool. Scans only read the immutable center list and name universe; the
    calling process then applies the ``assigned`` filter in center order, so
    the partition matches the sequential result exactly.
    """

    def __init__(
        self,
        max_edits: int = DEFAULT_MAX_EDITS,
        max_length_delta: int = DEFAULT_MAX_LENGTH_DELTA,
        workers: int = 1,
    ) -> None:
        self._max_edits = max_edits
        self._max_length_delta = max_length_delta
        self._workers = workers

    def build(self, centers: Sequence[str], all_names: Iterable[str]) -> list[Cluster]:
        names = list(dict.fromkeys(all_names))
        center_set = set(centers)
        candidates = [name for name in names if name not in center_set]

        assigned: set[str] = set()
        clusters: list[Cluster] = []
        for center, matches in zip(centers, self._scan(centers, candidates)):
            members = [center]
            assigned.add(center)
            for name in matches:
                if name in assigned:
                    continue
                members.append(name)
                assigned.add(name)
            cluster = Cluster(center=center, members=tuple(members))
            clusters.append(cluster)
            logger.debug("%d: %-20s (+%d similar)", len(clusters), center, cluster.absorbed)

        remaining = [name for name in names if name not in assigned]
        clusters.extend(Cluster(center=name, members=(name,)) for name in remaining)

        logger.info(
            "built %d clusters: %d assigned candidates, %d singletons",
            len(clusters),
            len(assigned),
            len(remaining),
        )
        return clusters

    def _scan(self, centers: Sequence[str], candidates: list[str]) -> list[list[str]]:
        match = partial(
            _similar_names,
            candidates=candidates,
            max_edits=self._max_edits,
            max_length_delta=self._max_length_delta,
        )
        if self._workers <= 1 or len(centers) <= 1:
            return [match(center) for center in centers]

        chunksize = max(1, len(centers) // (self._workers * 4))
        with ProcessPoolExecutor(max_workers=self._workers) as pool:
            return list(pool.map(match, centers, chunksize=chunksize))


def _similar_names(center: str, candidates: Sequence[str], max_edits: int, max_length_delta: int) -> list[str]:
    return [name for name in candidates if within_edit_threshold(center, name, max_edits, max_length_delta)]


def build_clusters(
    centers: Sequence[str],
    all_names: Iterable[str],
    max_edits: int = DEFAULT_MAX_EDITS,
    max_length_delta: int = DEFAULT_MAX_LENGTH_DELTA,
) -> list[Cluster]:
    return GreedyClusterBuilder(max_edits=max_edits, max_length_delta=max_length_delta).build(centers, all_names)

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Iterable, Sequence

from vote_tally.models import AggregateReport, Cluster, VoteRecord

logger = logging.getLogger(__name__)


class ClusterVoteAggregator:
    def aggregate(self, records: Iterable[VoteRecord], partition: Sequence[Cluster]) -> AggregateReport:
        votes: dict[str, int] = defaultdict(int)
        total = 0
        for record in records:
            total += 1
            for cluster in partition:
                if cluster.contains(record.candidate_name):
                    votes[cluster.center] += 1
                    break
            else:
                logger.warning("no cluster holds candidate %r (record id %s)", record.candidate_name, record.record_id)

        ranked = dict(sorted(votes.items(), key=lambda item: -item[1]))
        report = AggregateReport(votes=ranked, total_votes=total)
        logger.info("aggregated %d votes into %d clusters, coverage=%.2f%%", total, len(ranked), report.coverage)
        return report


def aggregate(records: Iterable[VoteRecord], partition: Sequence[Cluster]) -> AggregateReport:
    return ClusterVoteAggregator().aggregate(records, partition)

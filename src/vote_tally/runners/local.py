from __future__ import annotations

from collections.abc import Iterable

from vote_tally.config import ClusteringConfig
from vote_tally.interfaces import CenterSelector, ClusterBuilder, VoteAggregator
from vote_tally.models import AggregateReport, PipelineResult, VoteRecord
from vote_tally.steps.aggregation import ClusterVoteAggregator
from vote_tally.steps.centers import FrequencyCenterSelector
from vote_tally.steps.clustering import GreedyClusterBuilder
from vote_tally.steps.frequency import count_frequencies


class LocalTallyPipeline:
    """Single-machine runner: frequencies -> centers -> clusters -> totals."""

    def __init__(
        self,
        config: ClusteringConfig | None = None,
        center_selector: CenterSelector | None = None,
        cluster_builder: ClusterBuilder | None = None,
        aggregator: VoteAggregator | None = None,
    ) -> None:
        config = config or ClusteringConfig()
        self._center_selector = center_selector or FrequencyCenterSelector(max_centers=config.max_centers)
        self._cluster_builder = cluster_builder or GreedyClusterBuilder(
            max_edits=config.max_edits,
            max_length_delta=config.max_length_delta,
            workers=config.workers,
        )
        self._aggregator = aggregator or ClusterVoteAggregator()

    def run(self, records: Iterable[VoteRecord]) -> PipelineResult:
        records = list(records)
        frequencies = count_frequencies(records)
        centers = self._center_selector.select(frequencies)
        partition = self._cluster_builder.build(centers, list(frequencies))
        report = self._aggregator.aggregate(records, partition)
        return PipelineResult(
            frequencies=frequencies,
            centers=centers,
            partition=partition,
            report=report,
        )


def run_pipeline(records: Iterable[VoteRecord], config: ClusteringConfig | None = None) -> AggregateReport:
    return LocalTallyPipeline(config=config).run(records).report

"""Vote deduplication, candidate-name clustering and tallying."""

from vote_tally.config import ClusteringConfig
from vote_tally.models import AggregateReport, Cluster, DeduplicatedSet, PipelineResult, VoteRecord
from vote_tally.runners import LocalTallyPipeline, run_pipeline
from vote_tally.steps import load_and_dedupe

__all__ = [
    "AggregateReport",
    "Cluster",
    "ClusteringConfig",
    "DeduplicatedSet",
    "LocalTallyPipeline",
    "PipelineResult",
    "VoteRecord",
    "load_and_dedupe",
    "run_pipeline",
]

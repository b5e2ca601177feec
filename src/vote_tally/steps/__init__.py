from vote_tally.steps.aggregation import ClusterVoteAggregator, aggregate
from vote_tally.steps.centers import FrequencyCenterSelector, is_well_formed, select_centers
from vote_tally.steps.clustering import GreedyClusterBuilder, build_clusters
from vote_tally.steps.deduplication import IdentityDeduplicator, dedupe, load_and_dedupe
from vote_tally.steps.distance import levenshtein
from vote_tally.steps.frequency import count_frequencies

__all__ = [
    "ClusterVoteAggregator",
    "FrequencyCenterSelector",
    "GreedyClusterBuilder",
    "IdentityDeduplicator",
    "aggregate",
    "build_clusters",
    "count_frequencies",
    "dedupe",
    "is_well_formed",
    "levenshtein",
    "load_and_dedupe",
    "select_centers",
]

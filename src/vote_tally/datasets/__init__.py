from vote_tally.datasets.reference import ReferenceVoteGenerator

__all__ = ["ReferenceVoteGenerator"]

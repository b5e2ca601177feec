from vote_tally.runners.local import LocalTallyPipeline, run_pipeline

__all__ = ["LocalTallyPipeline", "run_pipeline"]

from vote_tally import ClusteringConfig, LocalTallyPipeline, run_pipeline
from vote_tally.datasets import ReferenceVoteGenerator
from vote_tally.report import build_summary, render_report
from vote_tally.steps import dedupe

_LINES = [
    "id: 1, time: 2024-05-01 09:00, ip: 10.0.0.1, candidate: John Smith",
    "id: 2, time: 2024-05-01 09:01, ip: 10.0.0.2, candidate: John Smith",
    "id: 3, time: 2024-05-01 09:02, ip: 10.0.0.3, candidate: john smith",
    "id: 4, time: 2024-05-01 09:03, ip: 10.0.0.4, candidate: Jane Doe",
    "id: 4, time: 2024-05-01 09:04, ip: 10.0.0.5, candidate: Jane Doe",
    "not a vote",
]


def test_pipeline_groups_misspelling_under_frequent_center() -> None:
    records = dedupe(_LINES)

    result = LocalTallyPipeline().run(records)

    assert result.centers == ["John Smith", "Jane Doe"]
    assert [c.members for c in result.partition] == [("John Smith", "john smith"), ("Jane Doe",)]
    assert list(result.report.votes.items()) == [("John Smith", 3), ("Jane Doe", 1)]
    assert result.report.coverage == 100.0


def test_run_pipeline_returns_report() -> None:
    report = run_pipeline(dedupe(_LINES), config=ClusteringConfig(max_centers=1))

    assert report.votes == {"John Smith": 3, "Jane Doe": 1}
    assert report.total_votes == 4


def test_generated_dataset_conserves_votes() -> None:
    records = dedupe(ReferenceVoteGenerator(seed=3).generate(size=1500))

    result = LocalTallyPipeline(config=ClusteringConfig(max_centers=20)).run(records)

    assert result.report.credited_votes == len(records)
    assert result.report.total_votes == len(records)
    assert result.report.coverage == 100.0
    assert len(result.centers) <= 20


def test_render_report_lists_every_stage() -> None:
    records = dedupe(_LINES)
    result = LocalTallyPipeline().run(records)

    text = render_report(records.stats, result)

    assert "Duplicate cleanup: removed 2, kept 4 records" in text
    assert "Cluster centers selected: 2" in text
    assert "Distinct candidates: 3" in text
    assert f"1: {'John Smith':<20} (+1 similar)" in text
    assert f"{'John Smith':<20} : {3:<4} votes (75.0%)" in text
    assert "Clusters for remaining candidates:" not in text
    assert "Total votes: 4" in text
    assert text.endswith("Clustering coverage: 100.0%")


def test_render_report_handles_no_votes() -> None:
    records = dedupe(["garbage", ""])
    result = LocalTallyPipeline().run(records)

    text = render_report(records.stats, result)

    assert "Total votes: 0" in text
    assert "Clustering coverage: 0.0%" in text


def test_summary_counts_singletons() -> None:
    records = dedupe(_LINES)
    result = LocalTallyPipeline(config=ClusteringConfig(max_centers=1)).run(records)

    summary = build_summary(records.stats, result)

    assert summary["center_count"] == 1
    assert summary["singleton_count"] == 1
    assert summary["assigned_candidate_count"] == 2
    assert summary["duplicate_count"] == 1
    assert summary["malformed_count"] == 1

from __future__ import annotations

from vote_tally.models import DedupeStats, PipelineResult

_RULE = "_" * 40


def render_report(stats: DedupeStats, result: PipelineResult) -> str:
    """Human-readable account of every pipeline stage, ending with the ranked totals."""
    lines = [
        f"Duplicate cleanup: removed {stats.discarded}, kept {stats.retained} records",
        f"Cluster centers selected: {len(result.centers)}",
        f"Distinct candidates: {len(result.frequencies)}",
        "",
        "Creating clusters:",
    ]

    index = 0
    for cluster in result.center_clusters:
        index += 1
        lines.append(f"{index}: {cluster.center:<20} (+{cluster.absorbed} similar)")

    remaining = result.remaining_clusters
    if remaining:
        lines += ["", "Clusters for remaining candidates:"]
        for cluster in remaining:
            index += 1
            lines.append(f"{index}: {cluster.center}")

    report = result.report
    lines += [
        "",
        "Summary:",
        f"Total clusters: {len(result.partition)}",
        f"Assigned candidates: {result.assigned_count}",
        f"Separate candidates: {len(remaining)}",
        _RULE,
        "",
        "Voting results:",
    ]
    for center, votes, percentage in report.ranking():
        lines.append(f"{center:<20} : {votes:<4} votes ({percentage}%)")
    lines += [
        _RULE,
        f"Total votes: {report.total_votes}",
        f"Clustering coverage: {report.coverage}%",
    ]
    return "\n".join(lines)


def build_summary(stats: DedupeStats, result: PipelineResult) -> dict[str, object]:
    cluster_sizes = [len(cluster.members) for cluster in result.partition]
    return {
        "line_count": stats.total_lines,
        "malformed_count": stats.malformed,
        "duplicate_count": stats.duplicates,
        "record_count": stats.retained,
        "distinct_candidate_count": len(result.frequencies),
        "center_count": len(result.centers),
        "cluster_count": len(result.partition),
        "assigned_candidate_count": result.assigned_count,
        "singleton_count": len(result.remaining_clusters),
        "max_cluster_size": max(cluster_sizes) if cluster_sizes else 0,
        "total_votes": result.report.total_votes,
        "coverage": result.report.coverage,
        "results": [
            {"center": center, "votes": votes, "percentage": percentage}
            for center, votes, percentage in result.report.ranking()
        ],
    }

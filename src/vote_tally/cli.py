from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from vote_tally.config import (
    DEFAULT_MAX_CENTERS,
    DEFAULT_MAX_EDITS,
    DEFAULT_MAX_LENGTH_DELTA,
    ClusteringConfig,
)
from vote_tally.datasets import ReferenceVoteGenerator
from vote_tally.models import DeduplicatedSet, PipelineResult
from vote_tally.report import build_summary, render_report
from vote_tally.runners import LocalTallyPipeline
from vote_tally.steps import load_and_dedupe

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="[%(asctime)s] %(levelname)-8s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 0

    try:
        config = ClusteringConfig(
            max_centers=args.max_centers,
            max_edits=args.max_edits,
            max_length_delta=args.max_length_delta,
            workers=args.workers,
        )
    except ValueError as exc:
        parser.error(str(exc))

    try:
        if args.command == "tally":
            tally(
                input_path=args.input,
                config=config,
                cleaned_output=args.cleaned_output,
                output_dir=args.output_dir,
            )
        elif args.command == "run-test":
            run_test(
                size=args.size,
                duplicate_rate=args.duplicate_rate,
                typo_rate=args.typo_rate,
                seed=args.seed,
                output_dir=args.output_dir,
                config=config,
            )
    except OSError as exc:
        parser.exit(1, f"vote-tally: error: {exc}\n")
    return 0


def tally(
    *,
    input_path: Path,
    config: ClusteringConfig,
    cleaned_output: Path | None = None,
    output_dir: Path | None = None,
) -> PipelineResult:
    deduplicated = load_and_dedupe(input_path)
    if cleaned_output is not None:
        _write_lines(cleaned_output, deduplicated)

    result = LocalTallyPipeline(config=config).run(deduplicated)

    if output_dir is not None:
        output_dir.mkdir(parents=True, exist_ok=True)
        clusters_path = output_dir / "clusters.json"
        summary_path = output_dir / "summary.json"
        _write_json(
            clusters_path,
            [{"center": c.center, "members": list(c.members)} for c in result.partition],
        )
        summary = build_summary(deduplicated.stats, result)
        summary["input_path"] = str(input_path)
        summary["clusters_path"] = str(clusters_path)
        _write_json(summary_path, summary)
        logger.info("wrote %s and %s", clusters_path, summary_path)

    print(render_report(deduplicated.stats, result))
    return result


def run_test(
    *,
    size: int,
    duplicate_rate: float,
    typo_rate: float,
    seed: int,
    output_dir: Path,
    config: ClusteringConfig,
) -> PipelineResult:
    output_dir.mkdir(parents=True, exist_ok=True)
    lines = ReferenceVoteGenerator(seed=seed).generate(
        size=size,
        duplicate_rate=duplicate_rate,
        typo_rate=typo_rate,
    )
    dataset_path = output_dir / "test_votes.txt"
    dataset_path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
    print(f"Dataset: {dataset_path}")
    print("---")
    return tally(input_path=dataset_path, config=config, output_dir=output_dir)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="vote-tally", description="Deduplicate, cluster and tally vote records")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
    )
    subparsers = parser.add_subparsers(dest="command")

    tally_parser = subparsers.add_parser("tally", help="Tally a vote file and print the report")
    tally_parser.add_argument("--input", type=Path, required=True)
    tally_parser.add_argument("--cleaned-output", type=Path, default=None)
    tally_parser.add_argument("--output-dir", type=Path, default=None)
    _add_clustering_arguments(tally_parser)

    run_test_parser = subparsers.add_parser(
        "run-test",
        help="Generate a synthetic vote file, tally it, and output clusters + summary",
    )
    run_test_parser.add_argument("--size", type=int, default=2000)
    run_test_parser.add_argument("--duplicate-rate", type=float, default=0.1)
    run_test_parser.add_argument("--typo-rate", type=float, default=0.2)
    run_test_parser.add_argument("--seed", type=int, default=42)
    run_test_parser.add_argument("--output-dir", type=Path, default=Path("data/cli_output"))
    _add_clustering_arguments(run_test_parser)

    return parser


def _add_clustering_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--max-centers", type=int, default=DEFAULT_MAX_CENTERS)
    parser.add_argument("--max-edits", type=int, default=DEFAULT_MAX_EDITS)
    parser.add_argument("--max-length-delta", type=int, default=DEFAULT_MAX_LENGTH_DELTA)
    parser.add_argument("--workers", type=int, default=1)


def _write_json(path: Path, payload: object) -> None:
    with path.open("w", encoding="utf-8") as handle:
        json.dump(payload, handle, indent=2)


def _write_lines(path: Path, records: DeduplicatedSet) -> None:
    with path.open("w", encoding="utf-8") as handle:
        for record in records:
            handle.write(f"{record.to_line()}\n")


if __name__ == "__main__":
    raise SystemExit(main())

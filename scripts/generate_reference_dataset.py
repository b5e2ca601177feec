from __future__ import annotations

import argparse
from pathlib import Path

from vote_tally.datasets import ReferenceVoteGenerator


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate synthetic raw vote lines")
    parser.add_argument("--size", type=int, default=10000)
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--duplicate-rate", type=float, default=0.1)
    parser.add_argument("--typo-rate", type=float, default=0.2)
    parser.add_argument("--malformed-rate", type=float, default=0.02)
    parser.add_argument("--candidates", type=int, default=6)
    parser.add_argument("--output", type=Path, default=Path("data/reference_votes.txt"))
    args = parser.parse_args()

    lines = ReferenceVoteGenerator(seed=args.seed).generate(
        size=args.size,
        duplicate_rate=args.duplicate_rate,
        typo_rate=args.typo_rate,
        malformed_rate=args.malformed_rate,
        candidate_count=args.candidates,
    )

    args.output.parent.mkdir(parents=True, exist_ok=True)
    with args.output.open("w", encoding="utf-8") as handle:
        for line in lines:
            handle.write(f"{line}\n")


if __name__ == "__main__":
    main()

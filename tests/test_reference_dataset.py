from vote_tally.datasets import ReferenceVoteGenerator
from vote_tally.grammar import parse_line
from vote_tally.steps import dedupe


def test_generator_is_deterministic_per_seed() -> None:
    first = ReferenceVoteGenerator(seed=9).generate(size=120)
    second = ReferenceVoteGenerator(seed=9).generate(size=120)

    assert first == second
    assert len(first) == 120


def test_generator_injects_duplicates_and_malformed_lines() -> None:
    lines = ReferenceVoteGenerator(seed=2).generate(size=200, duplicate_rate=0.1, malformed_rate=0.05)

    result = dedupe(lines)

    assert result.stats.total_lines == 200
    assert result.stats.malformed == 10
    assert result.stats.duplicates > 0
    assert sum(parse_line(line) is None for line in lines) == 10


def test_generator_handles_empty_size() -> None:
    assert ReferenceVoteGenerator().generate(size=0) == []

from collections import Counter

import pytest

from vote_tally.steps import count_frequencies, is_well_formed, select_centers
from vote_tally.models import VoteRecord


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("John Smith", True),
        ("Mary Ann Lee", True),
        ("John  Smith", True),
        ("John O'Neil", True),
        ("John", False),
        ("", False),
        ("john Smith", False),
        ("John smith", False),
        ("JOHN SMITH", True),
        ("Élise Martin", False),
    ],
)
def test_is_well_formed(name: str, expected: bool) -> None:
    assert is_well_formed(name) is expected


def test_count_frequencies_counts_every_name_in_first_seen_order() -> None:
    names = ["Bob Ray", "amy li", "Bob Ray", "x"]
    records = [VoteRecord(str(i), "t", f"10.0.0.{i}", name) for i, name in enumerate(names)]

    frequencies = count_frequencies(records)

    assert list(frequencies.items()) == [("Bob Ray", 2), ("amy li", 1), ("x", 1)]


def test_ties_keep_first_seen_order() -> None:
    frequencies = Counter()
    for name in ["Amy Li", "Bob Ray", "Bob Ray", "Cat Dee", "amy li", "Dan Fox"]:
        frequencies[name] += 1

    assert select_centers(frequencies) == ["Bob Ray", "Amy Li", "Cat Dee", "Dan Fox"]


def test_format_filter_applies_after_top_n_cut() -> None:
    frequencies = Counter({"Bob Ray": 3, "bob ray": 2, "Amy Li": 1})

    assert select_centers(frequencies, max_centers=2) == ["Bob Ray"]


def test_center_count_is_bounded() -> None:
    frequencies = Counter({f"Candidate N{i:03d}": 1 for i in range(250)})

    centers = select_centers(frequencies)

    assert len(centers) == 200
    assert centers[0] == "Candidate N000"
    assert centers[-1] == "Candidate N199"
    assert all(is_well_formed(center) for center in centers)


def test_no_well_formed_names_gives_no_centers() -> None:
    assert select_centers(Counter({"anonymous": 4, "n/a": 2})) == []

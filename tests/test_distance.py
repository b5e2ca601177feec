import pytest

from vote_tally.steps.distance import levenshtein, within_edit_threshold


@pytest.mark.parametrize(
    ("left", "right", "expected"),
    [
        ("kitten", "sitting", 3),
        ("", "abc", 3),
        ("abc", "", 3),
        ("abc", "abc", 0),
        ("John Smith", "Jon Smith", 1),
        ("flaw", "lawn", 2),
        ("", "", 0),
    ],
)
def test_levenshtein(left: str, right: str, expected: int) -> None:
    assert levenshtein(left, right) == expected


def test_levenshtein_is_symmetric_for_unequal_lengths() -> None:
    assert levenshtein("Anna Bell", "Annabelle Smith") == levenshtein("Annabelle Smith", "Anna Bell")


def test_threshold_is_inclusive() -> None:
    assert within_edit_threshold("John Smith", "Jahn Smoth", max_edits=2, max_length_delta=2)
    assert not within_edit_threshold("John Smith", "Jahn Smoty", max_edits=2, max_length_delta=2)


def test_length_gate_rejects_before_distance() -> None:
    assert within_edit_threshold("John Smith", "Jon Smith", max_edits=2, max_length_delta=1)
    assert not within_edit_threshold("John Smith", "Jon Smith", max_edits=2, max_length_delta=0)

from __future__ import annotations


def levenshtein(left: str, right: str) -> int:
    """Classic Levenshtein distance using a single rolling row.

    The row is sized to the shorter input, so memory is O(min(len(left), len(right))).
    """
    if left == right:
        return 0
    if len(left) < len(right):
        left, right = right, left
    if not right:
        return len(left)

    prev = list(range(len(right) + 1))
    for i, c1 in enumerate(left, start=1):
        curr = [i]
        for j, c2 in enumerate(right, start=1):
            cost = 0 if c1 == c2 else 1
            curr.append(min(curr[j - 1] + 1, prev[j] + 1, prev[j - 1] + cost))
        prev = curr
    return prev[-1]


def within_edit_threshold(center: str, name: str, max_edits: int, max_length_delta: int) -> bool:
    """Length gate first, then the distance gate; both thresholds are inclusive."""
    if abs(len(center) - len(name)) > max_length_delta:
        return False
    return levenshtein(center, name) <= max_edits

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_MAX_CENTERS = 200
DEFAULT_MAX_EDITS = 2
DEFAULT_MAX_LENGTH_DELTA = 2


@dataclass(frozen=True)
class ClusteringConfig:
    """Tunables for center selection and name clustering."""

    max_centers: int = DEFAULT_MAX_CENTERS
    max_edits: int = DEFAULT_MAX_EDITS
    max_length_delta: int = DEFAULT_MAX_LENGTH_DELTA
    workers: int = 1

    def __post_init__(self) -> None:
        for name in ("max_centers", "max_edits", "max_length_delta"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be >= 0, got {getattr(self, name)}")
        if self.workers < 1:
            raise ValueError(f"workers must be >= 1, got {self.workers}")

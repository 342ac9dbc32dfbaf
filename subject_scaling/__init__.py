"""QLD subject-scaling calculator: availability lookup and subject x year selection."""

from .availability import AvailabilityIndex
from .config import YEARS
from .curves import scaled_score, selection_scores
from .rows import ScalingRow, Selection, rows_from_frame
from .selection import SelectionMatrix
from .subjects import filter_subjects

__all__ = [
    "AvailabilityIndex", "ScalingRow", "Selection", "SelectionMatrix", "YEARS",
    "filter_subjects", "rows_from_frame", "scaled_score", "selection_scores",
]

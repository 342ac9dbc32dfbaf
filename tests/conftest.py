"""Shared fixtures: a small subject x year dataset."""
import sys
from pathlib import Path

import pytest

_PROJECT_ROOT = str(Path(__file__).resolve().parent.parent)
if _PROJECT_ROOT not in sys.path:
    sys.path.insert(0, _PROJECT_ROOT)

from subject_scaling.availability import AvailabilityIndex
from subject_scaling.rows import ScalingRow
from subject_scaling.selection import SelectionMatrix

SUBJECTS = ["Maths", "Physics"]
YEARS = ("2023", "2024")


@pytest.fixture
def rows():
    # Physics has no 2024 data
    return [
        ScalingRow("Maths", "2023"),
        ScalingRow("Maths", "2024"),
        ScalingRow("Physics", "2023"),
    ]


@pytest.fixture
def index(rows):
    return AvailabilityIndex(rows)


@pytest.fixture
def matrix(index):
    return SelectionMatrix(SUBJECTS, index, years=YEARS)

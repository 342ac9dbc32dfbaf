"""
Tests for subject_scaling/availability.py

Verifies has_data lookups, axis queries, and building from a DataFrame.
"""
import logging

import pandas as pd
import pytest

from subject_scaling.availability import AvailabilityIndex
from subject_scaling.rows import ScalingRow


class TestHasData:
    def test_present_pairs(self, index):
        assert index.has_data("Maths", "2023")
        assert index.has_data("Maths", "2024")
        assert index.has_data("Physics", "2023")

    def test_missing_pair(self, index):
        assert not index.has_data("Physics", "2024")

    def test_unknown_names(self, index):
        assert not index.has_data("Chemistry", "2023")
        assert not index.has_data("Maths", "1999")

    def test_no_rows(self):
        assert not AvailabilityIndex().has_data("Maths", "2023")
        assert not AvailabilityIndex(None).has_data("Maths", "2023")
        assert not AvailabilityIndex([]).has_data("Maths", "2023")

    def test_numeric_year_matches_label(self, index):
        assert index.has_data("Maths", 2023)
        assert index.has_data("Maths", 2024.0)
        assert index.subjects_for(2024) == {"Maths"}

    def test_contains_and_len(self, index):
        assert ("Maths", "2024") in index
        assert ("Physics", "2024") not in index
        assert len(index) == 3

    def test_contains_rejects_non_pairs(self, index):
        assert "ab" not in index
        assert "Maths" not in index
        assert ("Maths", "2023", "x") not in index
        assert None not in index


class TestAxes:
    def test_years_for(self, index):
        assert index.years_for("Maths") == {"2023", "2024"}
        assert index.years_for("Physics") == {"2023"}
        assert index.years_for("Chemistry") == frozenset()

    def test_subjects_for(self, index):
        assert index.subjects_for("2023") == {"Maths", "Physics"}
        assert index.subjects_for("2024") == {"Maths"}
        assert index.subjects_for("2020") == frozenset()


class TestNoDataRows:
    def test_placeholder_rows_not_indexed(self):
        rows = [ScalingRow("Physics", "2024"), ScalingRow("Latin", "2024", "nodata")]
        index = AvailabilityIndex(rows)
        assert index.has_data("Physics", "2024")
        assert not index.has_data("Latin", "2024")
        assert index.subjects_for("2024") == {"Physics"}

    def test_frame_placeholder_rows_not_indexed(self):
        df = pd.DataFrame({
            "Subject Name": ["Physics", "Latin"],
            "Year": [2024, 2024],
            "P25 X": [78, 0],
            "P50 Y": [89.79, 0],
        })
        index = AvailabilityIndex.from_frame(df)
        assert index.has_data("Physics", "2024")
        assert not index.has_data("Latin", "2024")
        assert len(index) == 1


class TestDuplicates:
    def test_duplicate_rows_are_one_pair(self, caplog):
        rows = [ScalingRow("Maths", "2023"), ScalingRow("Maths", "2023")]
        with caplog.at_level(logging.WARNING, logger="subject_scaling.availability"):
            index = AvailabilityIndex(rows)
        assert len(index) == 1
        assert index.has_data("Maths", "2023")
        assert "duplicate" in caplog.text


class TestFromFrame:
    def test_builds_from_columns(self):
        df = pd.DataFrame({
            "Subject Name": ["Maths", "Physics", None],
            "Year": [2023, 2024.0, 2025],
            "P25 X": [60, 70, 80],
        })
        index = AvailabilityIndex.from_frame(df)
        assert index.has_data("Maths", "2023")
        assert index.has_data("Physics", "2024")
        assert len(index) == 2

    def test_empty_frame(self):
        df = pd.DataFrame(columns=["Subject Name", "Year"])
        assert len(AvailabilityIndex.from_frame(df)) == 0

    def test_missing_columns(self):
        with pytest.raises(ValueError, match="Year"):
            AvailabilityIndex.from_frame(pd.DataFrame({"Subject Name": ["Maths"]}))

    def test_none(self):
        assert len(AvailabilityIndex.from_frame(None)) == 0

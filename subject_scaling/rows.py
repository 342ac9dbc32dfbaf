"""
Scaling records and selections.

A ScalingRow is one (subject, year) line of a course-scaling table: the
eight percentile points on each axis plus the fitted polynomial
coefficients. Only `subject` and `year` matter for availability and
selection; the rest is payload for the scaled-score lookup.
"""

import logging
from collections import namedtuple

import pandas as pd

from .config import (COURSE_SCALE_COLUMNS, SUBJECT_COLUMN, SUBJECT_IDS,
                     SUBJECT_TYPES, TYPE_COLUMN, VET_SUBJECTS, YEAR_COLUMN)

logger = logging.getLogger(__name__)

Selection = namedtuple('Selection', ['subject', 'year'])

_VET_IDS = {name: sub_id for name, sub_id, _level in VET_SUBJECTS}


def normalise_year(value):
    """Year labels are strings; spreadsheets hand back 2023 or 2023.0."""
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value).strip()


class ScalingRow:
    def __init__(self, subject, year, subject_type='general', **payload):
        self.subject = subject
        self.year = normalise_year(year)
        self.subject_type = subject_type
        self.subject_id = SUBJECT_IDS.get(subject, _VET_IDS.get(subject, 0))
        self.min_x = 10
        self.pzx = self.p25x = self.p50x = self.p75x = self.p90x = self.p99x = self.max_x = 0
        self.min_y = self.pzy = self.p25y = self.p50y = self.p75y = self.p90y = self.p99y = self.max_y = 0
        self.X4 = self.X3 = self.X2 = self.X1 = self.X0 = 0
        self.Z3 = self.Z2 = self.Z1 = self.Z0 = 0
        for attr, value in payload.items():
            if attr not in COURSE_SCALE_COLUMNS:
                raise TypeError(f"Unknown scaling field: {attr}")
            setattr(self, attr, value)

    @property
    def key(self):
        return Selection(self.subject, self.year)

    def __repr__(self):
        return f"ScalingRow({self.subject!r}, {self.year!r}, {self.subject_type!r})"

    def to_dict(self):
        d = {SUBJECT_COLUMN: self.subject, YEAR_COLUMN: self.year,
             TYPE_COLUMN: self.subject_type}
        for attr, col in COURSE_SCALE_COLUMNS.items():
            d[col] = getattr(self, attr)
        return d


_POINTS = ('pzx', 'p25x', 'p50x', 'p75x', 'p90x', 'p99x', 'max_x',
           'pzy', 'p25y', 'p50y', 'p75y', 'p90y', 'p99y', 'max_y')


def infer_subject_type(subject, payload):
    """Guess the subject type for tables exported without a type column.

    VET rows repeat one scaled value across every point, listed or not.
    Applied subjects only carry the C/B/A values in P50-P90 Y, so they
    have no P25 X. A row with neither has no data.
    """
    if subject in _VET_IDS:
        return 'vet'
    points = {float(payload.get(attr, 0)) for attr in _POINTS}
    if len(points) == 1 and points != {0.0}:
        return 'vet'
    if payload.get('p25x'):
        return 'general'
    if payload.get('p50y'):
        return 'applied'
    return 'nodata'


def rows_from_frame(df):
    """Turn a course-scaling DataFrame (plus a Year column) into ScalingRows.

    Missing payload columns default to zero; missing Subject Name or Year
    columns are an error. No-data placeholder lines (fewer than 50
    students) are dropped. A table with no point columns at all only
    records which subjects ran in which year, so its lines are kept.
    """
    missing = [c for c in (SUBJECT_COLUMN, YEAR_COLUMN) if c not in df.columns]
    if missing:
        raise ValueError(f"Scaling data is missing required columns: {', '.join(missing)}")

    present = {attr: col for attr, col in COURSE_SCALE_COLUMNS.items() if col in df.columns}
    has_points = any(attr in present for attr in _POINTS)
    rows = []
    skipped = 0
    for _, rec in df.iterrows():
        subject = rec[SUBJECT_COLUMN]
        if pd.isna(subject) or pd.isna(rec[YEAR_COLUMN]):
            continue
        subject = str(subject).strip()
        payload = {attr: (0 if pd.isna(rec[col]) else rec[col]) for attr, col in present.items()}
        if not payload.get('subject_id'):
            payload.pop('subject_id', None)

        subject_type = None
        if TYPE_COLUMN in df.columns and not pd.isna(rec[TYPE_COLUMN]):
            subject_type = str(rec[TYPE_COLUMN]).strip().lower()
        if subject_type not in SUBJECT_TYPES:
            subject_type = infer_subject_type(subject, payload) if has_points else 'general'
        if subject_type == 'nodata':
            skipped += 1
            continue

        rows.append(ScalingRow(subject, rec[YEAR_COLUMN], subject_type, **payload))

    logger.info("Loaded %d scaling rows from %d table lines (%d without data)",
                len(rows), len(df), skipped)
    return rows

"""
Scaled scores for selected subjects.

General subjects map a raw result (0-100) through the fitted quartic
X4..X0, with the cubic Z3..Z0 below the 25th percentile where the
quartic is fitted loosest. Applied subjects scale by grade letter, VET
qualifications by a single flat value.
"""

import logging

import numpy as np
import pandas as pd

from .config import GRADES

logger = logging.getLogger(__name__)

SCORE_COLUMNS = ['Subject', 'Year', 'Type', 'Scaled']


def eval_poly(coeffs, x):
    """Evaluate a polynomial given highest power first."""
    return float(np.polyval(coeffs, x))


def scaled_score(row, raw):
    """Scaled result for one ScalingRow, or None when the row has no data."""
    if row.subject_type == 'nodata':
        return None
    if row.subject_type == 'vet':
        return round(float(row.p50y), 2)
    if row.subject_type == 'applied':
        grade = str(raw).strip().upper()
        if grade not in GRADES:
            raise ValueError(f"{row.subject}: applied subjects take a grade "
                             f"({'/'.join(GRADES)}), got {raw!r}")
        return round(float(getattr(row, GRADES[grade])), 2)

    try:
        x = float(raw)
    except (TypeError, ValueError):
        raise ValueError(f"{row.subject}: raw result must be a number, got {raw!r}") from None
    x = min(max(x, row.min_x), row.max_x) if row.max_x > row.min_x else x
    if x < row.p25x:
        y = eval_poly([row.Z3, row.Z2, row.Z1, row.Z0], x)
    else:
        y = eval_poly([row.X4, row.X3, row.X2, row.X1, row.X0], x)
    return round(min(100.0, max(0.0, y)), 2)


def selection_scores(matrix, rows, raw):
    """Scaled results for every current selection that has a scaling row.

    Returns a DataFrame in selection order. Selections without a row are
    skipped; an applied subject given a numeric raw result scores NaN.
    """
    by_key = {row.key: row for row in rows}
    records = []
    for sel in matrix.selections:
        row = by_key.get(sel)
        if row is None:
            logger.debug("No scaling row for selected %s/%s", sel.subject, sel.year)
            continue
        try:
            score = scaled_score(row, raw)
        except ValueError as e:
            if row.subject_type != 'applied':
                raise
            logger.debug("Skipping %s/%s: %s", sel.subject, sel.year, e)
            score = np.nan
        records.append({'Subject': sel.subject, 'Year': sel.year,
                        'Type': row.subject_type,
                        'Scaled': np.nan if score is None else score})
    return pd.DataFrame(records, columns=SCORE_COLUMNS)

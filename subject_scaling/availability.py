"""
Which (subject, year) pairs have scaling data.

The selection table asks this for every visible cell on every state
change, so the pairs are indexed once up front instead of scanning the
rows per query. No-data placeholder rows are not indexed.
"""

import logging
from collections import defaultdict

from .rows import normalise_year, rows_from_frame

logger = logging.getLogger(__name__)


class AvailabilityIndex:
    """Membership lookup over a collection of ScalingRows."""

    def __init__(self, rows=None):
        self._pairs = set()
        self._years_by_subject = defaultdict(set)
        self._subjects_by_year = defaultdict(set)
        count = 0
        for row in rows or ():
            if row.subject_type == 'nodata':
                continue
            self._add(row.subject, row.year)
            count += 1
        if count:
            self._log_built(count)

    @classmethod
    def from_frame(cls, df):
        """Index a course-scaling DataFrame by its Subject Name and Year columns."""
        if df is None:
            return cls()
        return cls(rows_from_frame(df))

    def _add(self, subject, year):
        self._pairs.add((subject, year))
        self._years_by_subject[subject].add(year)
        self._subjects_by_year[year].add(subject)

    def _log_built(self, count):
        if count > len(self._pairs):
            logger.warning("Scaling data has %d duplicate (subject, year) rows",
                           count - len(self._pairs))
        logger.info("Availability index built: %d rows, %d subject/year pairs",
                    count, len(self._pairs))

    def has_data(self, subject, year):
        return (subject, normalise_year(year)) in self._pairs

    def years_for(self, subject):
        """Years with data for one subject (unordered)."""
        return frozenset(self._years_by_subject.get(subject, ()))

    def subjects_for(self, year):
        """Subjects with data for one year (unordered)."""
        return frozenset(self._subjects_by_year.get(normalise_year(year), ()))

    def __contains__(self, pair):
        if not isinstance(pair, (tuple, list)) or len(pair) != 2:
            return False
        return self.has_data(*pair)

    def __len__(self):
        return len(self._pairs)

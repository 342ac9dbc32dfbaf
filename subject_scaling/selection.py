"""
Selection state for the subject x year table.

Rows are subjects, columns are years. A cell is eligible when the
AvailabilityIndex has data for it. The row and column "select all"
checkboxes read as checked when every eligible cell in that row/column is
selected, so cells without data never hold a checkbox unchecked.

Row and column toggles decide select vs deselect once, from the state
before the toggle, then swap in the new selection set in one step. They
only ever touch cells with data: a selection left on a cell without data
(see toggle_cell) survives row and column toggles until toggled directly
or cleared. Years are compared as string labels, so 2024 and "2024"
name the same column.
"""

import logging

from .config import YEARS
from .rows import Selection, normalise_year

logger = logging.getLogger(__name__)


def _key(subject, year):
    return Selection(subject, normalise_year(year))


class SelectionMatrix:
    def __init__(self, subjects, availability, years=YEARS, selections=None):
        self.subjects = list(subjects)
        self.years = tuple(normalise_year(year) for year in years)
        self.availability = availability
        # dict keeps insertion order and uniqueness by (subject, year)
        self._selected = {}
        for subject, year in selections or ():
            self._selected[_key(subject, year)] = None

    # --- Queries ---
    @property
    def selections(self):
        return list(self._selected)

    def __iter__(self):
        return iter(list(self._selected))

    def __len__(self):
        return len(self._selected)

    def __contains__(self, pair):
        if not isinstance(pair, (tuple, list)) or len(pair) != 2:
            return False
        return self.is_selected(*pair)

    def is_selected(self, subject, year):
        return _key(subject, year) in self._selected

    def is_year_fully_selected(self, year):
        year = normalise_year(year)
        has_data = self.availability.has_data
        return all(not has_data(subject, year) or self.is_selected(subject, year)
                   for subject in self.subjects)

    def is_subject_fully_selected(self, subject):
        has_data = self.availability.has_data
        return all(not has_data(subject, year) or self.is_selected(subject, year)
                   for year in self.years)

    def year_has_any(self, year):
        """False when no listed subject has data for the year (checkbox disabled)."""
        return not self.availability.subjects_for(year).isdisjoint(self.subjects)

    def stale_selections(self):
        """Selected pairs that have no scaling data."""
        return [sel for sel in self._selected
                if not self.availability.has_data(sel.subject, sel.year)]

    # --- Mutations ---
    def toggle_cell(self, subject, year):
        key = _key(subject, year)
        if key in self._selected:
            del self._selected[key]
            return
        if not self.availability.has_data(subject, year):
            logger.debug("Selecting %s/%s which has no scaling data", subject, year)
        self._selected[key] = None

    def toggle_year(self, year):
        year = normalise_year(year)
        if self.is_year_fully_selected(year):
            kept = {sel: None for sel in self._selected
                    if sel.year != year or not self._eligible(sel)}
            action = "deselect"
        else:
            kept = dict(self._selected)
            eligible = self.availability.subjects_for(year)
            for subject in self.subjects:
                if subject in eligible:
                    kept.setdefault(_key(subject, year), None)
            action = "select"
        self._replace(kept, action, "year", year)

    def toggle_subject(self, subject):
        if self.is_subject_fully_selected(subject):
            kept = {sel: None for sel in self._selected
                    if sel.subject != subject or not self._eligible(sel)}
            action = "deselect"
        else:
            kept = dict(self._selected)
            eligible = self.availability.years_for(subject)
            for year in self.years:
                if year in eligible:
                    kept.setdefault(_key(subject, year), None)
            action = "select"
        self._replace(kept, action, "subject", subject)

    def clear_all(self):
        if self._selected:
            logger.debug("Clearing %d selections", len(self._selected))
        self._selected = {}

    def _eligible(self, sel):
        return self.availability.has_data(sel.subject, sel.year)

    def _replace(self, new_selected, action, axis, value):
        changed = abs(len(new_selected) - len(self._selected))
        self._selected = new_selected
        logger.debug("%s %s %s: %d cells changed", action, axis, value, changed)

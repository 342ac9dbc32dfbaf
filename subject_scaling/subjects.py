"""Subject list filtering and table labels."""

from .config import UNNAMED_SUBJECT


def filter_subjects(all_subjects, validation_names=None, key=None):
    """Restrict a subject catalogue to a validation list, sorted by display name.

    all_subjects may be plain names or records; `key` pulls the display
    name out of a record. Matching is exact. With no validation list the
    whole catalogue comes back sorted.
    """
    key = key or (lambda s: s)
    subjects = list(all_subjects)
    if validation_names is not None:
        allowed = {name.strip() for name in validation_names if name and name.strip()}
        subjects = [s for s in subjects if key(s) in allowed]
    subjects.sort(key=lambda s: key(s).casefold())
    return subjects


def year_label(year):
    """'2023' -> "'23" for the column header."""
    return f"'{str(year)[2:]}"


def subject_label(subject):
    return subject or UNNAMED_SUBJECT

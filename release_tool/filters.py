"""Filtering logic for issues collected into release notes."""

from __future__ import annotations

from typing import Iterable, Optional

from .config import EXCLUDED_LABELS
from .types import Issue, ReleaseWindow


def is_excluded(issue: Issue, required_labels: Optional[Iterable[str]] = None) -> bool:
    """Tell whether an issue should be left out of the release notes.

    An issue is excluded when it carries any of the noise labels
    (dependencies, wontfix, ...) or when it is missing at least one of the
    ``required_labels``.
    """
    if issue.labels.intersection(EXCLUDED_LABELS):
        return True
    for label in required_labels or ():
        if label not in issue.labels:
            return True
    return False


def in_window(closed_at: Optional[str], window: ReleaseWindow) -> bool:
    """Check ``closed_at`` against the release window, both bounds exclusive.

    GitHub timestamps are fixed-width UTC (``2021-01-01T00:00:00Z``), so a
    plain string comparison orders them correctly.
    """
    if not closed_at:
        return False
    if closed_at <= window.start:
        return False
    return window.end is None or closed_at < window.end

"""Collects the issues closed between two releases of a repository."""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Protocol

from .filters import in_window, is_excluded
from .types import Issue, IssuePage, ReleaseWindow, RepoRef

logger = logging.getLogger(__name__)


class IssueSource(Protocol):
    def get_release_date(self, org: str, repo: str, tag: str) -> str: ...

    def issues_url(self, org: str, repo: str) -> str: ...

    def get_issue_page(self, url: str, params: Optional[dict] = None) -> IssuePage: ...


def resolve_window(source: IssueSource, repo: RepoRef, from_tag: str, to_tag: Optional[str] = None) -> ReleaseWindow:
    start = source.get_release_date(repo.owner, repo.name, from_tag)
    end = source.get_release_date(repo.owner, repo.name, to_tag) if to_tag else None
    return ReleaseWindow(start=start, end=end)


def collect_issues(
    source: IssueSource,
    repo: RepoRef,
    from_tag: str,
    to_tag: Optional[str] = None,
    required_labels: Optional[Iterable[str]] = None,
) -> list[Issue]:
    """Return the issues closed between ``from_tag`` and ``to_tag``.

    Without ``to_tag`` the window is open-ended ("now"). All pages are
    walked: the ``since`` filter only bounds the listing loosely, so an
    out-of-window issue never ends the scan.
    """
    required = frozenset(required_labels or ())
    window = resolve_window(source, repo, from_tag, to_tag)

    url: Optional[str] = source.issues_url(repo.owner, repo.name)
    params: Optional[dict] = {"state": "closed", "since": window.start}
    collected: list[Issue] = []
    page_num = 1
    while url:
        logger.info("Querying page %d of issues for %s", page_num, repo.full_name)
        page = source.get_issue_page(url, params)
        for issue in page.issues:
            if not in_window(issue.closed_at, window):
                logger.debug("Skipping issue (outside release window): %s", issue.title)
            elif is_excluded(issue, required):
                logger.debug("Skipping issue (excluded): %s", issue.title)
            else:
                collected.append(issue)
        logger.info("Found %d issues on page %d", len(page.issues), page_num)
        # The next link already carries the query string
        url, params = page.next_url, None
        page_num += 1

    return collected

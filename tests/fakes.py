"""In-memory stand-ins for the GitHub client used across the tests."""

from __future__ import annotations

from pathlib import Path

from release_tool.errors import FetchError, ManifestReadError, TagResolutionError
from release_tool.types import CreatedRelease, Issue, IssuePage


def make_issue(number: int, closed_at: str | None, labels=(), title: str | None = None) -> Issue:
    return Issue(
        number=number,
        title=title or f"Issue {number}",
        html_url=f"https://github.com/apicurio/repo/issues/{number}",
        closed_at=closed_at,
        labels=frozenset(labels),
    )


class FakeGitHub:
    """Serves canned release dates, issue pages and manifests, recording every call."""

    def __init__(self, release_dates=None, pages=None, files=None):
        self.release_dates = release_dates or {}
        self.pages = pages or {}
        self.files = files or {}
        self.page_requests: list[tuple[str, dict | None]] = []
        self.calls: list[tuple] = []
        # Exceptions raised by create_release / upload_asset, keyed by method name
        self.failures: dict[str, Exception] = {}

    def get_release_date(self, org, repo, tag):
        self.calls.append(("get_release_date", org, repo, tag))
        try:
            return self.release_dates[(repo, tag)]
        except KeyError:
            raise TagResolutionError(f"no release for {repo}:{tag}") from None

    def issues_url(self, org, repo):
        return f"https://api.github.com/repos/{org}/{repo}/issues"

    def get_issue_page(self, url, params=None):
        self.page_requests.append((url, params))
        if url not in self.pages:
            raise FetchError(f"Failed to list issues: 500 for {url}")
        issues, next_url = self.pages[url]
        return IssuePage(issues=list(issues), next_url=next_url)

    def fetch_file_at_ref(self, org, repo, path, ref):
        self.calls.append(("fetch_file_at_ref", org, repo, path, ref))
        try:
            return self.files[(repo, path, ref)]
        except KeyError:
            raise ManifestReadError(f"Failed to fetch {path} at {ref}") from None

    def create_release(self, org, repo, name, prerelease, tag, body):
        self.calls.append(("create_release", org, repo, name, prerelease, tag, body))
        if "create_release" in self.failures:
            raise self.failures["create_release"]
        return CreatedRelease(
            html_url=f"https://github.com/{org}/{repo}/releases/tag/{tag}",
            upload_url=f"https://uploads.github.com/repos/{org}/{repo}/releases/1/assets{{?name,label}}",
        )

    def upload_asset(self, upload_url, path: Path, content_type):
        self.calls.append(("upload_asset", upload_url, path.name, content_type))
        if "upload_asset" in self.failures:
            raise self.failures["upload_asset"]
        return {"name": path.name}

    def get_latest_release(self, org, repo):
        self.calls.append(("get_latest_release", org, repo))
        return {"tag_name": "v1.0.0", "published_at": "2021-03-01T10:20:30Z"}

    def call_names(self) -> list[str]:
        return [call[0] for call in self.calls]

"""GitHub REST API client for releases, issues and raw repository files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

import requests

from .config import API_BASE_URL, RAW_CONTENT_BASE_URL, REQUEST_TIMEOUT_S
from .errors import (
    AssetUploadError,
    FetchError,
    ManifestReadError,
    MetadataWriteError,
    ReleaseCreationError,
    ReleaseToolError,
    TagResolutionError,
)
from .types import CreatedRelease, Issue, IssuePage

logger = logging.getLogger(__name__)

UPLOAD_URL_TEMPLATE_MARKER = "{?name"


def _describe(response: requests.Response) -> str:
    return f"{response.status_code} {response.reason or ''}".strip()


def _json(response: requests.Response, error_cls: type[ReleaseToolError]) -> Any:
    try:
        return response.json()
    except ValueError as e:
        raise error_cls(f"Invalid JSON in response from {response.url}: {e}") from e


def expand_upload_url(upload_url: str, asset_name: str) -> str:
    """Turn the ``upload_url`` URI template of a release into a concrete URL."""
    idx = upload_url.find(UPLOAD_URL_TEMPLATE_MARKER)
    if idx < 0:
        raise AssetUploadError(f"Invalid asset upload URL pattern: {upload_url}")
    return f"{upload_url[:idx]}?name={asset_name}"


class GitHubClient:
    """Handles all communication with the GitHub REST API.

    Every call is a single blocking request; failures are raised as the
    error type of the calling step and never retried.
    """

    BASE_URL = API_BASE_URL
    RAW_BASE_URL = RAW_CONTENT_BASE_URL

    def __init__(self, token: str, session: Optional[requests.Session] = None):
        self.token = token
        self.session = session or requests.Session()
        self.session.headers.update({
            "Authorization": f"token {self.token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        })

    def _request(
        self,
        method: str,
        endpoint: str,
        error_cls: type[ReleaseToolError],
        **kwargs,
    ) -> requests.Response:
        url = f"{self.BASE_URL}{endpoint}" if endpoint.startswith("/") else endpoint
        logger.debug("%s %s", method, url)
        try:
            return self.session.request(method, url, timeout=REQUEST_TIMEOUT_S, **kwargs)
        except requests.exceptions.RequestException as e:
            raise error_cls(f"Request to {url} failed: {e}") from e

    def issues_url(self, org: str, repo: str) -> str:
        return f"{self.BASE_URL}/repos/{org}/{repo}/issues"

    def get_release_date(self, org: str, repo: str, tag: str) -> str:
        """Figure out the publish date of the release for ``tag``."""
        logger.info("Getting release data for %s/%s:%s", org, repo, tag)
        response = self._request(
            "GET", f"/repos/{org}/{repo}/releases/tags/{tag}", TagResolutionError,
        )
        if response.status_code != 200:
            raise TagResolutionError(
                f"Failed to get release info for {org}/{repo}:{tag}: {_describe(response)}"
            )
        published = (_json(response, TagResolutionError) or {}).get("created_at")
        if not published:
            raise TagResolutionError(f"Could not find published date for release {tag}")
        logger.info("Release %s was published on %s", tag, published)
        return published

    def get_issue_page(self, url: str, params: Optional[dict] = None) -> IssuePage:
        """Fetch one page of an issue listing along with its ``next`` link."""
        response = self._request("GET", url, FetchError, params=params)
        if response.status_code != 200:
            raise FetchError(f"Failed to list issues: {_describe(response)}")
        payload = _json(response, FetchError)
        if not isinstance(payload, list):
            raise FetchError(f"Expected a list of issues from {url}, got {type(payload).__name__}")
        next_link = response.links.get("next") or {}
        return IssuePage(
            issues=[Issue.from_api(item) for item in payload],
            next_url=next_link.get("url"),
        )

    def create_release(
        self,
        org: str,
        repo: str,
        name: str,
        prerelease: bool,
        tag: str,
        body: str,
    ) -> CreatedRelease:
        logger.info("Creating GitHub release %s in %s/%s", tag, org, repo)
        response = self._request(
            "POST",
            f"/repos/{org}/{repo}/releases",
            ReleaseCreationError,
            json={"tag_name": tag, "name": name, "body": body, "prerelease": prerelease},
        )
        if response.status_code != 201:
            logger.error("Release creation rejected: %s", response.text[:500])
            raise ReleaseCreationError(
                f"Failed to create release {tag} in GitHub: {_describe(response)}"
            )
        payload = _json(response, ReleaseCreationError)
        upload_url = (payload.get("upload_url") or "").strip()
        if not upload_url:
            raise ReleaseCreationError("Failed to get asset upload URL for newly created release")
        return CreatedRelease(html_url=payload.get("html_url") or "", upload_url=upload_url)

    def upload_asset(self, upload_url: str, path: Path, content_type: str) -> dict[str, Any]:
        target = expand_upload_url(upload_url, path.name)
        try:
            data = path.read_bytes()
        except OSError as e:
            raise AssetUploadError(f"Failed to read artifact {path}: {e}") from e
        logger.info("Uploading artifact asset: %s", target)
        response = self._request(
            "POST",
            target,
            AssetUploadError,
            data=data,
            headers={"Content-Type": content_type, "Accept": "application/json"},
        )
        if response.status_code != 201:
            raise AssetUploadError(f"Failed to upload asset {path.name}: {_describe(response)}")
        return _json(response, AssetUploadError)

    def fetch_file_at_ref(self, org: str, repo: str, path: str, ref: str) -> str:
        url = f"{self.RAW_BASE_URL}/{org}/{repo}/{ref}/{path}"
        response = self._request("GET", url, ManifestReadError, headers={"Accept": "*/*"})
        if response.status_code != 200:
            raise ManifestReadError(f"Failed to fetch {path} at {ref}: {_describe(response)}")
        return response.text

    def get_latest_release(self, org: str, repo: str) -> dict[str, Any]:
        response = self._request("GET", f"/repos/{org}/{repo}/releases/latest", MetadataWriteError)
        if response.status_code != 200:
            raise MetadataWriteError(f"Failed to get latest release info: {_describe(response)}")
        return _json(response, MetadataWriteError)

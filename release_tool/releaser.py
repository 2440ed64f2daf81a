"""Release orchestration: issues -> notes -> GitHub release -> assets."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .collector import collect_issues
from .config import EDITOR_LABEL, EDITOR_TAG_PREFIX, EDITOR_TAG_SUFFIX, SIGNATURE_SUFFIX, ReleaseConfig
from .errors import ArtifactNotFoundError
from .github_api import GitHubClient
from .manifest import get_dependency_version
from .notes import render_release_notes
from .output import write_release_metadata
from .profiles import ReleaseProfile, load_profile
from .types import Issue, ReleaseOutcome, RepoRef

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReleaseRequest:
    repository: str
    release_name: str
    release_tag: str
    previous_tag: str
    prerelease: bool = False
    artifact: Optional[Path] = None


@dataclass(frozen=True)
class Asset:
    path: Path
    content_type: str


@dataclass
class PreparedRelease:
    profile: ReleaseProfile
    request: ReleaseRequest
    tag: str
    issues: list[Issue]
    notes: str
    assets: list[Asset] = field(default_factory=list)


def editor_tag(version: str) -> str:
    return f"{EDITOR_TAG_PREFIX}{version}{EDITOR_TAG_SUFFIX}"


def resolve_assets(profile: ReleaseProfile, artifact: Optional[Path]) -> list[Asset]:
    """List the files to upload, checking they exist before anything is released."""
    if not profile.requires_artifact:
        return []
    if artifact is None:
        raise ArtifactNotFoundError("Missing command line option: artifact (-a)")
    assets = [Asset(artifact, profile.artifact_content_type)]
    if profile.upload_signature:
        assets.append(Asset(artifact.with_name(artifact.name + SIGNATURE_SUFFIX), "text/plain"))
    for asset in assets:
        if not asset.path.is_file():
            raise ArtifactNotFoundError(f"Missing file: {asset.path.resolve()}")
    return assets


class Releaser:
    """Cuts one release end to end. Holds no state between releases."""

    def __init__(self, client: GitHubClient, config: ReleaseConfig):
        self.client = client
        self.config = config

    def release(self, request: ReleaseRequest) -> ReleaseOutcome:
        return self.publish(self.prepare(request))

    def prepare(self, request: ReleaseRequest) -> PreparedRelease:
        profile = load_profile(request.repository)
        assets = resolve_assets(profile, request.artifact)

        issues = self.collect_release_issues(profile, request)
        logger.info("Found %d issues closed in release %s", len(issues), request.release_tag)

        notes = render_release_notes(profile.product_name, request.release_tag, issues, profile.trailer)
        return PreparedRelease(
            profile=profile,
            request=request,
            tag=profile.tag_for(request.release_tag),
            issues=issues,
            notes=notes,
            assets=assets,
        )

    def collect_release_issues(self, profile: ReleaseProfile, request: ReleaseRequest) -> list[Issue]:
        repo = RepoRef(self.config.org, profile.repository)
        issues = collect_issues(self.client, repo, profile.tag_for(request.previous_tag))
        if profile.editor is not None:
            issues.extend(self._collect_editor_issues(profile, request))
        return issues

    def _collect_editor_issues(self, profile: ReleaseProfile, request: ReleaseRequest) -> list[Issue]:
        editor = profile.editor
        repo = RepoRef(self.config.org, profile.repository)
        from_version = get_dependency_version(
            self.client, repo, editor.manifest_path, profile.tag_for(request.previous_tag), editor.package_name,
        )
        to_version = get_dependency_version(
            self.client, repo, editor.manifest_path, profile.tag_for(request.release_tag), editor.package_name,
        )
        if from_version == to_version:
            logger.info("No editor version upgrade detected. Version is: %s", from_version)
            return []

        logger.info(
            "Editor upgraded from version %s to version %s - including %s editor issues in release notes.",
            from_version, to_version, editor.repository,
        )
        return collect_issues(
            self.client,
            RepoRef(self.config.org, editor.repository),
            editor_tag(from_version),
            editor_tag(to_version),
            required_labels={EDITOR_LABEL},
        )

    def publish(self, prepared: PreparedRelease) -> ReleaseOutcome:
        profile, request = prepared.profile, prepared.request
        outcome = ReleaseOutcome(tag=prepared.tag, notes=prepared.notes, issue_count=len(prepared.issues))

        created = self.client.create_release(
            self.config.org, profile.repository, request.release_name, request.prerelease, prepared.tag, prepared.notes,
        )
        outcome.release_url = created.html_url

        for asset in prepared.assets:
            self.client.upload_asset(created.upload_url, asset.path, asset.content_type)
            outcome.uploaded_assets.append(asset.path.name)

        if profile.publish_latest_metadata:
            latest = self.client.get_latest_release(self.config.org, profile.repository)
            outcome.metadata_file = str(write_release_metadata(self.config.output_dir, latest))

        return outcome

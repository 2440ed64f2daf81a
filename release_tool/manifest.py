"""Dependency version lookup in a package.json manifest."""

from __future__ import annotations

import json
import logging
from typing import Protocol

from .errors import ManifestReadError
from .types import RepoRef

logger = logging.getLogger(__name__)


class FileSource(Protocol):
    def fetch_file_at_ref(self, org: str, repo: str, path: str, ref: str) -> str: ...


def parse_dependency_version(manifest_text: str, dependency: str) -> str:
    try:
        manifest = json.loads(manifest_text)
    except json.JSONDecodeError as e:
        raise ManifestReadError(f"Manifest is not valid JSON: {e}") from e
    dependencies = manifest.get("dependencies") if isinstance(manifest, dict) else None
    version = (dependencies or {}).get(dependency)
    if not isinstance(version, str) or not version:
        raise ManifestReadError(f"Could not find version info for dependency: {dependency}")
    return version


def get_dependency_version(source: FileSource, repo: RepoRef, path: str, ref: str, dependency: str) -> str:
    """Read the version of ``dependency`` from the manifest at ``path`` as of ``ref``."""
    text = source.fetch_file_at_ref(repo.owner, repo.name, path, ref)
    version = parse_dependency_version(text, dependency)
    logger.debug("%s@%s depends on %s %s", repo.full_name, ref, dependency, version)
    return version

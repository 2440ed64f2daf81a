"""Release profiles for the repositories this tool knows how to release."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .errors import UnsupportedRepositoryError

STUDIO_TRAILER = (
    "For more information, please see the Apicurio Studio's official project site:\r\n"
    "\r\n"
    "* [General Information](http://www.apicur.io/)\r\n"
    "* [Download/Quickstart](http://www.apicur.io/download)\r\n"
    "* [Blog](http://www.apicur.io/blog)"
)


@dataclass(frozen=True)
class EditorDependency:
    """An editor bundled from another repository through a manifest dependency."""

    manifest_path: str
    package_name: str
    repository: str


@dataclass(frozen=True)
class ReleaseProfile:
    repository: str
    product_name: str
    tag_prefix: str = ""
    trailer: str = ""

    # Artifacts
    requires_artifact: bool = False
    artifact_content_type: str = "application/zip"
    upload_signature: bool = False

    editor: Optional[EditorDependency] = None
    publish_latest_metadata: bool = False

    def tag_for(self, version: str) -> str:
        return f"{self.tag_prefix}{version}"


RELEASE_PROFILES: dict[str, ReleaseProfile] = {
    "apicurio-studio": ReleaseProfile(
        repository="apicurio-studio",
        product_name="Apicurio Studio",
        tag_prefix="v",
        trailer=STUDIO_TRAILER,
        requires_artifact=True,
        upload_signature=True,
        publish_latest_metadata=True,
    ),
    # Released into its own repository rather than apicurio-studio
    "apicurito": ReleaseProfile(
        repository="apicurito",
        product_name="Apicurito",
        editor=EditorDependency(
            manifest_path="ui/package.json",
            package_name="apicurio-design-studio",
            repository="apicurio-studio",
        ),
    ),
}


def load_profile(repository: str) -> ReleaseProfile:
    try:
        return RELEASE_PROFILES[repository]
    except KeyError:
        raise UnsupportedRepositoryError(f"Unsupported repository: {repository}") from None

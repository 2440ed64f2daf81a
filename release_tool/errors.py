"""Error types raised while cutting a release.

Every step raises one of these and lets it propagate; only the CLI entry
point turns them into an exit code.
"""


class ReleaseToolError(Exception):
    pass


class TagResolutionError(ReleaseToolError):
    """A release tag has no release (or no publish date) on GitHub."""


class FetchError(ReleaseToolError):
    """Listing issues returned a non-success response."""


class ManifestReadError(ReleaseToolError):
    """A manifest file could not be fetched, parsed, or lacks the dependency."""


class ReleaseCreationError(ReleaseToolError):
    pass


class AssetUploadError(ReleaseToolError):
    pass


class ArtifactNotFoundError(ReleaseToolError):
    pass


class UnsupportedRepositoryError(ReleaseToolError):
    pass


class MetadataWriteError(ReleaseToolError):
    """Fetching or writing the latest-release metadata file failed."""

"""Release tool for Apicurio projects.

Cuts a GitHub release for a repository:
- Resolves the previous (and optionally next) release tag to a publish date
- Collects issues closed in that window, skipping noise labels
- Renders release notes and creates the GitHub release
- Uploads the release artifacts to it
"""

__version__ = "1.0.0"

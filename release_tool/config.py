"""Configuration constants and per-run settings for the release tool."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

API_BASE_URL = "https://api.github.com"
RAW_CONTENT_BASE_URL = "https://raw.githubusercontent.com"
REQUEST_TIMEOUT_S = 30

DEFAULT_ORG = "apicurio"
TOKEN_ENV_VARS = ("GITHUB_TOKEN", "GH_TOKEN")

# Issues carrying any of these labels never show up in release notes
EXCLUDED_LABELS = ("dependencies", "question", "invalid", "wontfix", "duplicate")

# Editor releases in apicurio-studio are tagged v<version>.Final
EDITOR_TAG_PREFIX = "v"
EDITOR_TAG_SUFFIX = ".Final"
EDITOR_LABEL = "editor"

SIGNATURE_SUFFIX = ".asc"


@dataclass(frozen=True)
class ReleaseConfig:
    """Settings read once at startup and passed to the client and releaser."""

    token: str
    org: str = DEFAULT_ORG
    output_dir: Path = field(default_factory=Path.cwd)

    @classmethod
    def from_args(
        cls,
        *,
        token: str | None = None,
        org: str = DEFAULT_ORG,
        output_dir: str | Path | None = None,
    ) -> "ReleaseConfig":
        tok = token or next((os.environ[var] for var in TOKEN_ENV_VARS if os.environ.get(var)), None)
        if not tok:
            raise ValueError(
                "Missing GitHub token. Provide --github-pat or set GITHUB_TOKEN (or GH_TOKEN)."
            )
        out = Path(output_dir) if output_dir else Path.cwd()
        return cls(token=tok, org=org, output_dir=out)

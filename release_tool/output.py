from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .errors import MetadataWriteError

logger = logging.getLogger(__name__)


def metadata_filename(published_at: str) -> str:
    # Colons are not allowed in file names on every platform
    return f"{published_at.replace(':', '-')}.json"


def write_release_metadata(output_dir: str | Path, release: dict[str, Any]) -> Path:
    """Write the release payload, as returned by GitHub, to ``<published_at>.json``."""
    published_at = release.get("published_at")
    if not published_at:
        raise MetadataWriteError("Could not find published date for release.")
    out_dir = Path(output_dir)
    path = out_dir / metadata_filename(published_at)
    logger.info("Writing latest release info to: %s", path.resolve())
    try:
        out_dir.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(release, indent=4), encoding="utf-8")
    except OSError as e:
        raise MetadataWriteError(f"Failed to write release info to {path}: {e}") from e
    return path

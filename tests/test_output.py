"""Tests for the latest-release metadata file."""

import json

import pytest

from release_tool.errors import MetadataWriteError
from release_tool.output import metadata_filename, write_release_metadata


def test_metadata_filename():
    assert metadata_filename("2021-03-01T10:20:30Z") == "2021-03-01T10-20-30Z.json"


def test_write_release_metadata(tmp_path):
    release = {"tag_name": "v1.1.0", "published_at": "2021-03-01T10:20:30Z", "assets": []}
    path = write_release_metadata(tmp_path / "site" / "releases", release)
    assert path == tmp_path / "site" / "releases" / "2021-03-01T10-20-30Z.json"
    assert json.loads(path.read_text(encoding="utf-8")) == release
    assert path.read_text(encoding="utf-8").startswith('{\n    "tag_name"')


def test_write_release_metadata_without_publish_date(tmp_path):
    with pytest.raises(MetadataWriteError):
        write_release_metadata(tmp_path, {"tag_name": "v1.1.0", "published_at": None})

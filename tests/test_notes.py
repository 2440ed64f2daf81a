"""Tests for release notes rendering."""

from release_tool.notes import format_issue_line, render_release_notes

from fakes import make_issue

HEADER = "This represents the official release of Apicurito, version 1.2.0."


class TestRenderReleaseNotes:
    def test_full_layout(self):
        issues = [make_issue(12, "2021-02-01T00:00:00Z", title="Fix editor crash"), make_issue(7, None)]
        notes = render_release_notes("Apicurito", "1.2.0", issues, "See the site.")
        assert notes == (
            HEADER + "\n\n"
            "The following issues have been resolved in this release:\n\n"
            "* [#12](https://github.com/apicurio/repo/issues/12) Fix editor crash\n"
            "* [#7](https://github.com/apicurio/repo/issues/7) Issue 7\n"
            "\n\n"
            "See the site."
        )

    def test_empty_issue_list(self):
        notes = render_release_notes("Apicurito", "1.2.0", [], "Trailer text")
        assert notes.startswith(HEADER)
        assert notes.endswith("Trailer text")
        assert not [line for line in notes.splitlines() if line.startswith("* ")]

    def test_empty_trailer(self):
        notes = render_release_notes("Apicurito", "1.2.0", [make_issue(1, None)])
        assert notes.endswith("Issue 1\n\n\n")

    def test_deterministic(self):
        issues = [make_issue(n, None) for n in (3, 2, 1)]
        assert render_release_notes("X", "1", issues, "t") == render_release_notes("X", "1", issues, "t")

    def test_keeps_given_order(self):
        notes = render_release_notes("X", "1", [make_issue(1, None), make_issue(3, None), make_issue(2, None)])
        numbers = [line.split("]")[0] for line in notes.splitlines() if line.startswith("* ")]
        assert numbers == ["* [#1", "* [#3", "* [#2"]

    def test_format_issue_line(self):
        assert format_issue_line(make_issue(5, None, title="Title")) == (
            "* [#5](https://github.com/apicurio/repo/issues/5) Title"
        )

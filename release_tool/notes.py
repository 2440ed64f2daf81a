from __future__ import annotations

from typing import Sequence

from .types import Issue


def format_issue_line(issue: Issue) -> str:
    return f"* [#{issue.number}]({issue.html_url}) {issue.title}"


def render_release_notes(product_name: str, version: str, issues: Sequence[Issue], trailer: str = "") -> str:
    lines = [
        f"This represents the official release of {product_name}, version {version}.",
        "",
        "The following issues have been resolved in this release:",
        "",
    ]
    lines.extend(format_issue_line(issue) for issue in issues)
    return "\n".join(lines) + "\n\n\n" + trailer

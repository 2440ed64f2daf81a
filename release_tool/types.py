from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class RepoRef:
    owner: str
    name: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"


@dataclass(frozen=True)
class Issue:
    number: int
    title: str
    html_url: str
    closed_at: str | None
    labels: frozenset[str] = frozenset()

    @classmethod
    def from_api(cls, payload: dict[str, Any]) -> "Issue":
        labels = frozenset(
            label.get("name", "") for label in payload.get("labels") or [] if isinstance(label, dict)
        )
        return cls(
            number=int(payload.get("number") or 0),
            title=payload.get("title") or "",
            html_url=payload.get("html_url") or "",
            closed_at=payload.get("closed_at"),
            labels=labels,
        )


@dataclass(frozen=True)
class ReleaseWindow:
    start: str
    end: str | None = None


@dataclass(frozen=True)
class IssuePage:
    issues: list[Issue]
    next_url: str | None = None


@dataclass(frozen=True)
class CreatedRelease:
    html_url: str
    upload_url: str


@dataclass
class ReleaseOutcome:
    tag: str
    notes: str
    issue_count: int
    release_url: str | None = None
    uploaded_assets: list[str] = field(default_factory=list)
    metadata_file: str | None = None

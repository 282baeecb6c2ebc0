"""Data types for GitHub API requests and responses."""

import enum
from dataclasses import dataclass, field, replace
from typing import Any

from release_on_push.services.github.exceptions import GitHubAPIError

# Decoded JSON payloads (commits, pull requests, releases) are passed through as-is
Document = dict[str, Any]


@dataclass(frozen=True)
class Context:
    """Read-only parameters for a single release-notes run."""

    api_url: str
    repo: str  # owner/name
    sha: str
    token: str

    def with_sha(self, sha: str) -> "Context":
        """Copy of this context pointing at another commit or ref."""
        return replace(self, sha=sha)


@dataclass
class NormalizedResponse:
    """HTTP response with its Link header parsed and its JSON body decoded."""

    status_code: int
    headers: dict[str, str]
    body: Any  # list of records, a single record, or None
    links: dict[str, str] = field(default_factory=dict)  # rel -> url


class LookupOutcome(enum.Enum):
    FOUND = "found"
    EMPTY = "empty"
    ERROR = "error"


@dataclass
class ReleaseLookup:
    """Result of looking up the most recent release."""

    outcome: LookupOutcome
    release: Document | None = None
    error: GitHubAPIError | None = None

    @property
    def status_code(self) -> int | None:
        return self.error.status_code if self.error else None


def commit_sha(record: Document) -> str:
    """The 40-character sha identifying a commit record."""
    return record["sha"]


def commit_message(record: Document) -> str:
    """Full commit message, or an empty string when the record has none."""
    return (record.get("commit") or {}).get("message") or ""

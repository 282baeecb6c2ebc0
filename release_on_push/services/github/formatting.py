"""One-line renderings of commit records."""

from release_on_push.services.github.types import Document, commit_message, commit_sha


def commit_title(commit: Document) -> str:
    """First line of the commit message."""
    return commit_message(commit).split("\n", 1)[0]


def commit_summary(commit: Document) -> str:
    """Changelog line such as `- [167c6902] Fix bug`."""
    return f"- [{commit_sha(commit)[:8]}] {commit_title(commit)}"

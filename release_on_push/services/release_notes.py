"""Release notes body built from the commit range since the last release."""

import logging

from release_on_push.services.github import GitHubReadOperations, commit_summary

logger = logging.getLogger(__name__)


def build_release_notes(ops: GitHubReadOperations, base: str | None) -> str:
    """
    Render one changelog line per commit between `base` and the context sha.

    Args:
        ops: Read operations bound to the commit being released
        base: Sha of the previous release commit, or None for the full history

    Returns:
        Newline-separated commit summaries, newest first
    """
    lines = [commit_summary(commit) for commit in ops.list_commits_to_base(base)]
    logger.info(f"Collected {len(lines)} commit(s) since {base[:8] if base else 'the first commit'}")
    return "\n".join(lines)

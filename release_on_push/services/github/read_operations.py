"""
GitHub API read operations.

Provides the read-only endpoints needed to build release notes:
- Pull requests associated with a commit
- Most recent release
- Single commit details
- Commit history, paginated and cut off at a base commit
"""

import itertools
import logging
from collections.abc import Iterator

from release_on_push.services.github.exceptions import GitHubAPIError
from release_on_push.services.github.helpers import error_for_response
from release_on_push.services.github.pagination import paginate
from release_on_push.services.github.responses import fetch, normalize_response, send
from release_on_push.services.github.types import (
    Context,
    Document,
    LookupOutcome,
    NormalizedResponse,
    ReleaseLookup,
    commit_sha,
)

logger = logging.getLogger(__name__)


class GitHubReadOperations:
    """
    Read-only operations for GitHub API.

    All requests are made on behalf of one Context (API url, repository,
    commit and token), which is never modified.
    """

    def __init__(self, context: Context, max_pages: int | None = None):
        self.context = context
        self.max_pages = max_pages

    def _repo_url(self, path: str = "") -> str:
        return f"{self.context.api_url}/repos/{self.context.repo}{path}"

    def fetch_related_prs(self) -> NormalizedResponse:
        """
        Fetch pull requests associated with the context commit.

        See https://docs.github.com/en/rest/commits/commits#list-pull-requests-associated-with-a-commit
        """
        return fetch(self.context, self._repo_url(f"/commits/{self.context.sha}/pulls"))

    def lookup_most_recent_release(self) -> ReleaseLookup:
        """
        Look up the most recent release without raising for HTTP errors.

        A 404 or an empty releases list both mean the project has no release.

        Raises:
            GitHubDecodeError: If a successful response has a malformed body
        """
        response = send(self.context, self._repo_url("/releases"), params={"per_page": 1})

        if response.status_code == 404:
            return ReleaseLookup(LookupOutcome.EMPTY)

        error = error_for_response(response, self.context.repo)
        if error is not None:
            return ReleaseLookup(LookupOutcome.ERROR, error=error)

        releases = normalize_response(response).body
        if not isinstance(releases, list):
            error = GitHubAPIError(
                f"Expected a list of releases, got {type(releases).__name__}",
                response.status_code,
            )
            return ReleaseLookup(LookupOutcome.ERROR, error=error)
        if not releases:
            return ReleaseLookup(LookupOutcome.EMPTY)
        return ReleaseLookup(LookupOutcome.FOUND, release=releases[0])

    def fetch_most_recent_release(self) -> Document | None:
        """
        Get the most recent release from the releases list endpoint.

        Uses https://docs.github.com/en/rest/releases/releases#list-releases

        Returns:
            The release, or None when the project has no releases

        Raises:
            GitHubAPIError: For any error status other than 404
        """
        lookup = self.lookup_most_recent_release()

        if lookup.error is not None:
            raise lookup.error
        if lookup.outcome is LookupOutcome.EMPTY:
            logger.info("No release found for project.")
            return None
        return lookup.release

    def fetch_commit(self) -> NormalizedResponse:
        """
        Fetch a single commit. The context sha may also be a branch or tag name.

        See https://docs.github.com/en/rest/commits/commits#get-a-commit
        """
        return fetch(self.context, self._repo_url(f"/commits/{self.context.sha}"))

    def list_commits(self) -> NormalizedResponse:
        """
        Fetch the first page of commits reachable from the context sha, newest first.

        See https://docs.github.com/en/rest/commits/commits#list-commits
        """
        return fetch(self.context, self._repo_url("/commits"), params={"sha": self.context.sha})

    def list_commits_to_base(self, base: str | None = None) -> Iterator[Document]:
        """
        Lazily yield commits from the context sha back to, but excluding, `base`.

        Equivalent to `git log base..sha`. If base is None or never seen, every
        commit reachable from sha is yielded. Nothing is fetched until the first
        commit is requested, and no page after the one containing base is fetched.
        """
        pages = paginate(self.context, self.list_commits(), max_pages=self.max_pages)
        commits = itertools.chain.from_iterable(page.body for page in pages)
        yield from itertools.takewhile(lambda commit: commit_sha(commit) != base, commits)

    def resolve_base(self) -> str | None:
        """
        Sha of the commit the most recent release was tagged on.

        Returns:
            The commit sha, or None when the project has no release yet
        """
        release = self.fetch_most_recent_release()
        if release is None:
            return None

        tag = release["tag_name"]
        tag_ops = GitHubReadOperations(self.context.with_sha(tag), self.max_pages)
        sha = commit_sha(tag_ops.fetch_commit().body)
        logger.info(f"Most recent release {tag} is at {sha[:8]}")
        return sha

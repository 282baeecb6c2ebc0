"""
GitHub API helper utilities.

Provides request headers, Link header parsing, rate limit handling and
error response processing for GitHub API calls.
"""

import logging
import re

import httpx

from release_on_push.services.github.exceptions import GitHubAPIError
from release_on_push.services.github.types import Context

logger = logging.getLogger(__name__)

API_VERSION = "2022-11-28"

# One comma-separated `<url>; rel="name"` segment, matched in full. A segment
# with any other shape (extra parameters, unquoted rel, missing bracket,
# different spacing) is skipped rather than reported, so a partly malformed
# header still yields whichever links it does contain.
LINK_SEGMENT_RE = re.compile(r'<([^<>]+)>; rel="([^"]+)"')


def auth_headers(context: Context) -> dict[str, str]:
    """Headers sent with every request made on behalf of a context."""
    return {
        "Authorization": f"token {context.token}",
        "Accept": "application/vnd.github+json",
        "X-GitHub-Api-Version": API_VERSION,
    }


def parse_link_header(link_header: str | None) -> dict[str, str]:
    """
    Parse a Link header into a mapping of rel -> url.

    Example:
        <https://api.github.com/repositories/1/commits?page=2>; rel="next",
        <https://api.github.com/repositories/1/commits?page=9>; rel="last"

    This is not an RFC 8288 parser. Segments that don't match the pattern are
    dropped, and when a rel appears twice the last URL wins.

    Returns:
        Mapping such as {"next": url, "last": url}; empty if nothing matched
    """
    if not link_header:
        return {}

    links: dict[str, str] = {}
    for segment in link_header.split(","):
        match = LINK_SEGMENT_RE.fullmatch(segment.strip())
        if match is None:
            continue
        url, rel = match.groups()
        links[rel] = url
    return links


class RateLimitInfo:
    """Rate limit information from GitHub API response."""

    def __init__(self, response: httpx.Response) -> None:
        self.remaining = response.headers.get("X-RateLimit-Remaining")
        self.reset = response.headers.get("X-RateLimit-Reset")

    @property
    def reset_timestamp(self) -> int | None:
        """Get reset timestamp as integer, or None if not available."""
        return int(self.reset) if self.reset else None

    @property
    def is_exhausted(self) -> bool:
        """Check if rate limit is exhausted."""
        return self.remaining is not None and int(self.remaining) == 0


def error_for_response(response: httpx.Response, repo_name: str) -> GitHubAPIError | None:
    """
    Build the error matching a GitHub API response, without raising it.

    Args:
        response: The HTTP response from GitHub API
        repo_name: Repository name for error context (format: "owner/repo")

    Returns:
        GitHubAPIError for any non-2xx status, None for success
    """
    if response.is_success:
        return None

    status = response.status_code
    if status == 401:
        return GitHubAPIError("Invalid or expired GitHub token", 401)
    if status == 404:
        return GitHubAPIError(f"Repository or resource not found: {repo_name}", 404)
    if status == 403:
        rate_info = RateLimitInfo(response)
        if rate_info.is_exhausted:
            return GitHubAPIError(
                "GitHub API rate limit exceeded",
                403,
                rate_limit_reset=rate_info.reset_timestamp,
            )
        return GitHubAPIError("GitHub API forbidden", 403)
    return GitHubAPIError(f"GitHub API error: {status}", status)


def handle_error_response(response: httpx.Response, repo_name: str) -> None:
    """
    Raise for error responses from GitHub API.

    Raises:
        GitHubAPIError: For authentication, authorization, or other API errors
    """
    error = error_for_response(response, repo_name)
    if error is not None:
        logger.debug(f"GitHub request for {repo_name} failed: {error.message}")
        raise error

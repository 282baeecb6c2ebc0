"""Exceptions for GitHub service."""


class GitHubAPIError(Exception):
    """Error from GitHub API."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        rate_limit_reset: int | None = None,
    ):
        self.message = message
        self.status_code = status_code
        self.rate_limit_reset = rate_limit_reset  # Unix timestamp when rate limit resets
        super().__init__(message)


class GitHubDecodeError(Exception):
    """Response body from GitHub could not be decoded as JSON."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Malformed JSON body from {url}: {reason}")


class PaginationLimitExceeded(GitHubAPIError):
    """More pages remain after the configured page limit was reached.

    Raised instead of returning a truncated sequence, since a partial commit
    list would produce an incomplete changelog.
    """

    def __init__(self, max_pages: int, next_url: str):
        self.max_pages = max_pages
        self.next_url = next_url
        super().__init__(
            f"Stopped after {max_pages} pages with more remaining (next: {next_url})"
        )

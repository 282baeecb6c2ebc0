"""
GitHub service package.

Usage: `from release_on_push.services.github import GitHubReadOperations, Context`

Module structure:
- read_operations.py: Endpoint accessors and the commit range walker
- pagination.py: Lazy Link header pagination
- responses.py: Request sending and response normalization
- http_client.py: Shared HTTP client
- helpers.py: Headers, Link header parsing, rate limit and error handling
- formatting.py: Commit title and changelog line rendering
- types.py: Data types
- exceptions.py: Custom exceptions
"""

from release_on_push.services.github.exceptions import (
    GitHubAPIError,
    GitHubDecodeError,
    PaginationLimitExceeded,
)
from release_on_push.services.github.formatting import commit_summary, commit_title
from release_on_push.services.github.helpers import (
    RateLimitInfo,
    handle_error_response,
    parse_link_header,
)
from release_on_push.services.github.http_client import close_github_client
from release_on_push.services.github.pagination import paginate
from release_on_push.services.github.read_operations import GitHubReadOperations
from release_on_push.services.github.responses import normalize_response
from release_on_push.services.github.types import (
    Context,
    Document,
    LookupOutcome,
    NormalizedResponse,
    ReleaseLookup,
)

__all__ = [
    # Operations (main entry point)
    "GitHubReadOperations",
    "paginate",
    # HTTP client lifecycle
    "close_github_client",
    # Utilities
    "commit_summary",
    "commit_title",
    "handle_error_response",
    "normalize_response",
    "parse_link_header",
    "RateLimitInfo",
    # Exceptions
    "GitHubAPIError",
    "GitHubDecodeError",
    "PaginationLimitExceeded",
    # Types
    "Context",
    "Document",
    "LookupOutcome",
    "NormalizedResponse",
    "ReleaseLookup",
]

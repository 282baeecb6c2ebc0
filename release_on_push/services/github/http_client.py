"""
Shared HTTP client for GitHub API operations.

Provides a singleton Client with connection pooling for all GitHub API calls,
so following a long chain of pagination links reuses one connection.
"""

import logging

import httpx

logger = logging.getLogger(__name__)

# Module-level singleton client
_client: httpx.Client | None = None


def get_github_client() -> httpx.Client:
    """
    Get or create the shared HTTP client for GitHub API calls.

    Auth headers are passed per-request, not stored on the client.

    Returns:
        Shared httpx.Client configured for GitHub API
    """
    global _client
    if _client is None or _client.is_closed:
        _client = httpx.Client(
            timeout=httpx.Timeout(30.0, connect=5.0),
            limits=httpx.Limits(max_connections=20, max_keepalive_connections=10),
            http2=True,  # Enable HTTP/2 for GitHub API
        )
        logger.debug("Created new GitHub HTTP client with connection pooling")
    return _client


def close_github_client() -> None:
    """
    Close the shared HTTP client.

    Call once the run is finished.
    """
    global _client
    if _client is not None and not _client.is_closed:
        _client.close()
        _client = None
        logger.debug("Closed GitHub HTTP client")

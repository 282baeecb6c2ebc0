"""
Sending GitHub API requests and normalizing their responses.

A normalized response has its Link header parsed into a rel -> url mapping
and its JSON body decoded. All downstream code (pagination, commit walking,
the API accessors) works on NormalizedResponse only.
"""

import json
import logging
from typing import Any

import httpx

from release_on_push.services.github.exceptions import GitHubDecodeError
from release_on_push.services.github.helpers import (
    auth_headers,
    handle_error_response,
    parse_link_header,
)
from release_on_push.services.github.http_client import get_github_client
from release_on_push.services.github.types import Context, NormalizedResponse

logger = logging.getLogger(__name__)


def _request_url(response: httpx.Response) -> str:
    try:
        return str(response.request.url)
    except RuntimeError:
        # Response built without a request (e.g. in tests)
        return "<unknown>"


def normalize_response(response: httpx.Response) -> NormalizedResponse:
    """
    Attach parsed links and decode the JSON body of a response.

    A response without a Link header gets an empty links mapping.

    Raises:
        GitHubDecodeError: If the body is not valid JSON
    """
    try:
        body = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise GitHubDecodeError(_request_url(response), str(e)) from e

    return NormalizedResponse(
        status_code=response.status_code,
        headers=dict(response.headers),
        body=body,
        links=parse_link_header(response.headers.get("link")),
    )


def send(
    context: Context,
    url: str,
    params: dict[str, Any] | None = None,
) -> httpx.Response:
    """Issue an authenticated GET and return the raw response."""
    client = get_github_client()
    logger.debug(f"GET {url} params={params}")
    return client.get(url, headers=auth_headers(context), params=params)


def fetch(
    context: Context,
    url: str,
    params: dict[str, Any] | None = None,
) -> NormalizedResponse:
    """
    Issue an authenticated GET and normalize the response.

    Raises:
        GitHubAPIError: For any non-2xx status
        GitHubDecodeError: If the body is not valid JSON
    """
    response = send(context, url, params)
    handle_error_response(response, context.repo)
    return normalize_response(response)

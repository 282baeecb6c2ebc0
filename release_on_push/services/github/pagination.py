"""
Lazy pagination over GitHub's Link header.

GitHub list endpoints return one page per response and point to the
following page with a `rel="next"` link. paginate() turns that chain into a
generator of normalized responses that only fetches a page when the consumer
asks for it, so a caller that stops iterating early never pays for the rest.
"""

import logging
from collections.abc import Iterator

from release_on_push.services.github.exceptions import PaginationLimitExceeded
from release_on_push.services.github.responses import fetch
from release_on_push.services.github.types import Context, NormalizedResponse

logger = logging.getLogger(__name__)


def follow_link(context: Context, url: str) -> NormalizedResponse:
    """Fetch and normalize the page a link points to."""
    return fetch(context, url)


def paginate(
    context: Context,
    response: NormalizedResponse,
    max_pages: int | None = None,
) -> Iterator[NormalizedResponse]:
    """
    Yield `response` and every page reachable through its "next" links.

    Pages come out in link order. The absence of a "next" link is the only
    end condition; an empty page with a "next" link is still followed.

    Args:
        context: Supplies the credential for follow-up requests
        response: First page, already fetched
        max_pages: Optional upper bound on pages yielded

    Raises:
        GitHubAPIError: If following a link fails
        GitHubDecodeError: If a followed page has a malformed body
        PaginationLimitExceeded: If max_pages is reached and a "next" link remains
    """
    pages = 0
    while True:
        yield response
        pages += 1

        next_url = response.links.get("next")
        if next_url is None:
            logger.debug(f"Pagination finished after {pages} page(s)")
            return
        if max_pages is not None and pages >= max_pages:
            raise PaginationLimitExceeded(max_pages, next_url)

        logger.debug(f"Following next link to page {pages + 1}: {next_url}")
        response = follow_link(context, next_url)

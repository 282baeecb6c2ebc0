"""Root conftest — shared fixtures for all tests.

Provides:
- A read-only Context for a test repository
- A mocked shared HTTP client (no test ever touches the network)
"""

from __future__ import annotations

from collections.abc import Iterator
from unittest.mock import MagicMock, patch

import httpx
import pytest

from release_on_push.services.github.types import Context
from tests.helpers.mock_factories import API_URL, REPO, SHA, TOKEN


@pytest.fixture
def context() -> Context:
    return Context(api_url=API_URL, repo=REPO, sha=SHA, token=TOKEN)


@pytest.fixture
def github_client() -> Iterator[MagicMock]:
    """Replace the shared HTTP client; set `.get.side_effect` / `.return_value` per test."""
    client = MagicMock(spec=httpx.Client)
    with patch(
        "release_on_push.services.github.responses.get_github_client",
        return_value=client,
    ):
        yield client

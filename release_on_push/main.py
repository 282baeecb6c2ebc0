import logging
import sys

import httpx

from release_on_push.config import Settings, settings
from release_on_push.services.github import (
    Context,
    GitHubAPIError,
    GitHubDecodeError,
    GitHubReadOperations,
    close_github_client,
)
from release_on_push.services.release_notes import build_release_notes


def setup_logging(debug: bool = False) -> None:
    """Configure application logging."""
    # Format: timestamp - level - logger name - message
    log_format = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"
    date_format = "%H:%M:%S"

    # Logs go to stderr so stdout carries only the release notes body
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format=log_format,
        datefmt=date_format,
        stream=sys.stderr,
        force=True,
    )

    # Reduce noise from third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("hpack").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)


def context_from_settings(config: Settings) -> Context:
    """Build the run context from loaded settings."""
    return Context(
        api_url=config.github_api_url.rstrip("/"),
        repo=config.github_repository,
        sha=config.github_sha,
        token=config.github_token,
    )


def run(config: Settings) -> str:
    """Build the release notes body for the configured commit."""
    ops = GitHubReadOperations(context_from_settings(config), max_pages=config.max_pages)
    base = config.base_sha or ops.resolve_base()
    return build_release_notes(ops, base)


def main() -> None:
    """Print release notes for GITHUB_SHA since the most recent release."""
    setup_logging(settings.debug)

    if not settings.is_configured:
        logger.error("GITHUB_REPOSITORY, GITHUB_SHA and GITHUB_TOKEN must all be set")
        sys.exit(1)

    logger.info(f"Generating release notes for {settings.github_repository}@{settings.github_sha[:8]}")
    try:
        body = run(settings)
    except (GitHubAPIError, GitHubDecodeError, httpx.HTTPError) as e:
        logger.error(f"Release notes generation failed: {e}")
        sys.exit(1)
    finally:
        close_github_client()

    print(body)


if __name__ == "__main__":
    main()

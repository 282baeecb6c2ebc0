from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Run settings loaded from the GitHub Actions environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # GitHub - populated by the Actions runner (GITHUB_API_URL, GITHUB_REPOSITORY, ...)
    github_api_url: str = "https://api.github.com"
    github_repository: str = ""  # owner/name
    github_sha: str = ""
    github_token: str = ""

    # Commit range
    # Empty = look up the most recent release and use its tag commit
    base_sha: str = ""
    # Upper bound on commit pages followed; None = follow "next" links until exhausted
    max_pages: int | None = None

    # Application
    debug: bool = False

    @property
    def is_configured(self) -> bool:
        """Check if the repository, commit and token are all present."""
        return bool(self.github_repository and self.github_sha and self.github_token)


settings = Settings()

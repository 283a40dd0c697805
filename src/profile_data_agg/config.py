"""Application settings loaded once at startup.

Settings are read from the environment (and an optional .env file) and passed
explicitly to providers from the app lifespan; handlers never read os.environ.
"""
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Upstream credentials, endpoints and runtime options."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # -- Credentials --
    exchange_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("EXCHANGE_API_KEY", "EXCHANGERATE_API_KEY"),
    )
    news_api_key: str | None = None
    rest_countries_api_key: str | None = None

    # -- Upstream endpoints --
    random_user_url: str = "https://randomuser.me/api/"
    rest_countries_url: str = "https://restcountries.com/v3.1"
    exchange_rate_url: str = "https://v6.exchangerate-api.com/v6"
    news_api_url: str = "https://newsapi.org/v2"

    # -- HTTP --
    http_timeout: float = 10.0

    # -- News selection --
    news_page_size: int = 20
    news_limit: int = 5

    # -- Server --
    host: str = "127.0.0.1"
    port: int = 3000
    log_level: str = "INFO"

    def missing_credentials(self) -> list[str]:
        """Names of required API keys that are not configured."""
        missing = []
        if not self.exchange_api_key:
            missing.append("EXCHANGE_API_KEY")
        if not self.news_api_key:
            missing.append("NEWS_API_KEY")
        return missing


_settings: Settings | None = None


def get_settings() -> Settings:
    """Return a cached singleton Settings instance."""
    global _settings  # noqa: PLW0603
    if _settings is None:
        _settings = Settings()
    return _settings

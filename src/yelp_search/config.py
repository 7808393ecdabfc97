"""Configuration settings for the yelp_search package.

This module defines the settings used by the HTTP client and logging setup. It uses
Pydantic's BaseSettings so values can come from environment variables or a `.env`
file, e.g. ``YELP_API__API_KEY``.
"""

from functools import lru_cache

from pydantic import BaseModel, Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ApiSettings(BaseModel):
    """Connection details for the business search API.

    Attributes:
        api_key: Bearer token sent with every request.
        base_url: Root URL of the API, without a trailing slash.
        timeout: Request timeout in seconds.
        user_agent: User-Agent string to use for requests.
    """

    api_key: str = Field("", description="API key used as a bearer token")
    base_url: str = Field("https://api.yelp.com/v3", description="API root URL")
    timeout: int = Field(10, description="Request timeout in seconds")
    user_agent: str = Field("yelp-search/0.1", description="User-Agent string")

    @computed_field
    def headers(self) -> dict[str, str]:
        """Return the headers dictionary.

        Returns:
            A dictionary containing the HTTP headers sent with every API request.
        """
        return {
            "Authorization": f"Bearer {self.api_key}",
            "User-Agent": self.user_agent,
            "Accept": "application/json",
        }


class LoggingSettings(BaseModel):
    """Logging configuration settings.

    Attributes:
        level: The logging level (e.g., INFO, DEBUG).
        format: The log message format string.
    """

    level: str = Field("INFO", description="Logging level")
    format: str = Field(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log message format",
    )


class Settings(BaseSettings):
    """Global package settings.

    Attributes:
        api: API connection settings.
        logging: Logging configuration settings.
    """

    api: ApiSettings = Field(default_factory=ApiSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_prefix="YELP_",
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Return a cached instance of the settings.

    Returns:
        The global Settings instance.
    """
    return Settings()

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from siege_api import constants


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Ubisoft account used for the session exchange
    UBISOFT_EMAIL: str
    UBISOFT_PASSWORD: str

    # Upstream endpoints
    UBI_SERVICES_URL: str = constants.UBI_SERVICES_URL
    UBI_STATS_URL: str = constants.UBI_STATS_URL
    UBI_GAME_STATUS_URL: str = constants.UBI_GAME_STATUS_URL
    UBI_APP_ID: str = constants.UBI_APP_ID
    UBI_USER_AGENT: str = constants.UBI_USER_AGENT
    UBI_LOCALE: str = constants.UBI_LOCALE

    # HTTP
    SIEGE_HTTP_TIMEOUT_SECONDS: float = 15.0

    # Logging
    SIEGE_LOG_LEVEL: str = "INFO"
    SIEGE_LOG_FORMAT: str = "text"

    @property
    def services_url(self) -> str:
        return self.UBI_SERVICES_URL.rstrip("/")

    @property
    def stats_url(self) -> str:
        return self.UBI_STATS_URL.rstrip("/")


@lru_cache
def get_settings() -> Settings:
    return Settings()

"""
Configuration module using Pydantic Settings.

Credentials are optional at import time; require_setting() enforces them
when a request needs them.
"""

from dotenv import load_dotenv
from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from apps.core.errors import ConfigurationMissing

load_dotenv()


class WatsonConfig(BaseSettings):
    api_key: SecretStr | None = Field(default=None, alias="WATSON_API_KEY")
    url: str | None = Field(default=None, alias="WATSON_URL")
    version: str = Field(default="2022-04-07", alias="WATSON_VERSION")
    language: str = Field(default="en", alias="WATSON_LANGUAGE")
    min_length: int = Field(default=8, alias="WATSON_MINLEN")


class AppwriteConfig(BaseSettings):
    endpoint: str | None = Field(default=None, alias="APPWRITE_ENDPOINT")
    project_id: str | None = Field(default=None, alias="APPWRITE_PROJECT_ID")
    api_key: SecretStr | None = Field(default=None, alias="APPWRITE_API_KEY")
    database_id: str | None = Field(default=None, alias="APPWRITE_DATABASE_ID")
    analysis_collection_id: str | None = Field(
        default=None, alias="APPWRITE_ANALYSIS_COLLECTION_ID"
    )


class Settings(BaseSettings):
    """Application-wide settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    LOG_LEVEL: str = "INFO"

    # Sub-configs
    watson: WatsonConfig = Field(default_factory=WatsonConfig)
    appwrite: AppwriteConfig = Field(default_factory=AppwriteConfig)

    # Analysis settings
    max_text_length: int = 10_000
    model_tag: str = "watson-nlu-v1"

    def reload(self) -> None:
        """Reload settings from environment variables."""
        new_settings = Settings()
        self.__dict__.update(new_settings.__dict__)


def require_setting(value: str | SecretStr | None, env_name: str) -> str:
    """Return a configured value or raise ConfigurationMissing if it is blank."""
    if isinstance(value, SecretStr):
        value = value.get_secret_value()
    if value is None or str(value).strip() == "":
        raise ConfigurationMissing(f"Missing environment variable: {env_name}")
    return value


settings = Settings()

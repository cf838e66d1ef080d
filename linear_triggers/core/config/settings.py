"""Settings for the Linear trigger runtime.

Values are loaded from environment variables (and an optional .env file).
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from linear_triggers.core.config.enums import Environment, LogLevel


class Settings(BaseSettings):
    """Runtime settings with automatic env var loading.

    Attributes:
    ----------
        ENVIRONMENT (Environment): The deployment environment.
        LOG_LEVEL (LogLevel): Minimum level for emitted log records.
        LINEAR_API_URL (str): GraphQL endpoint of the Linear API.
        HTTP_TIMEOUT_SECONDS (float): Timeout for the outbound GraphQL request.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    ENVIRONMENT: Environment = Environment.LOCAL
    LOG_LEVEL: LogLevel = LogLevel.INFO

    LINEAR_API_URL: str = "https://api.linear.app/graphql"
    HTTP_TIMEOUT_SECONDS: float = Field(default=30.0, gt=0)

"""Application settings and configuration.

Settings are loaded from environment variables (and an optional ``.env``
file). Only the HTTP layer reads them; the storage and token core receives
every value it needs as an explicit constructor argument.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application metadata
    app_name: str = Field(default="Chirpy", alias="APP_NAME")
    app_version: str = Field(default="0.1.0", alias="APP_VERSION")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Security and authentication
    secret_key: str = Field(alias="SECRET_KEY")
    jwt_algorithm: str = Field(default="HS256", alias="JWT_ALGORITHM")
    access_token_expire_seconds: int = Field(
        default=3600,
        gt=0,
        alias="ACCESS_TOKEN_EXPIRE_SECONDS",
    )
    bcrypt_rounds: int = Field(default=12, ge=4, le=31, alias="BCRYPT_ROUNDS")
    webhook_api_key: str | None = Field(default=None, alias="WEBHOOK_API_KEY")

    # Snapshot storage
    database_path: str = Field(default="./database/database.json", alias="DATABASE_PATH")
    durable_writes: bool = Field(default=False, alias="DURABLE_WRITES")

    # Content rules
    max_post_length: int = Field(default=140, gt=0, alias="MAX_POST_LENGTH")

    model_config = SettingsConfigDict(
        env_file=".env",
        validate_assignment=True,
        extra="ignore",
    )


settings = Settings()  # type: ignore[call-arg]

from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    """Application configuration sourced from environment variables."""

    model_config = SettingsConfigDict(env_file="./.env", extra="ignore")

    SERVICE_NAME: str = "probe"

    # Server
    HOST: str = "127.0.0.1"
    PORT: int = 8000

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"

    # Where the demo service mounts the probe handlers
    LIVEZ_PATH: str = "/livez"
    READYZ_PATH: str = "/readyz"


config = Config()

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    db_host: str = "host.docker.internal"
    db_port: int = 5432
    db_database: str = "textinsight"
    db_username: str = "textinsight"
    db_password: str = "secret"

    storage_backend: str = "postgres"

    max_text_length: int = 50000
    default_language: str = "en"
    supported_languages: list[str] = ["en", "es", "fr", "de"]
    detect_language: bool = True

    default_analysis_types: list[str] = ["sentiment", "keywords", "entities", "readability"]
    analysis_max_workers: int = 4

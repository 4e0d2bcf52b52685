"""Application settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration settings."""

    log_level: str = "INFO"
    default_plan_terms: list[int] = [60, 120, 180, 240, 360]  # Terms compared when none given

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="SLOS_",
        extra="ignore",
    )


settings = Settings()

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Database
    database_url: str

    # JWT (issued elsewhere, verified here)
    JWT_SECRET: str
    JWT_ISS: str = "playmate-api"
    JWT_AUD: str = "playmate-app"
    ACCESS_TOKEN_TTL_SECONDS: int = 60 * 60 * 24 * 7  # 7 days

    CORS_ORIGINS: str = ""

    # naive datetimes from clients are read in this zone
    DEFAULT_TIMEZONE: str = "UTC"

    # how long a request waits for a per-field / per-membership lock
    LOCK_TIMEOUT_SECONDS: float = 10.0

    LOG_LEVEL: str = "INFO"

    def cors_origins(self) -> list[str]:
        raw = (self.CORS_ORIGINS or "").strip()
        if not raw:
            return []
        return [x.strip() for x in raw.split(",") if x.strip()]


settings = Settings()

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="HIKE_", extra="ignore")

    # Local SQLite file by default; any SQLAlchemy URL works.
    database_url: str = "sqlite:///./hikeTracker.db"
    # Seconds a storage call may wait on a locked database before failing.
    database_timeout: float = 5.0
    sql_echo: bool = False

    # Timezone of the device that picked hike dates; full timestamps are
    # converted to this zone before taking the calendar day.
    # Examples: "Australia/Sydney", "Europe/London", or "local" to use system tz.
    timezone: str = "local"

    log_level: str = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, v):
        if v in ("", None):
            return "INFO"
        return str(v).upper()


settings = Settings()

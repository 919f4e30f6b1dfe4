from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # simulated identity-service round trip for login/register
    auth_latency_seconds: float = 0.5

    session_key: str = "foodshare_user"
    session_backend: Literal["memory", "file", "mongo"] = "memory"
    session_dir: str = ".foodshare_sessions"

    mongo_uri: str = "mongodb://localhost:27017"
    mongo_db: str = "foodshare"

    # None keeps accounts in process memory
    directory_url: Optional[str] = None
    directory_timeout_seconds: float = 5.0
    directory_retries: int = 3
    directory_backoff_seconds: float = 0.25

    seed_demo_data: bool = True
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", env_prefix="FOODSHARE_", extra="ignore")

settings = Settings()

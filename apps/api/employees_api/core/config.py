from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from fastapi import Request
from pydantic_settings import BaseSettings

# Load environment variables once, at import time
load_dotenv()


class Settings(BaseSettings):
    db_file: Path = Path("./data/employees.db")
    seed_demo_data: bool = True

    host: str = "0.0.0.0"
    port: int = 3000

    # Comma-separated list, e.g.:
    # CORS_ORIGINS="http://localhost:5173,http://127.0.0.1:5173"
    cors_origins: str = ""

    max_list_limit: int = 500
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        extra = "ignore"

    @property
    def allow_origins(self) -> list[str]:
        origins = [o.strip() for o in self.cors_origins.split(",") if o.strip()]
        # Safe fallback for local dev if env var not set
        if not origins:
            origins = [
                "http://localhost:3000",
                "http://127.0.0.1:3000",
                "http://localhost:5173",
                "http://127.0.0.1:5173",
            ]
        return origins


@lru_cache
def get_settings() -> Settings:
    return Settings()


def current_settings(request: Request) -> Settings:
    """Settings the running app was built with."""
    return request.app.state.settings

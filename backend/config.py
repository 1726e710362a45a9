import json

from pydantic_settings import BaseSettings
from pydantic import field_validator
from pathlib import Path

_ROOT = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    data_path: str = str(_ROOT / "data" / "countries.json")
    dataset_url: str = ""
    fetch_timeout_seconds: float = 10.0
    cors_origins: list[str] = ["http://localhost:8000", "http://127.0.0.1:8000"]
    search_rate_limit: str = "60/minute"
    default_theme: str = "light"
    log_level: str = "INFO"

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        if isinstance(v, str):
            # Accept JSON array or comma-separated string
            v = v.strip()
            if v.startswith("["):
                return json.loads(v)
            return [s.strip() for s in v.split(",") if s.strip()]
        return v

    @field_validator("default_theme")
    @classmethod
    def check_theme(cls, v: str) -> str:
        v = v.strip().lower()
        if v not in ("light", "dark"):
            raise ValueError("default_theme must be 'light' or 'dark'")
        return v

    model_config = {
        "env_file": str(_ROOT / ".env"),
        "env_file_encoding": "utf-8",
    }


settings = Settings()

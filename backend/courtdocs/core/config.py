from pathlib import Path
from typing import List
from pydantic_settings import BaseSettings

PACKAGE_ROOT = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    # Server
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    ALLOWED_ORIGINS: List[str] = ["http://localhost:5173"]

    # Court rule dataset (JSON array of rule profiles)
    COURT_RULES_PATH: str = str(PACKAGE_ROOT / "data" / "court_rules.json")

    # Metrics
    WORDS_PER_PAGE: int = 250

    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()

from pydantic_settings import BaseSettings, SettingsConfigDict
from pathlib import Path


BASE_DIR = Path(__file__).resolve().parent.parent.parent

class Settings(BaseSettings): # load all key=value pairs from .env
    """ Load game settings"""
    DATABASE_URL: str = f"sqlite:///{BASE_DIR / 'data' / 'numberpath.db'}"
    LOG_FILE: str = "app_errors.log"

    # path search budgets
    ORTHOGONAL_SEARCH_MAX_STEPS: int = 500_000
    DIAGONAL_SEARCH_MAX_STEPS: int = 5_000
    ORTHOGONAL_START_CANDIDATES: int = 10
    DIAGONAL_START_CANDIDATES: int = 20

    # generation retries
    OBSTACLE_MAX_ATTEMPTS: int = 50
    GENERATION_RETRIES: int = 10

    DEFAULT_TOPOLOGY: str = "orthogonal" # "orthogonal" or "diagonal"

    model_config = SettingsConfigDict(
        env_file = BASE_DIR/".env",
        env_file_encoding = "utf-8",
        extra = "ignore",
    )

settings = Settings()

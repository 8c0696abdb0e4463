from pathlib import Path
# Use BaseSettings for environment variable loading
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List
import os

# Define a base directory using environment variable or default
# This allows flexibility in deployment (e.g., in containers)
PROJECT_ROOT_ENV = os.getenv("PROJECT_ROOT")
BASE_DIR = Path(PROJECT_ROOT_ENV).resolve() if PROJECT_ROOT_ENV else Path(__file__).resolve().parent.parent.parent

class Settings(BaseSettings):
    """Application Configuration using Pydantic BaseSettings."""
    # Load from .env file first, then environment variables. Ignore extras.
    model_config = SettingsConfigDict(env_file='.env', env_file_encoding='utf-8', extra='ignore')

    # --- Base Paths ---
    APP_DIR: Path = BASE_DIR / "app"
    STATIC_DIR: Path = APP_DIR / "static"
    TEMPLATES_DIR: Path = APP_DIR / "templates"

    # --- Dog API ---
    DOG_API_URL: str = "https://dog.ceo/api/breeds/image/random"
    REQUEST_TIMEOUT: float = 10.0  # Seconds, applies to connect and read

    # --- Theme (see app/ui/theme.py) ---
    THEME_PRIMARY: str = "#6A5ACD"
    THEME_ACCENT: str = "#E6E6FA"
    THEME_BACKGROUND: str = "#F8F8FF"
    THEME_TEXT: str = "#4B0082"
    THEME_ERROR: str = "#B00020"
    THEME_HEADER_TINT: str = "#FFFFFF"

    # --- Logging ---
    LOG_LEVEL: str = "INFO"

    # --- API Configuration ---
    API_HOST: str = "127.0.0.1"
    API_PORT: int = 8000
    # ALLOWED_HOSTS should be set restrictively in production via env var
    # Example: ALLOWED_HOSTS='["https://yourdomain.com", "https://www.yourdomain.com"]'
    ALLOWED_HOSTS: List[str] = ["*"]

    # --- Dynamic Attributes (Set after loading) ---
    BASE_URL: str = ""

    def __init__(self, **values):
        super().__init__(**values)
        self.BASE_URL = f"http://{self.API_HOST}:{self.API_PORT}"

# Instantiate settings - This single instance will be imported elsewhere
settings = Settings()

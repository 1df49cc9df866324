"""
Application configuration using Pydantic BaseSettings
"""

from pathlib import Path
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Application settings
    app_name: str = "Withdraw Receipts"
    app_env: str = "development"
    debug: bool = False

    # Server settings
    host: str = "0.0.0.0"
    port: int = 10000

    # Admin listing is only served when this is set
    admin_key: Optional[str] = None

    # Branding shown on the pages
    brand_name: str = "Withdrawal Desk"
    support_contact: Optional[str] = None

    # Prefix for receipt links returned by the API, e.g. https://desk.example.com
    public_base_url: str = ""

    # Logging
    log_level: str = "INFO"

    # CORS
    cors_origins: List[str] = ["*"]

    static_dir: Path = PACKAGE_DIR / "static"


# Global settings instance
settings = Settings()

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Loading priority (highest to lowest):
    1. Environment variables
    2. .env file
    3. Default values below
    """

    # Environment
    environment: str = "development"
    debug: bool = True

    # Application
    app_name: str = "TinyApp"
    app_version: str = "1.0.0"
    secret_key: str = "your-secret-key-here-change-in-production"

    # Sessions (signed cookie, see SessionMiddleware in main.py)
    session_cookie: str = "session"
    session_max_age: int = 14 * 24 * 60 * 60  # 14 days
    https_only: bool = False

    # URL Shortener specific
    base_url: str = "http://127.0.0.1:8080"
    short_url_length: int = 6
    max_retries: int = 10

    # Short code generation strategy
    short_code_strategy: str = "secure"  # Options: "secure", "random"
    short_code_seed: Optional[int] = None  # Only used by the "random" strategy

    # URL validation policy
    allowed_url_schemes: List[str] = ["http", "https"]  # Empty list = any scheme
    max_url_length: int = 2048

    # Accounts
    bcrypt_rounds: int = 12
    min_password_length: int = 8

    # Pydantic v2 configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Create settings instance
settings = Settings()

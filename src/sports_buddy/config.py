"""
# Configuration Management Module

Settings for the Sports Buddy API, built on **Pydantic Settings**.

## Loading Order

Higher layers override lower ones:

1. Environment variables (highest priority)
2. The file named by `SPORTS_BUDDY_CONFIG_PATH`
3. `.env` in the project root
4. Defaults declared on `Settings`

If no configuration file is found the application runs in environment-only mode.

## Required Settings

- `MONGODB_URL`: MongoDB connection string. The legacy `MONGO_URL` variable is
  accepted as well. An empty value fails validation at import time, which stops the
  process before it can serve any request.

## Usage

```python
from sports_buddy.config import settings

client = AsyncIOMotorClient(settings.MONGODB_URL)
```
"""

import os
from pathlib import Path
from typing import Any, List, Optional

from dotenv import load_dotenv
from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# --- Constants ---
DEFAULT_ENV_FILENAME: str = ".env"
CONFIG_ENV_VAR: str = "SPORTS_BUDDY_CONFIG_PATH"
PROJECT_ROOT: Path = Path(__file__).resolve().parent.parent.parent


# --- Config file discovery (no logging) ---
def get_config_path() -> Optional[str]:
    """
    Determines the configuration file path.

    Checks, in order, the `SPORTS_BUDDY_CONFIG_PATH` environment variable and a `.env`
    file in the project root. Returns `None` when neither exists, which leaves the
    application reading plain environment variables.

    Returns:
        Optional[str]: The path to the configuration file, or `None` if not found.
    """
    env_path: Optional[str] = os.environ.get(CONFIG_ENV_VAR)
    if env_path and os.path.exists(env_path):
        return env_path
    env_path_file: Path = PROJECT_ROOT / DEFAULT_ENV_FILENAME
    if env_path_file.exists():
        return str(env_path_file)
    return None


CONFIG_PATH: Optional[str] = get_config_path()
if CONFIG_PATH:
    load_dotenv(dotenv_path=CONFIG_PATH, override=True)


class Settings(BaseSettings):
    """
    Application configuration settings model.

    **Configuration Groups:**
    *   **Server**: Host, port, debug mode.
    *   **Database**: MongoDB connection details and collection names.
    *   **HTTP**: CORS origins and the optional static client directory.
    *   **Logging**: Level and optional log file.
    """

    model_config = SettingsConfigDict(
        env_file=CONFIG_PATH if CONFIG_PATH else None,
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="allow",
    )

    # Server configuration
    HOST: str = "127.0.0.1"
    PORT: int = 5678
    DEBUG: bool = False

    # MongoDB configuration
    MONGODB_URL: str = Field(
        default="",
        validation_alias=AliasChoices("MONGODB_URL", "MONGO_URL"),
        validate_default=True,
    )
    MONGODB_DATABASE: str = "sportsBuddy"
    MONGODB_CONNECTION_TIMEOUT: int = 10000
    MONGODB_SERVER_SELECTION_TIMEOUT: int = 5000

    # Collection names kept compatible with existing data
    ACCOUNTS_COLLECTION: str = "users"
    POSTS_COLLECTION: str = "sportsInfo"

    # CORS configuration (comma-separated)
    CORS_ORIGINS: str = "http://localhost:3000,https://sports-buddy-react-1.onrender.com"

    # Built web client served at "/" when set
    STATIC_DIR: Optional[str] = None

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None

    @field_validator("MONGODB_URL", mode="before")
    @classmethod
    def no_empty_urls(cls, v: Any, info: Any) -> Any:
        """
        Validates that the MongoDB URL is not empty.

        Args:
            v (Any): The URL string.
            info (Any): Validation info.

        Returns:
            Any: The validated URL.

        Raises:
            ValueError: If the URL is empty or whitespace.
        """
        if not v or not str(v).strip():
            raise ValueError(f"{info.field_name} must be set via environment or .env and not empty!")
        return v

    @field_validator("PORT", "MONGODB_CONNECTION_TIMEOUT", "MONGODB_SERVER_SELECTION_TIMEOUT", mode="before")
    @classmethod
    def validate_positive_integers(cls, v: Any, info: Any) -> int:
        """
        Validates that numeric settings are positive integers.

        Raises:
            ValueError: If the value is not a positive integer.
        """
        value = int(v)
        if value <= 0:
            raise ValueError(f"{info.field_name} must be a positive integer")
        return value

    @property
    def cors_origins_list(self) -> List[str]:
        """Allowed CORS origins, with blanks removed."""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


# Global settings instance
settings: Settings = Settings()

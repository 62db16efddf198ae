"""
Application configuration using Pydantic Settings
"""

from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support"""

    # API Settings
    api_title: str = "GrabPic API"
    api_description: str = "Photo search over the Unsplash API"
    api_version: str = "1.0.0"

    # Server Settings
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False

    # Logging Settings
    log_level: str = "INFO"
    log_format: str = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
    log_date_format: str = "%Y-%m-%d %H:%M:%S"
    log_file: str = "data/app.log"

    # Unsplash Settings
    unsplash_api_url: str = "https://api.unsplash.com/search/photos"
    unsplash_accept_version: str = "v1"
    # Sent as User-Agent; empty string disables the header
    unsplash_user_agent: str = "GrabPic-Library/1.0"
    unsplash_access_key: str = Field(
        default="",
        validation_alias=AliasChoices(
            "UNSPLASH_ACCESS_KEY", "NEXT_PUBLIC_UNSPLASH_ACCESS_KEY"
        ),
    )
    """
    Credential used by the HTTP server and CLI script only.
    The library entry points always take the key as an argument.
    """

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


def resolve_access_key(explicit: Optional[str] = None) -> str:
    """Return the credential to hand to the search core.

    An explicit, non-blank argument wins; otherwise the configured
    ``UNSPLASH_ACCESS_KEY`` (or ``NEXT_PUBLIC_UNSPLASH_ACCESS_KEY``) is used.
    Returns an empty string when neither is available.
    """
    if explicit and explicit.strip():
        return explicit.strip()
    return (settings.unsplash_access_key or "").strip()


# Global settings instance
settings = Settings()

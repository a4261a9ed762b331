"""Application configuration loaded from environment variables."""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings

DEFAULT_STORAGE_PATH = (
    Path(__file__).resolve().parent.parent / "mcp_servers" / "note_manager" / "notes_data.json"
)


class Settings(BaseSettings):
    """Application settings loaded from .env file."""

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "SMART_NOTES_",
    }

    # Persistence
    storage_path: Path = DEFAULT_STORAGE_PATH
    storage_key: str = "smartNotes"

    # Search box debounce window
    search_debounce_seconds: float = 0.3

    # MCP server
    server_host: str = "0.0.0.0"
    server_port: int = 8001

    log_level: str = "INFO"


settings = Settings()

"""
Application Configuration — Pydantic Settings

Centralized configuration management using environment variables.
Loads from .env file automatically with sensible defaults.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Priority: Environment variables > .env file > defaults
    """

    # === API Configuration ===
    PROJECT_NAME: str = "Agent Console"

    # === CORS Configuration ===
    CORS_ORIGINS: list[str] = [
        "http://localhost:8081",
        "http://localhost:19006",
        "http://127.0.0.1:8081",
        "http://127.0.0.1:19006",
    ]

    # === Logging ===
    LOG_LEVEL: str = "INFO"

    # === Cycle Orders ===
    STATUS_ORDER: list[str] = ["Pending", "Running", "Done"]
    VERDICT_ORDER: list[str] = ["Passed", "Failed"]

    # === Event Logs ===
    TOOL_LOG_MAX_ENTRIES: int = 0        # 0 = unbounded
    VALIDATION_HISTORY_MAX_ENTRIES: int = 20

    # === Sessions ===
    MAX_SESSIONS: int = 256

    # === DataVault Defaults ===
    DATAVAULT_INITIAL_SNAPSHOTS: int = 12
    DATAVAULT_INITIAL_MEMORY_GB: float = 1.8
    DATAVAULT_SNAPSHOT_SIZE_GB: float = 0.2
    DATAVAULT_RETENTION_DAYS: int = 30
    DATAVAULT_INITIAL_SYNC_LABEL: str = "2 min ago"

    # === Environment ===
    ENVIRONMENT: str = "local"  # local, development, staging, production

    # === Settings Configuration ===
    model_config = SettingsConfigDict(
        env_file=("agentdeck/.env", ".env"),  # Check both paths
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


# Singleton instance
settings = Settings()

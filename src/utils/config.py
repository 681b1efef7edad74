"""
Configuration management for the state workforce ranking tools.
"""
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from src.state_rankings.models import RankingSortBy

# Project root is where the .env file lives (src/utils -> src -> project root)
_THIS_FILE = Path(__file__).resolve()
_PROJECT_ROOT = _THIS_FILE.parent.parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None

    # Input handling
    normalize_state_names: bool = False

    # Output
    rankings_output_dir: str = "data/rankings"
    default_sort_by: RankingSortBy = RankingSortBy.SCORE

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @property
    def output_dir(self) -> Path:
        """Output directory resolved against the project root when relative"""
        path = Path(self.rankings_output_dir)
        return path if path.is_absolute() else _PROJECT_ROOT / path


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get or create the global settings instance.

    Returns:
        Settings instance loaded from environment
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reload_settings() -> Settings:
    """
    Force reload settings from environment.

    Returns:
        New Settings instance
    """
    global _settings
    _settings = Settings()
    return _settings

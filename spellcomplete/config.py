"""
Configuration management using Pydantic Settings.
Loads configuration from environment variables and .env file.
"""
from typing import List, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application Configuration
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    LOG_LEVEL: str = "INFO"

    # CORS Configuration
    CORS_ORIGINS: str = "*"

    # Development/Debug
    DEBUG: bool = False
    RELOAD: bool = False

    # Spell-check Configuration
    SPELLCHECK_ENABLED: bool = True  # Load dictionaries on startup
    SPELLCHECK_DICTIONARY_PATH: str = "./dictionaries"  # Directory holding <locale>.aff / <locale>.dic
    SPELLCHECK_PRIMARY_LOCALE: str = "en_US"
    SPELLCHECK_SECONDARY_LOCALE: str = "es_ES"
    SPELLCHECK_SUGGESTION_CACHE_SIZE: int = 1024  # Memoized suggestion lookups per locale (0 disables)
    SPELLCHECK_SUGGESTIONS_PER_LOCALE: int = 3  # Suggestions requested from each locale
    SPELLCHECK_SUGGESTION_COUNT: int = 5  # Max combined suggestions per misspelled word
    SPELLCHECK_COMPLETION_SUGGESTIONS: int = 5  # Per-locale suggestions scanned for completions
    SPELLCHECK_MIN_WORD_LENGTH: int = 1  # Skip words shorter than this

    # Suggestion ranking weights
    SPELLCHECK_RANK_FIRST_LETTER_BONUS: int = 10
    SPELLCHECK_RANK_LENGTH_PENALTY: int = 2
    SPELLCHECK_RANK_SECONDARY_LOCALE_BONUS: int = 2

    # Logging Configuration (Optional - per-module log levels)
    APP_LOG_LEVEL: Optional[str] = None
    UVICORN_LOG_LEVEL: Optional[str] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True
    )

    @property
    def cors_origins_list(self) -> List[str]:
        """Parse CORS origins from comma-separated string."""
        if self.CORS_ORIGINS == "*":
            return ["*"]
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    @property
    def locales(self) -> List[str]:
        """Locales in preference order, primary first."""
        return [self.SPELLCHECK_PRIMARY_LOCALE, self.SPELLCHECK_SECONDARY_LOCALE]


# Global settings instance
settings = Settings()

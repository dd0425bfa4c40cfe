from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be configured via .env file or environment variables.
    """

    # Database
    DATABASE_URL: str
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 20

    # JWT Authentication
    SECRET_KEY: str

    # Application
    APP_NAME: str = "Emlak CRM API"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # CORS
    CORS_ORIGINS: str = ""
    CORS_ALLOW_CREDENTIALS: bool = True

    # Field encryption for TC Kimlik No / IBAN (32 bytes as 64 hex chars)
    ENCRYPTION_KEY: str

    # Text extraction upstream
    TEXT_EXTRACTION_API_URL: str = "https://api.flavius.app/api/v1/process-file"
    TEXT_EXTRACTION_ID_TOKEN: str = ""
    TEXT_EXTRACTION_APP_CHECK_TOKEN: str = ""
    TEXT_EXTRACTION_MAX_FILE_SIZE: int = 100 * 1024 * 1024
    TEXT_EXTRACTION_TIMEOUT: float = 120.0

    # Contract PDF
    PDF_FONT_PATH: str | None = None
    PDF_FONT_BOLD_PATH: str | None = None
    PDF_COMPRESS: bool = False
    PDF_MIN_SIZE_BYTES: int = 10_000
    PDF_MAX_SIZE_BYTES: int = 10 * 1024 * 1024
    PDF_STORAGE_DIR: str = "storage"

    # Meetings / contracts
    MEETING_REMINDER_MINUTES: int = 30
    MEETING_NOTIFIER_ENABLED: bool = False
    MEETING_POLL_INTERVAL_SECONDS: float = 60.0
    EXPIRING_CONTRACT_DAYS: int = 30

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
    )

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS_ORIGINS from comma-separated string"""
        if not self.CORS_ORIGINS:
            return []
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


# Global settings instance
settings = Settings()

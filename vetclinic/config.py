"""
Application configuration settings loaded from environment variables.
Uses pydantic_settings for validation and type conversion.
"""
from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings class with environment variable validation.

    Attributes:
        database_url: SQLAlchemy connection string for the clinic database
        secret_key: Secret key for session token signing
        algorithm: Algorithm used for session token signing (HS256)
        access_token_expire_days: Session token validity window in days
        google_client_id: OAuth client id that Google ID tokens must be issued for
        request_timeout_seconds: Bound applied to storage and identity-provider calls

        # Server settings
        cors_origins: Origins allowed by the CORS middleware
        port: Port the server listens on
        log_level: Root logging level

        # Bootstrap admin settings (optional)
        bootstrap_admin_email: Optional admin email for first admin creation
        bootstrap_admin_password: Optional admin password for first admin creation
        bootstrap_admin_name: Display name given to the bootstrap admin
    """
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Database settings
    database_url: str

    # Session token settings
    secret_key: str
    algorithm: str = "HS256"
    access_token_expire_days: int = 7

    # Federated identity settings
    google_client_id: Optional[str] = None

    request_timeout_seconds: int = 10

    # Server settings
    cors_origins: List[str] = ["*"]
    port: int = 3000
    log_level: str = "INFO"

    # Bootstrap admin settings (optional - only used for first admin creation)
    bootstrap_admin_email: Optional[str] = None
    bootstrap_admin_password: Optional[str] = None
    bootstrap_admin_name: str = "Administrador"


@lru_cache
def get_settings() -> Settings:
    """
    Build the settings once per process.

    Returns:
        Settings: Cached settings instance
    """
    return Settings()

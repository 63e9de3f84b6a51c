"""
Environment settings for the product import
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ImportSettings(BaseSettings):
    """Process wide settings, read from the environment or a .env file"""

    model_config = SettingsConfigDict(
        env_prefix="PRODUCT_IMPORT_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",  # Ignore extra environment variables
    )

    # Database
    database_url: str = Field(default="sqlite:///./product_import.db")
    database_echo: bool = Field(default=False)

    # YAML file holding the import configuration (callbacks, date format, ...)
    configuration_path: str = Field(default="product_import.yaml")

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="%(asctime)s - %(name)s - %(levelname)s - %(message)s")


@lru_cache()
def get_import_settings() -> ImportSettings:
    """Get cached import settings instance"""
    return ImportSettings()

"""
Logging setup for the product import
"""
import logging
from typing import Optional

from product_import.core.settings import ImportSettings, get_import_settings


def configure_logging(settings: Optional[ImportSettings] = None) -> None:
    """Configure the root logger from the import settings"""
    settings = settings or get_import_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format=settings.log_format
    )

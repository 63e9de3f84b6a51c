"""Configuration of the product import."""

from .config_loader import ImportConfigLoader
from .config_schema import ImportConfiguration

__all__ = ["ImportConfigLoader", "ImportConfiguration"]

"""Utility to load the import configuration from a YAML file."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, MutableMapping, Optional

import yaml
from pydantic import ValidationError

from product_import.core.exceptions import ConfigurationException

from .config_schema import ImportConfiguration

logger = logging.getLogger(__name__)


class ImportConfigLoader:
    """Handle loading and caching the import configuration."""

    def __init__(self, config_path: str | Path) -> None:
        self._path = Path(config_path)
        self._cached_config: Optional[ImportConfiguration] = None

    @property
    def path(self) -> Path:
        return self._path

    def load(self, *, use_cache: bool = True) -> ImportConfiguration:
        if use_cache and self._cached_config is not None:
            return self._cached_config.model_copy(deep=True)

        if not self._path.exists():
            raise ConfigurationException(
                f"Import configuration file '{self._path}' does not exist",
                details={"path": str(self._path)},
            )

        raw_config = self._read_yaml()
        try:
            config = ImportConfiguration.model_validate(raw_config)
        except ValidationError as exc:
            raise ConfigurationException(
                f"Invalid import configuration in '{self._path}'",
                details={"path": str(self._path), "errors": exc.errors(include_url=False)},
            ) from exc

        logger.info("Loaded import configuration from %s", self._path)
        self._cached_config = config
        return config.model_copy(deep=True)

    def refresh(self) -> ImportConfiguration:
        return self.load(use_cache=False)

    def _read_yaml(self) -> MutableMapping[str, Any]:
        try:
            with self._path.open("r", encoding="utf-8") as handle:
                data = yaml.safe_load(handle) or {}
        except yaml.YAMLError as exc:
            raise ConfigurationException(
                f"Can't parse import configuration '{self._path}': {exc}",
                details={"path": str(self._path)},
            ) from exc

        if not isinstance(data, MutableMapping):
            raise ConfigurationException(
                "Import configuration must be a YAML mapping",
                details={"path": str(self._path)},
            )
        return dict(data)

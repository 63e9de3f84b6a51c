"""
Factory wiring a bunch subject to the catalog database
"""
import logging
from typing import Optional

from sqlalchemy.orm import Session

from product_import.callbacks.registry import CallbackRegistry
from product_import.config.config_loader import ImportConfigLoader
from product_import.config.config_schema import ImportConfiguration
from product_import.core.settings import ImportSettings, get_import_settings
from product_import.services.product_processor import ProductProcessor
from product_import.subjects.bunch_subject import BunchSubject
from product_import.subjects.row_context import RowContext

logger = logging.getLogger(__name__)


class SubjectFactory:
    """Creates ready to use subjects, one per bunch"""

    def __init__(
        self,
        configuration: Optional[ImportConfiguration] = None,
        callback_registry: Optional[CallbackRegistry] = None,
        settings: Optional[ImportSettings] = None,
    ):
        self.settings = settings or get_import_settings()
        self.configuration = configuration
        self.callback_registry = callback_registry or CallbackRegistry()

    def get_configuration(self) -> ImportConfiguration:
        """
        Returns the import configuration.

        Falls back to the YAML file of the settings, and to the default
        configuration when that file doesn't exist.
        """
        if self.configuration is None:
            loader = ImportConfigLoader(self.settings.configuration_path)
            if loader.path.exists():
                self.configuration = loader.load()
            else:
                logger.info("No import configuration at %s, using defaults", loader.path)
                self.configuration = ImportConfiguration()
        return self.configuration

    def create_subject(self, db: Session, context: Optional[RowContext] = None) -> BunchSubject:
        """
        Creates a subject for the session and initializes its callback mappings.

        Args:
            db: Database session the bunch is persisted with
            context: Row context the bunch loop updates, a new one if omitted

        Returns:
            BunchSubject on which set_up() has already been invoked
        """
        subject = BunchSubject(
            ProductProcessor.from_session(db),
            self.get_configuration(),
            context=context,
            callback_registry=self.callback_registry,
        )
        subject.set_up()
        return subject

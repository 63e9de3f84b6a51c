"""
Interface for the typed EAV value repositories (ISP)
"""
from abc import abstractmethod
from typing import Optional

from product_import.core.interfaces import IRecordRepository, Record
from product_import.models.enums import BackendType


class IProductAttributeRepository(IRecordRepository):
    """Interface for one of the datetime/decimal/int/text/varchar value tables"""

    @property
    @abstractmethod
    def backend_type(self) -> BackendType:
        """The backend type whose values the repository stores"""
        pass

    @abstractmethod
    def load_by_entity_id_and_attribute_id_and_store_id(
        self, entity_id: int, attribute_id: int, store_id: int
    ) -> Optional[Record]:
        """Loads the value of one attribute of one product in one store"""
        pass

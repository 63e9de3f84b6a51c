"""
Base interfaces of the import, one narrow interface per entity kind (ISP)
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from product_import.models.enums import DeleteStrategy

Record = Dict[str, Any]


class IRecordRepository(ABC):
    """Interface every entity repository implements"""

    @abstractmethod
    def persist(self, record: Record) -> Any:
        """Inserts or updates the record, returns its primary key"""
        pass

    @abstractmethod
    def delete(self, row: Record, strategy: Optional[DeleteStrategy] = None) -> None:
        """Deletes the rows matching the strategy's key in the passed row"""
        pass

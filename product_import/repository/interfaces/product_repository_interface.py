"""
Interface for the Product Repository (ISP)
"""
from abc import abstractmethod
from typing import Optional

from product_import.core.interfaces import IRecordRepository, Record


class IProductRepository(IRecordRepository):
    """Interface for the product entity repository"""

    @abstractmethod
    def load_by_sku(self, sku: str) -> Optional[Record]:
        """Loads a product by its SKU"""
        pass
